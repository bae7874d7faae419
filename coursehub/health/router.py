"""Health check endpoints."""

from fastapi import APIRouter, Request

from coursehub.config import Settings


router = APIRouter(prefix="/health", tags=["health"])


def _settings(request: Request) -> Settings:
    return request.app.state.settings


@router.get("/live")
async def liveness() -> dict[str, str]:
    """Liveness probe - checks if the application is running."""
    return {"status": "alive"}


@router.get("/ready")
async def readiness(request: Request) -> dict[str, str | bool | dict[str, int]]:
    """Readiness probe - reports whether the store is attached and its size."""
    settings = _settings(request)
    storage = getattr(request.app.state, "storage_service", None)
    return {
        "status": "ready" if storage is not None else "starting",
        "environment": settings.environment,
        "debug": settings.debug,
        "entities": storage.store.counts() if storage is not None else {},
    }


@router.get("")
async def health(request: Request) -> dict[str, str]:
    """General health check endpoint."""
    settings = _settings(request)
    return {
        "status": "healthy",
        "app_name": settings.app_name,
        "version": settings.app_version,
        "environment": settings.environment,
    }
