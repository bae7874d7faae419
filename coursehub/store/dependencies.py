"""FastAPI dependencies for store access.

Provides dependency injection for:
- The application's StorageService
- Storage error translation
"""

from typing import Annotated

from fastapi import Depends, HTTPException, Request, status

from .service import StorageError, StorageService


async def get_storage_service(request: Request) -> StorageService:
    """Get the storage service from app state.

    Args:
        request: FastAPI request

    Returns:
        StorageService instance
    """
    storage = getattr(request.app.state, "storage_service", None)
    if storage is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Storage not available",
        )
    return storage


StorageServiceDep = Annotated[StorageService, Depends(get_storage_service)]


def handle_storage_error(error: StorageError) -> HTTPException:
    """Convert storage errors to HTTP exceptions.

    Args:
        error: Storage error

    Returns:
        HTTPException with appropriate status code
    """
    status_map = {
        "not_found": status.HTTP_404_NOT_FOUND,
        "conflict": status.HTTP_409_CONFLICT,
    }

    status_code = status_map.get(error.code, status.HTTP_500_INTERNAL_SERVER_ERROR)

    return HTTPException(
        status_code=status_code,
        detail=error.message,
    )
