"""FastAPI dependencies for progress tracking."""

from typing import Annotated

from fastapi import Depends

from coursehub.store.dependencies import StorageServiceDep

from .service import ProgressService


async def get_progress_service(storage: StorageServiceDep) -> ProgressService:
    """Build a ProgressService over the application's storage."""
    return ProgressService(storage)


ProgressServiceDep = Annotated[ProgressService, Depends(get_progress_service)]
