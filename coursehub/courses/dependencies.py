"""FastAPI dependencies for the course catalog."""

from typing import Annotated

from fastapi import Depends

from coursehub.store.dependencies import StorageServiceDep

from .service import CatalogService


async def get_catalog_service(storage: StorageServiceDep) -> CatalogService:
    """Build a CatalogService over the application's storage."""
    return CatalogService(storage)


CatalogServiceDep = Annotated[CatalogService, Depends(get_catalog_service)]
