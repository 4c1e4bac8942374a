"""
Catalog endpoints for API v1.

Listing the catalog requires a valid access token; fetching a single
service by id is public.
"""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, HTTPException, Path, Query, status
from motor.motor_asyncio import AsyncIOMotorDatabase

from clean_co_api.app.core.config import settings
from clean_co_api.app.core.db import get_database
from clean_co_api.app.core.security import get_current_user
from clean_co_api.app.schemas.service import ServiceList
from clean_co_api.app.services.catalog_service import CatalogService
from clean_co_api.app.services.query_builder import build_service_query


router = APIRouter()


def get_catalog_service(db: AsyncIOMotorDatabase = Depends(get_database)) -> CatalogService:
    return CatalogService(db[settings.services_collection])


@router.get("", response_model=ServiceList)
async def list_services(
    current_user: dict = Depends(get_current_user),
    category: Optional[str] = Query(None, description="Exact category to match"),
    sort_field: Optional[str] = Query(None, alias="sortField", description="Field to sort by, e.g. price"),
    sort_order: Optional[str] = Query(None, alias="sortOrder", description="asc or desc"),
    page: Optional[int] = Query(None, ge=1, description="1-based page number"),
    limit: Optional[int] = Query(None, ge=1, description="Page size; omit for all records"),
    service: CatalogService = Depends(get_catalog_service),
) -> Dict[str, Any]:
    """List services with optional category filter, sorting and pagination.

    ``total`` in the response is the number of services in the whole
    catalog, independent of ``category``.
    """
    try:
        query = build_service_query(category, sort_field, sort_order, page, limit)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return await service.list_services(query)


@router.get("/{service_id}")
async def get_service(
    service_id: str = Path(..., description="ObjectId of the service"),
    service: CatalogService = Depends(get_catalog_service),
) -> Dict[str, Any]:
    """Fetch one service.  Unknown or malformed ids give 404."""
    try:
        return await service.get_service(service_id)
    except LookupError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
