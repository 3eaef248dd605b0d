from fastapi import APIRouter, Body, Depends, Query, status
from typing import Any, Optional

from business_registry.api.dependencies import (
    get_app_settings, get_mutation_engine, get_query_engine, get_store
)
from business_registry.config import Settings
from business_registry.core.mutation_engine import MutationEngine
from business_registry.core.query_engine import QueryEngine
from business_registry.core.validation import parse_create, parse_update
from business_registry.models.business import BusinessRecord
from business_registry.schemas.business import (
    BusinessListResponse, BusinessQuery, MessageResponse, SortField, SortOrder
)
from business_registry.storage import JsonRecordStore

router = APIRouter()


@router.get("/businesses", response_model=BusinessListResponse, response_model_exclude_none=True)
async def list_businesses(
    page: int = Query(1, ge=1),
    limit: Optional[int] = Query(None, ge=1),
    status_filter: Optional[str] = Query(None, alias="status"),
    category: Optional[str] = Query(None),
    search: Optional[str] = Query(None),
    sort_by: SortField = Query(SortField.NAME, alias="sortBy"),
    sort_order: SortOrder = Query(SortOrder.ASC, alias="sortOrder"),
    store: JsonRecordStore = Depends(get_store),
    engine: QueryEngine = Depends(get_query_engine),
    settings: Settings = Depends(get_app_settings),
):
    """List businesses with filtering, search, sorting and pagination"""
    query = BusinessQuery(
        status=status_filter,
        category=category,
        search=search,
        sort_by=sort_by,
        sort_order=sort_order,
        page=page,
        limit=limit or settings.DEFAULT_PAGE_SIZE,
    )
    records = await store.load_all()
    return engine.execute(records, query)


@router.get("/businesses/{business_id}", response_model=BusinessRecord, response_model_exclude_none=True)
async def get_business(
    business_id: str,
    engine: MutationEngine = Depends(get_mutation_engine),
):
    """Get a specific business"""
    return await engine.get(business_id)


@router.post(
    "/businesses",
    response_model=BusinessRecord,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
async def create_business(
    payload: Any = Body(...),
    engine: MutationEngine = Depends(get_mutation_engine),
):
    """Register a new business"""
    return await engine.create(parse_create(payload))


@router.put("/businesses/{business_id}", response_model=BusinessRecord, response_model_exclude_none=True)
async def update_business(
    business_id: str,
    payload: Any = Body(...),
    engine: MutationEngine = Depends(get_mutation_engine),
):
    """Update fields of an existing business"""
    return await engine.update(business_id, parse_update(payload))


@router.delete("/businesses/{business_id}", response_model=MessageResponse)
async def delete_business(
    business_id: str,
    engine: MutationEngine = Depends(get_mutation_engine),
):
    """Delete a business"""
    await engine.delete(business_id)
    return {"message": "Business deleted successfully"}
