from fastapi import APIRouter, Depends

from business_registry.api.dependencies import get_app_settings, get_store
from business_registry.config import Settings
from business_registry.core.mutation_engine import format_timestamp, utc_now
from business_registry.core.statistics import compute_statistics
from business_registry.schemas.business import HealthResponse, StatsResponse
from business_registry.storage import JsonRecordStore

router = APIRouter()


@router.get("/stats", response_model=StatsResponse)
async def get_stats(store: JsonRecordStore = Depends(get_store)):
    """Registry totals by status and category"""
    records = await store.load_all()
    return compute_statistics(records)


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: Settings = Depends(get_app_settings)):
    """Health check endpoint"""
    return {
        "status": "OK",
        "timestamp": format_timestamp(utc_now()),
        "version": settings.API_VERSION,
    }
