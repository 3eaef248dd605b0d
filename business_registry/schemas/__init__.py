# Pydantic schemas
from business_registry.schemas.business import (
    REQUIRED_FIELDS,
    SortField, SortOrder,
    BusinessCreate, BusinessUpdate, BusinessQuery,
    BusinessListResponse, StatsResponse, HealthResponse,
    MessageResponse, ErrorResponse,
)

__all__ = [
    "REQUIRED_FIELDS",
    "SortField", "SortOrder",
    "BusinessCreate", "BusinessUpdate", "BusinessQuery",
    "BusinessListResponse", "StatsResponse", "HealthResponse",
    "MessageResponse", "ErrorResponse",
]
