from pydantic import BaseModel, EmailStr, Field, NonNegativeFloat, NonNegativeInt, WrapValidator
from pydantic.alias_generators import to_camel
from typing import Annotated, Optional, List, Dict, Union
import enum

from business_registry.models.business import BusinessRecord, BusinessStatus, UDYAM_NUMBER_PATTERN


# Fields every new business must carry, in the order they are checked
REQUIRED_FIELDS = ("name", "category", "ownerName", "email", "phone")


def _as_given(value, handler):
    handler(value)
    return value


# Validated as an address but stored exactly as the client sent it
AddressAsGiven = Annotated[EmailStr, WrapValidator(_as_given)]


class SortField(str, enum.Enum):
    NAME = "name"
    REGISTRATION_DATE = "registrationDate"
    EMPLOYEES = "employees"


class SortOrder(str, enum.Enum):
    ASC = "asc"
    DESC = "desc"


class _CamelModel(BaseModel):
    class Config:
        alias_generator = to_camel
        populate_by_name = True
        extra = "ignore"


# Request Schemas
class BusinessCreate(_CamelModel):
    name: str
    category: str
    owner_name: str
    email: AddressAsGiven
    phone: str
    udyam_number: Optional[str] = Field(None, pattern=UDYAM_NUMBER_PATTERN)
    status: Optional[BusinessStatus] = None
    registration_date: Optional[str] = None
    location: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    pincode: Optional[str] = None
    employees: Optional[int] = Field(None, ge=0)
    website: Optional[str] = None
    description: Optional[str] = None
    annual_turnover: Optional[Union[NonNegativeInt, NonNegativeFloat]] = None
    investment_in_plant: Optional[Union[NonNegativeInt, NonNegativeFloat]] = None
    scraped_at: Optional[str] = None


class BusinessUpdate(_CamelModel):
    """Partial update; only fields present in the request are applied"""

    name: Optional[str] = None
    category: Optional[str] = None
    owner_name: Optional[str] = None
    email: Optional[AddressAsGiven] = None
    phone: Optional[str] = None
    udyam_number: Optional[str] = Field(None, pattern=UDYAM_NUMBER_PATTERN)
    status: Optional[BusinessStatus] = None
    registration_date: Optional[str] = None
    location: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    pincode: Optional[str] = None
    employees: Optional[int] = Field(None, ge=0)
    website: Optional[str] = None
    description: Optional[str] = None
    annual_turnover: Optional[Union[NonNegativeInt, NonNegativeFloat]] = None
    investment_in_plant: Optional[Union[NonNegativeInt, NonNegativeFloat]] = None
    scraped_at: Optional[str] = None


class BusinessQuery(_CamelModel):
    status: Optional[str] = None
    category: Optional[str] = None
    search: Optional[str] = None
    sort_by: SortField = SortField.NAME
    sort_order: SortOrder = SortOrder.ASC
    page: int = Field(1, ge=1)
    limit: int = Field(10, ge=1)


# Response Schemas
class BusinessListResponse(_CamelModel):
    records: List[BusinessRecord]
    total: int
    page: int
    limit: int
    total_pages: int


class StatsResponse(BaseModel):
    total: int
    active: int
    pending: int
    inactive: int
    categories: Dict[str, int]


class HealthResponse(BaseModel):
    status: str
    timestamp: str
    version: str


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    error: str
