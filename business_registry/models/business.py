from pydantic import BaseModel, Field, NonNegativeFloat, NonNegativeInt
from pydantic.alias_generators import to_camel
from typing import Optional, Union
import enum


UDYAM_NUMBER_PATTERN = r"^UDYAM-[A-Z]{2}-\d{2}-\d{7}$"


class BusinessStatus(str, enum.Enum):
    ACTIVE = "Active"
    PENDING = "Pending"
    INACTIVE = "Inactive"


class BusinessRecord(BaseModel):
    """A registered business as persisted in the registry document"""

    id: str
    name: str
    udyam_number: str
    category: str
    status: BusinessStatus = BusinessStatus.PENDING
    registration_date: str
    location: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    pincode: Optional[str] = None
    employees: Optional[int] = Field(None, ge=0)
    owner_name: str
    email: str
    phone: str
    website: Optional[str] = None
    description: Optional[str] = None
    annual_turnover: Optional[Union[NonNegativeInt, NonNegativeFloat]] = None
    investment_in_plant: Optional[Union[NonNegativeInt, NonNegativeFloat]] = None
    scraped_at: Optional[str] = None

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        extra = "ignore"

    def to_document(self) -> dict:
        """JSON-ready dict using the camelCase field names of the document"""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
