"""
Error taxonomy for the registry service.

The HTTP layer maps these to status codes:
ValidationError -> 400, NotFoundError -> 404, StorageError (including
IdentifierExhaustedError) -> 500.
"""
from typing import Optional


class RegistryError(Exception):
    """Base class for all registry errors"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(RegistryError):
    """Missing or malformed input"""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class NotFoundError(RegistryError):
    """No business with the requested id"""

    def __init__(self, business_id: str, message: str = "Business not found"):
        super().__init__(message)
        self.business_id = business_id


class StorageError(RegistryError):
    """The registry document could not be read or written"""


class IdentifierExhaustedError(StorageError):
    """No unused id or Udyam number could be drawn"""
