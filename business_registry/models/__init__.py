from business_registry.models.business import BusinessRecord, BusinessStatus, UDYAM_NUMBER_PATTERN

__all__ = [
    "BusinessRecord",
    "BusinessStatus",
    "UDYAM_NUMBER_PATTERN",
]
