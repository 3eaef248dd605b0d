"""
Boundary validation: raw JSON bodies -> strict request schemas.

Errors are reported as ``ValidationError`` with a message naming the
offending field by its camelCase name, e.g. ``"email is required"``.
Bodies may use either camelCase or snake_case keys.
"""
from typing import Any, Dict, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from business_registry.core.exceptions import ValidationError
from business_registry.models.business import BusinessRecord
from business_registry.schemas.business import REQUIRED_FIELDS, BusinessCreate, BusinessUpdate

SchemaT = TypeVar("SchemaT", bound=BaseModel)

# Fields that may be omitted from an update but never cleared by one
NON_NULLABLE_ON_UPDATE = REQUIRED_FIELDS + ("status", "udyamNumber", "registrationDate")


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def _ensure_object(payload: Any) -> Dict[str, Any]:
    if not isinstance(payload, dict):
        raise ValidationError("Request body must be a JSON object")
    return payload


def _alias(schema: Type[BaseModel], name: str) -> str:
    field = schema.model_fields.get(name)
    if field is None or not field.alias:
        return name
    return field.alias


def _by_alias(schema: Type[SchemaT], payload: Dict[str, Any]) -> Dict[str, Any]:
    """Rename snake_case field names to their aliases; the alias wins when both are sent"""
    normalized = {}
    for key, value in payload.items():
        alias = _alias(schema, key)
        if alias != key and alias in payload:
            continue
        normalized[alias] = value
    return normalized


def _parse(schema: Type[SchemaT], payload: Dict[str, Any]) -> SchemaT:
    try:
        return schema.model_validate(payload)
    except PydanticValidationError as e:
        error = e.errors()[0]
        loc = error.get("loc") or ("body",)
        field = _alias(schema, str(loc[0]))
        if error.get("type") == "missing":
            raise ValidationError(f"{field} is required", field=field) from e
        raise ValidationError(f"{field} is invalid: {error.get('msg')}", field=field) from e


def parse_create(payload: Any) -> BusinessCreate:
    payload = _by_alias(BusinessCreate, _ensure_object(payload))
    for field in REQUIRED_FIELDS:
        if _is_blank(payload.get(field)):
            raise ValidationError(f"{field} is required", field=field)
    return _parse(BusinessCreate, payload)


def parse_update(payload: Any) -> BusinessUpdate:
    payload = _by_alias(BusinessUpdate, _ensure_object(payload))
    for field in NON_NULLABLE_ON_UPDATE:
        if field in payload and _is_blank(payload[field]):
            raise ValidationError(f"{field} is required", field=field)
    # id is never replaced, whatever the body says
    payload = {key: value for key, value in payload.items() if key != "id"}
    return _parse(BusinessUpdate, payload)


def build_record(fields: Dict[str, Any]) -> BusinessRecord:
    """Assemble a stored record, reporting failures as ``ValidationError``"""
    return _parse(BusinessRecord, fields)
