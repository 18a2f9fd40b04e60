"""
Validation utilities for the Rental Property API.

Each ``validate_*`` function runs the matching pydantic schema with every
constraint checked and returns a ``ValidationResult``: either the normalized
value or the ordered list of human-readable messages, never both.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Generic, List, Mapping, Optional, Tuple, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from rental_api.models.property import PropertyStatus
from rental_api.schemas.property import (
    PropertyCreate,
    PropertyUpdate,
    PropertyQueryParams,
    PropertyIdParam
)

T = TypeVar("T", bound=BaseModel)

_STATUS_CHOICES = ", ".join(PropertyStatus.values())

FIELD_LABELS = {
    "title": "Title",
    "description": "Description",
    "address": "Address",
    "price": "Price",
    "status": "Status",
    "limit": "Limit",
    "offset": "Offset",
    "id": "Property ID",
}

# Message templates keyed by pydantic error type. ``{label}`` is the
# human-readable field name; error context values (max_length, ge, le) are
# available as well.
DEFAULT_MESSAGES = {
    "missing": "{label} is required",
    "null_not_allowed": "{label} cannot be null",
    "string_type": "{label} must be a string",
    "string_too_short": "{label} cannot be empty",
    "string_too_long": "{label} must be no more than {max_length} characters long",
    "float_type": "{label} must be a valid number",
    "float_parsing": "{label} must be a valid number",
    "finite_number": "{label} must be a valid number",
    "greater_than": "{label} must be a positive number",
    "int_type": "{label} must be an integer",
    "int_parsing": "{label} must be an integer",
    "int_parsing_size": "{label} must be an integer",
    "int_from_float": "{label} must be an integer",
    "greater_than_equal": "{label} must be at least {ge}",
    "less_than_equal": "{label} must be no more than {le}",
    "enum": "{label} must be one of: " + _STATUS_CHOICES,
    "extra_forbidden": '"{field}" is not allowed',
    "model_type": "Payload must be an object",
    "model_attributes_type": "Payload must be an object",
}

MessageOverrides = Dict[Tuple[str, str], str]

CREATE_MESSAGES: MessageOverrides = {
    ("title", "string_too_short"): "Title is required",
    ("address", "string_too_short"): "Address is required",
}

UPDATE_MESSAGES: MessageOverrides = {}

QUERY_MESSAGES: MessageOverrides = {
    ("status", "enum"): "Status filter must be one of: " + _STATUS_CHOICES,
    ("offset", "greater_than_equal"): "Offset must be 0 or greater",
}

ID_MESSAGES: MessageOverrides = {}


@dataclass
class ValidationResult(Generic[T]):
    """
    Outcome of validating one payload.

    Exactly one side is populated: ``value`` on success, ``errors`` on
    failure.
    """
    value: Optional[T] = None
    errors: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors


def format_error(error: Dict[str, Any], overrides: Optional[MessageOverrides] = None) -> str:
    """
    Turn a single pydantic error dict into a human-readable message.

    Args:
        error: One entry of ``ValidationError.errors()``
        overrides: Schema-specific messages keyed by ``(field, error type)``

    Returns:
        Message describing the violated constraint
    """
    loc = error.get("loc") or ()
    field_name = str(loc[0]) if loc else ""
    error_type = error.get("type", "")

    if overrides and (field_name, error_type) in overrides:
        return overrides[(field_name, error_type)]

    template = DEFAULT_MESSAGES.get(error_type)
    label = FIELD_LABELS.get(field_name, field_name or "Value")
    if template is None:
        # model-level custom errors already carry a finished message
        if not field_name:
            return error.get("msg", "Invalid value")
        return f"{label}: {error.get('msg', 'invalid value')}"

    context = dict(error.get("ctx") or {})
    context.pop("error", None)
    try:
        return template.format(label=label, field=field_name, **context)
    except (KeyError, IndexError):
        return f"{label}: {error.get('msg', 'invalid value')}"


def format_errors(
    exc: PydanticValidationError,
    overrides: Optional[MessageOverrides] = None
) -> List[str]:
    """Format every error of a pydantic ValidationError, preserving order."""
    return [format_error(error, overrides) for error in exc.errors()]


def _validate(
    schema: Type[T],
    data: Any,
    overrides: MessageOverrides
) -> ValidationResult[T]:
    try:
        return ValidationResult(value=schema.model_validate(data))
    except PydanticValidationError as exc:
        return ValidationResult(errors=format_errors(exc, overrides))


def validate_create_property(data: Any) -> ValidationResult[PropertyCreate]:
    """
    Validate property data for creation.

    Missing ``status`` defaults to ``available``.
    """
    return _validate(PropertyCreate, data, CREATE_MESSAGES)


def validate_update_property(data: Any) -> ValidationResult[PropertyUpdate]:
    """Validate property data for update; at least one field is required."""
    return _validate(PropertyUpdate, data, UPDATE_MESSAGES)


def validate_query_params(params: Mapping[str, Any]) -> ValidationResult[PropertyQueryParams]:
    """Validate list query parameters (raw query-string values are coerced)."""
    return _validate(PropertyQueryParams, dict(params), QUERY_MESSAGES)


def validate_id_param(property_id: Any) -> ValidationResult[PropertyIdParam]:
    """Validate the property ID path parameter."""
    return _validate(PropertyIdParam, {"id": property_id}, ID_MESSAGES)
