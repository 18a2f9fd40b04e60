"""
Pydantic schemas for request/response validation.
"""

# Property schemas
from .property import (
    PropertyCreate,
    PropertyUpdate,
    PropertyQueryParams,
    PropertyIdParam,
    PropertyResponse,
    PropertyListResponse,
    PropertyDeleteResponse
)

# Error schemas
from .error import (
    ValidationErrorResponse,
    ErrorMessageResponse
)

__all__ = [
    # Property
    "PropertyCreate",
    "PropertyUpdate",
    "PropertyQueryParams",
    "PropertyIdParam",
    "PropertyResponse",
    "PropertyListResponse",
    "PropertyDeleteResponse",

    # Error
    "ValidationErrorResponse",
    "ErrorMessageResponse"
]
