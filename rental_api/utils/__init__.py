"""
Utility modules for the Rental Property API.
"""

from .exceptions import (
    APIException,
    ValidationError,
    NotFoundError,
    PropertyNotFoundError,
    RouteNotFoundError,
    PayloadTooLargeError,
    InternalServerError
)

from .helpers import get_current_timestamp, to_iso_timestamp, utc_now

__all__ = [
    # Exceptions
    "APIException",
    "ValidationError",
    "NotFoundError",
    "PropertyNotFoundError",
    "RouteNotFoundError",
    "PayloadTooLargeError",
    "InternalServerError",

    # Helpers
    "get_current_timestamp",
    "to_iso_timestamp",
    "utc_now",
]
