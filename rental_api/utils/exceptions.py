"""
Custom exception classes for the Rental Property API.
Provides structured error handling with appropriate HTTP status codes.
"""

from typing import Any, Dict, Optional, List
from fastapi import HTTPException, status


class APIException(HTTPException):
    """
    Base API exception class.

    ``error`` is the short label placed in the ``error`` field of the JSON
    body; ``detail`` becomes the ``message`` field.
    """

    def __init__(
        self,
        status_code: int,
        detail: str,
        error: str,
        headers: Optional[Dict[str, Any]] = None
    ):
        super().__init__(status_code=status_code, detail=detail, headers=headers)
        self.error = error


class ValidationError(APIException):
    """Validation error exception carrying one message per violated constraint."""

    def __init__(self, details: List[str]):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="; ".join(details),
            error="Validation error"
        )
        self.details = list(details)


class NotFoundError(APIException):
    """Resource not found exception."""

    def __init__(self, detail: str = "Resource not found"):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=detail,
            error="Not Found"
        )


class PropertyNotFoundError(NotFoundError):
    """Property not found exception."""

    def __init__(self, property_id: Any):
        super().__init__(f"Property with ID {property_id} does not exist")
        self.property_id = property_id


class RouteNotFoundError(NotFoundError):
    """No route matches the requested path."""

    def __init__(self, path: str):
        super().__init__(f"Route {path} not found")
        self.path = path


class PayloadTooLargeError(APIException):
    """Request body exceeds the configured size limit."""

    def __init__(self, size: int, max_size: int):
        super().__init__(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"Request size {size} bytes exceeds maximum allowed size {max_size} bytes",
            error="Payload Too Large"
        )


class InternalServerError(APIException):
    """Internal server error exception."""

    def __init__(self, detail: str = "Internal server error"):
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=detail,
            error="Internal server error"
        )
