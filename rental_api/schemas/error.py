"""
Error response schemas for API documentation and consistent error formatting.
Provides standardized error response models for OpenAPI documentation.
"""

from pydantic import BaseModel, Field
from typing import List, Any, Dict


class ValidationErrorResponse(BaseModel):
    """Schema for 400 validation failures."""

    error: str = Field(
        "Validation error",
        description="Error label",
        examples=["Validation error"]
    )

    details: List[str] = Field(
        ...,
        description="One human-readable message per violated constraint",
        examples=[["Title is required", "Address is required"]]
    )


class ErrorMessageResponse(BaseModel):
    """Schema for errors carrying a single message (404, 413, 500)."""

    error: str = Field(
        ...,
        description="Error label",
        examples=["Not Found"]
    )

    message: str = Field(
        ...,
        description="Human-readable error message",
        examples=["Property with ID 1 does not exist"]
    )


# Common error response examples for documentation
COMMON_ERROR_RESPONSES = {
    400: {
        "description": "Bad Request - Validation failed",
        "model": ValidationErrorResponse,
        "content": {
            "application/json": {
                "example": {
                    "error": "Validation error",
                    "details": [
                        "Title is required",
                        "Price must be a positive number"
                    ]
                }
            }
        }
    },
    404: {
        "description": "Not Found - Property does not exist",
        "model": ErrorMessageResponse,
        "content": {
            "application/json": {
                "example": {
                    "error": "Not Found",
                    "message": "Property with ID 1 does not exist"
                }
            }
        }
    },
    413: {
        "description": "Payload Too Large - Request body exceeds the size limit",
        "model": ErrorMessageResponse,
        "content": {
            "application/json": {
                "example": {
                    "error": "Payload Too Large",
                    "message": "Request size 20971520 bytes exceeds maximum allowed size 10485760 bytes"
                }
            }
        }
    },
    500: {
        "description": "Internal Server Error",
        "model": ErrorMessageResponse,
        "content": {
            "application/json": {
                "example": {
                    "error": "Internal server error",
                    "message": "Failed to retrieve property"
                }
            }
        }
    }
}


def get_error_responses(*status_codes: int) -> Dict[int, Dict[str, Any]]:
    """
    Get error response schemas for specific status codes.

    Args:
        status_codes: HTTP status codes to include

    Returns:
        Dictionary of error response schemas
    """
    return {
        code: COMMON_ERROR_RESPONSES[code]
        for code in status_codes
        if code in COMMON_ERROR_RESPONSES
    }


def get_collection_error_responses() -> Dict[int, Dict[str, Any]]:
    """Error responses for collection endpoints (create, list)."""
    return get_error_responses(400, 500)


def get_item_error_responses() -> Dict[int, Dict[str, Any]]:
    """Error responses for endpoints addressing a single property."""
    return get_error_responses(400, 404, 500)
