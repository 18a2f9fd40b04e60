"""
Pydantic schemas for property requests and responses.
Handles property CRUD payloads, list query parameters and path parameters.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic_core import PydanticCustomError
from typing import Optional, List, Union
import re

from rental_api.models.property import PropertyStatus


class StrictPayload(BaseModel):
    """
    Base for all inbound payloads.

    Unknown fields are rejected and an explicit ``null`` never counts as
    "not provided".
    """

    model_config = ConfigDict(extra="forbid")

    @field_validator("*", mode="before")
    @classmethod
    def reject_null(cls, v):
        """Refuse explicit nulls for every field."""
        if v is None:
            raise PydanticCustomError("null_not_allowed", "Value cannot be null")
        return v


def _reject_bool_price(v):
    # bool is an int subclass and would otherwise be accepted as 1.0 / 0.0
    if isinstance(v, bool):
        raise PydanticCustomError("float_type", "Input should be a valid number")
    return v


def _integral_price(v):
    # whole prices stay integers so 1200 is returned as 1200, not 1200.0
    if v is not None and float(v).is_integer():
        return int(v)
    return v


_INTEGER_PATTERN = re.compile(r"^-?\d+$")


def _require_plain_integer(v):
    """Only optional sign and digits are accepted in string input ("1_0", "1e3" are not)."""
    if isinstance(v, str) and not _INTEGER_PATTERN.match(v):
        raise PydanticCustomError("int_parsing", "Input should be a valid integer")
    return v


class PropertyCreate(StrictPayload):
    """Schema for creating a new property."""

    model_config = ConfigDict(
        extra="forbid",
        json_schema_extra={
            "example": {
                "title": "Flat A",
                "description": "Two bedroom flat close to the station",
                "address": "1 Main St",
                "price": 1200,
                "status": "available"
            }
        }
    )

    title: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Property listing title"
    )

    description: Optional[str] = Field(
        None,
        max_length=1000,
        description="Free text description, may be empty"
    )

    address: str = Field(
        ...,
        min_length=1,
        max_length=500,
        description="Street address of the property"
    )

    price: float = Field(
        ...,
        gt=0,
        allow_inf_nan=False,
        description="Rental price"
    )

    status: PropertyStatus = Field(
        PropertyStatus.AVAILABLE,
        description="Listing status, defaults to available"
    )

    @field_validator("price", mode="before")
    @classmethod
    def validate_price(cls, v):
        """Reject booleans masquerading as numbers."""
        return _reject_bool_price(v)

    @field_validator("price", mode="after")
    @classmethod
    def normalize_price(cls, v):
        return _integral_price(v)


class PropertyUpdate(StrictPayload):
    """
    Schema for updating an existing property.

    Every field is optional; only the fields that were actually sent are
    applied (see ``model_fields_set``). At least one field is required.
    """

    model_config = ConfigDict(
        extra="forbid",
        json_schema_extra={
            "example": {
                "status": "rented",
                "price": 1250
            }
        }
    )

    title: Optional[str] = Field(
        None,
        min_length=1,
        max_length=255,
        description="Property listing title"
    )

    description: Optional[str] = Field(
        None,
        max_length=1000,
        description="Free text description, may be empty"
    )

    address: Optional[str] = Field(
        None,
        min_length=1,
        max_length=500,
        description="Street address of the property"
    )

    price: Optional[float] = Field(
        None,
        gt=0,
        allow_inf_nan=False,
        description="Rental price"
    )

    status: Optional[PropertyStatus] = Field(
        None,
        description="Listing status"
    )

    @field_validator("price", mode="before")
    @classmethod
    def validate_price(cls, v):
        """Reject booleans masquerading as numbers."""
        return _reject_bool_price(v)

    @field_validator("price", mode="after")
    @classmethod
    def normalize_price(cls, v):
        return _integral_price(v)

    @model_validator(mode="after")
    def validate_not_empty(self):
        """Require at least one field to update."""
        if not self.model_fields_set:
            raise PydanticCustomError(
                "update_empty",
                "At least one field must be provided for update"
            )
        return self


class PropertyQueryParams(StrictPayload):
    """Schema for list query parameters (filtering and pagination)."""

    status: Optional[PropertyStatus] = Field(
        None,
        description="Only return properties with this status"
    )

    limit: Optional[int] = Field(
        None,
        ge=1,
        le=100,
        description="Maximum number of properties to return"
    )

    offset: Optional[int] = Field(
        None,
        ge=0,
        description="Number of matching properties to skip"
    )

    @field_validator("limit", "offset", mode="before")
    @classmethod
    def validate_integer_text(cls, v):
        return _require_plain_integer(v)


class PropertyIdParam(StrictPayload):
    """Schema for the property ID path parameter."""

    id: int = Field(
        ...,
        gt=0,
        description="Property ID"
    )

    @field_validator("id", mode="before")
    @classmethod
    def validate_id_text(cls, v):
        """Accept digits only, so "1_0" is not read as 10."""
        return _require_plain_integer(v)


class PropertyResponse(BaseModel):
    """Schema for property response."""

    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(
        ...,
        description="Property unique identifier",
        examples=[1]
    )

    title: str = Field(..., description="Property listing title")

    description: Optional[str] = Field(None, description="Property description")

    address: str = Field(..., description="Street address of the property")

    price: Union[int, float] = Field(..., description="Rental price")

    status: PropertyStatus = Field(..., description="Listing status")

    created_at: str = Field(
        ...,
        alias="createdAt",
        description="Creation timestamp (ISO 8601)",
        examples=["2024-01-01T00:00:00.000Z"]
    )

    updated_at: str = Field(
        ...,
        alias="updatedAt",
        description="Last update timestamp (ISO 8601)",
        examples=["2024-01-01T00:00:00.000Z"]
    )


class PropertyListResponse(BaseModel):
    """Schema for the property list response."""

    properties: List[PropertyResponse] = Field(
        ...,
        description="Properties on this page, in insertion order"
    )

    total: int = Field(
        ...,
        description="Total number of properties in the store",
        examples=[5]
    )

    filtered: int = Field(
        ...,
        description="Number of properties returned",
        examples=[2]
    )


class PropertyDeleteResponse(BaseModel):
    """Schema for the delete confirmation."""

    model_config = ConfigDict(populate_by_name=True)

    message: str = Field(
        "Property deleted successfully",
        description="Confirmation message"
    )

    deleted_property: PropertyResponse = Field(
        ...,
        alias="deletedProperty",
        description="The property that was removed"
    )
