"""
Property management API endpoints for CRUD operations, filtering and pagination.
Each handler validates its input first and only then touches the store.
"""

from fastapi import APIRouter, Body, Depends, Path, Request, status
from typing import Any

from rental_api.services.property import PropertyService
from rental_api.schemas.property import (
    PropertyResponse,
    PropertyListResponse,
    PropertyDeleteResponse
)
from rental_api.schemas.error import get_collection_error_responses, get_item_error_responses
from rental_api.utils.dependencies import get_property_service
from rental_api.utils.exceptions import ValidationError
from rental_api.utils.validators import (
    validate_create_property,
    validate_update_property,
    validate_query_params,
    validate_id_param
)


router = APIRouter(prefix="/properties", tags=["Properties"])


def _require_property_id(raw_id: str) -> int:
    """Validate the path parameter or raise a 400 validation error."""
    result = validate_id_param(raw_id)
    if not result.is_valid:
        raise ValidationError(result.errors)
    return result.value.id


def _to_response(property_obj) -> PropertyResponse:
    return PropertyResponse.model_validate(property_obj.to_dict())


@router.post(
    "/",
    response_model=PropertyResponse,
    status_code=status.HTTP_201_CREATED,
    include_in_schema=False
)
@router.post(
    "",
    response_model=PropertyResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create new property",
    description="Create a new rental property. Status defaults to 'available'.",
    responses=get_collection_error_responses()
)
async def create_property(
    payload: Any = Body(None, description="Property fields"),
    property_service: PropertyService = Depends(get_property_service)
) -> PropertyResponse:
    """
    Create a new property listing.

    Args:
        payload: Raw JSON body
        property_service: Property service instance

    Returns:
        Created property

    Raises:
        ValidationError: If the body violates the creation schema
    """
    result = validate_create_property(payload if payload is not None else {})
    if not result.is_valid:
        raise ValidationError(result.errors)

    property_obj = property_service.create_property(result.value)
    return _to_response(property_obj)


@router.get(
    "/",
    response_model=PropertyListResponse,
    status_code=status.HTTP_200_OK,
    include_in_schema=False
)
@router.get(
    "",
    response_model=PropertyListResponse,
    status_code=status.HTTP_200_OK,
    summary="List properties",
    description="List properties, optionally filtered by status and paginated with limit/offset.",
    responses=get_collection_error_responses()
)
async def list_properties(
    request: Request,
    property_service: PropertyService = Depends(get_property_service)
) -> PropertyListResponse:
    """
    Get properties with optional status filter and pagination.

    Query parameters: ``status``, ``limit`` (1-100), ``offset`` (>= 0).
    Unknown parameters are rejected.
    """
    result = validate_query_params(request.query_params)
    if not result.is_valid:
        raise ValidationError(result.errors)

    listing = property_service.list_properties(result.value)

    return PropertyListResponse(
        properties=[_to_response(prop) for prop in listing.properties],
        total=listing.total,
        filtered=listing.filtered
    )


@router.get(
    "/{property_id}",
    response_model=PropertyResponse,
    status_code=status.HTTP_200_OK,
    summary="Get property details",
    responses=get_item_error_responses()
)
async def get_property(
    property_id: str = Path(..., description="Property ID"),
    property_service: PropertyService = Depends(get_property_service)
) -> PropertyResponse:
    """
    Get a single property.

    Raises:
        ValidationError: If the ID is not a positive integer
        PropertyNotFoundError: If property doesn't exist
    """
    numeric_id = _require_property_id(property_id)
    return _to_response(property_service.get_property(numeric_id))


@router.put(
    "/{property_id}",
    response_model=PropertyResponse,
    status_code=status.HTTP_200_OK,
    summary="Update property",
    description="Partially update a property. Only the provided fields change.",
    responses=get_item_error_responses()
)
async def update_property(
    property_id: str = Path(..., description="Property ID"),
    payload: Any = Body(None, description="Fields to update"),
    property_service: PropertyService = Depends(get_property_service)
) -> PropertyResponse:
    """
    Update property details.

    The ID is validated before the body; the body is validated before the
    existence check.

    Args:
        property_id: Raw ID path parameter
        payload: Raw JSON body
        property_service: Property service instance

    Returns:
        Updated property

    Raises:
        ValidationError: If the ID or body is invalid
        PropertyNotFoundError: If property doesn't exist
    """
    numeric_id = _require_property_id(property_id)

    result = validate_update_property(payload if payload is not None else {})
    if not result.is_valid:
        raise ValidationError(result.errors)

    updated_property = property_service.update_property(numeric_id, result.value)
    return _to_response(updated_property)


@router.delete(
    "/{property_id}",
    response_model=PropertyDeleteResponse,
    status_code=status.HTTP_200_OK,
    summary="Delete property",
    responses=get_item_error_responses()
)
async def delete_property(
    property_id: str = Path(..., description="Property ID"),
    property_service: PropertyService = Depends(get_property_service)
) -> PropertyDeleteResponse:
    """Delete a property and return it as confirmation."""
    numeric_id = _require_property_id(property_id)
    deleted_property = property_service.delete_property(numeric_id)

    return PropertyDeleteResponse(
        message="Property deleted successfully",
        deleted_property=_to_response(deleted_property)
    )
