"""
FastAPI dependency injection utilities.
Provides the per-application property repository and service to route handlers.
"""

from fastapi import Depends, Request
from rental_api.repositories.property import PropertyRepository
from rental_api.services.property import PropertyService


def get_property_repository(request: Request) -> PropertyRepository:
    """
    Get the property repository owned by the running application.

    Args:
        request: Incoming request, used to reach ``app.state``

    Returns:
        PropertyRepository instance
    """
    return request.app.state.property_repository


def get_property_service(
    property_repo: PropertyRepository = Depends(get_property_repository)
) -> PropertyService:
    """
    Get property service instance.

    Args:
        property_repo: Property repository

    Returns:
        PropertyService instance
    """
    return PropertyService(property_repo)
