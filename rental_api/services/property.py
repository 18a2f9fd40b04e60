"""
Property service for managing rental listings.
Turns repository not-found signals into API errors and shields callers from
unexpected failures.
"""

from rental_api.models.property import Property
from rental_api.repositories.property import (
    PropertyRepository,
    PropertyFilters,
    PropertyListResult
)
from rental_api.schemas.property import PropertyCreate, PropertyUpdate, PropertyQueryParams
from rental_api.utils.exceptions import NotFoundError, PropertyNotFoundError, InternalServerError
import logging

logger = logging.getLogger(__name__)


class PropertyService:
    """
    Property service wrapping the in-memory repository.

    Every operation either returns the affected record, raises
    ``PropertyNotFoundError`` for unknown IDs, or raises
    ``InternalServerError`` with an operation-specific message when anything
    else goes wrong. The original exception is logged, never exposed.
    """

    def __init__(self, property_repo: PropertyRepository):
        self.property_repo = property_repo

    def create_property(self, property_data: PropertyCreate) -> Property:
        """
        Create a new property listing.

        Args:
            property_data: Validated property creation data

        Returns:
            Created property instance

        Raises:
            InternalServerError: If the repository fails
        """
        try:
            property_obj = self.property_repo.create(property_data)
            logger.info(f"Property created: {property_obj.title} (ID: {property_obj.id})")
            return property_obj
        except Exception as e:
            logger.error(f"Failed to create property: {e}", exc_info=True)
            raise InternalServerError("Failed to create property")

    def list_properties(self, query: PropertyQueryParams) -> PropertyListResult:
        """
        List properties with status filtering and limit/offset pagination.

        Args:
            query: Validated list query parameters

        Returns:
            PropertyListResult with properties, total and filtered counts
        """
        try:
            result = self.property_repo.list_properties(self._convert_filters(query))
            logger.debug(f"Property list returned {result.filtered} of {result.total} properties")
            return result
        except Exception as e:
            logger.error(f"Failed to list properties: {e}", exc_info=True)
            raise InternalServerError("Failed to retrieve properties")

    def get_property(self, property_id: int) -> Property:
        """
        Get property by ID.

        Raises:
            PropertyNotFoundError: If property doesn't exist
        """
        try:
            property_obj = self.property_repo.get_by_id(property_id)
            if property_obj is None:
                raise PropertyNotFoundError(property_id)

            logger.debug(f"Retrieved property: {property_id}")
            return property_obj
        except NotFoundError:
            raise
        except Exception as e:
            logger.error(f"Failed to get property {property_id}: {e}", exc_info=True)
            raise InternalServerError("Failed to retrieve property")

    def update_property(self, property_id: int, property_data: PropertyUpdate) -> Property:
        """
        Update the given fields of a property.

        Args:
            property_id: ID of the property to update
            property_data: Validated partial update

        Returns:
            Updated property instance

        Raises:
            PropertyNotFoundError: If property doesn't exist
            InternalServerError: If the repository fails
        """
        try:
            if not self.property_repo.exists(property_id):
                raise PropertyNotFoundError(property_id)

            updated_property = self.property_repo.update(property_id, property_data)
            if updated_property is None:
                raise PropertyNotFoundError(property_id)

            changed = ", ".join(sorted(property_data.model_fields_set))
            logger.info(f"Property updated: {property_id} ({changed})")
            return updated_property
        except NotFoundError:
            raise
        except Exception as e:
            logger.error(f"Failed to update property {property_id}: {e}", exc_info=True)
            raise InternalServerError("Failed to update property")

    def delete_property(self, property_id: int) -> Property:
        """
        Delete a property and return the removed record.

        Raises:
            PropertyNotFoundError: If property doesn't exist
        """
        try:
            deleted_property = self.property_repo.delete(property_id)
            if deleted_property is None:
                raise PropertyNotFoundError(property_id)

            logger.info(f"Property deleted: {property_id}")
            return deleted_property
        except NotFoundError:
            raise
        except Exception as e:
            logger.error(f"Failed to delete property {property_id}: {e}", exc_info=True)
            raise InternalServerError("Failed to delete property")

    @staticmethod
    def _convert_filters(query: PropertyQueryParams) -> PropertyFilters:
        """Convert the query schema to repository filter format."""
        return PropertyFilters(
            status=query.status,
            limit=query.limit,
            offset=query.offset
        )
