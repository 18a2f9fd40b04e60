"""
Property repository backed by an in-memory list.
Provides lookup, filtering, pagination and mutation of property records.
"""

from dataclasses import dataclass, field
from typing import Any, List, Optional
import logging
import re

from rental_api.models.property import Property, PropertyStatus
from rental_api.schemas.property import PropertyCreate, PropertyUpdate
from rental_api.utils.helpers import utc_now

logger = logging.getLogger(__name__)

_INTEGER_PATTERN = re.compile(r"^-?\d+$")


@dataclass
class PropertyFilters:
    """Data class for property list filters."""
    status: Optional[PropertyStatus] = None
    limit: Optional[int] = None
    offset: Optional[int] = None


@dataclass
class PropertyListResult:
    """One page of properties plus the counts reported to clients."""
    properties: List[Property] = field(default_factory=list)
    total: int = 0
    filtered: int = 0


def parse_property_id(value: Any) -> Optional[int]:
    """
    Parse an ID from an int or a string of digits.

    Anything else (including bools, "1_0" and floats with a fractional
    part) yields ``None``.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    text = str(value).strip()
    if not _INTEGER_PATTERN.match(text):
        return None
    return int(text)


class PropertyRepository:
    """
    Authoritative in-memory collection of properties.

    IDs start at 1 and are never reused, even after deletion. Lookups are
    linear scans; the collection keeps insertion order.
    """

    def __init__(self):
        self._properties: List[Property] = []
        self._next_id = 1

    def list_properties(self, filters: Optional[PropertyFilters] = None) -> PropertyListResult:
        """
        Get properties with optional status filtering and pagination.

        Args:
            filters: Optional status filter and limit/offset pagination

        Returns:
            PropertyListResult with the selected page, the store size and the
            page size
        """
        filters = filters or PropertyFilters()
        properties = list(self._properties)

        if filters.status is not None:
            status = PropertyStatus(filters.status)
            properties = [prop for prop in properties if prop.status == status]

        if filters.limit and filters.limit > 0:
            start = filters.offset or 0
            properties = properties[start:start + filters.limit]
        elif filters.offset and filters.offset > 0:
            properties = properties[filters.offset:]

        return PropertyListResult(
            properties=properties,
            total=len(self._properties),
            filtered=len(properties)
        )

    def get_by_id(self, property_id: Any) -> Optional[Property]:
        """
        Get a property by its ID.

        Args:
            property_id: Integer ID or its string form

        Returns:
            Property if found, None otherwise
        """
        numeric_id = parse_property_id(property_id)
        if numeric_id is None:
            return None
        for prop in self._properties:
            if prop.id == numeric_id:
                return prop
        return None

    def create(self, data: PropertyCreate) -> Property:
        """
        Create a new property from validated data.

        Args:
            data: Validated creation payload

        Returns:
            Created property with ID and timestamps assigned
        """
        now = utc_now()
        prop = Property(
            id=self._next_id,
            title=data.title,
            description=data.description,
            address=data.address,
            price=data.price,
            status=PropertyStatus(data.status),
            created_at=now,
            updated_at=now
        )
        self._next_id += 1
        self._properties.append(prop)
        logger.debug(f"Created property with id: {prop.id}")
        return prop

    def update(self, property_id: Any, data: PropertyUpdate) -> Optional[Property]:
        """
        Apply a partial update to an existing property.

        Only fields present in ``data`` are overwritten; ``updated_at`` is
        always refreshed.

        Args:
            property_id: ID of the property to update
            data: Validated update payload

        Returns:
            Updated property, or None if it does not exist
        """
        prop = self.get_by_id(property_id)
        if prop is None:
            return None

        if data.title is not None:
            prop.title = data.title
        if data.description is not None:
            prop.description = data.description
        if data.address is not None:
            prop.address = data.address
        if data.price is not None:
            prop.price = data.price
        if data.status is not None:
            prop.status = PropertyStatus(data.status)

        prop.updated_at = max(utc_now(), prop.updated_at)
        logger.debug(f"Updated property with id: {prop.id}")
        return prop

    def delete(self, property_id: Any) -> Optional[Property]:
        """
        Remove a property permanently.

        Returns:
            The removed property, or None if it does not exist
        """
        numeric_id = parse_property_id(property_id)
        if numeric_id is None:
            return None
        for index, prop in enumerate(self._properties):
            if prop.id == numeric_id:
                logger.debug(f"Deleted property with id: {prop.id}")
                return self._properties.pop(index)
        return None

    def count(self) -> int:
        """Get the number of stored properties."""
        return len(self._properties)

    def exists(self, property_id: Any) -> bool:
        """Check if a property exists."""
        return self.get_by_id(property_id) is not None

    def clear(self) -> None:
        """Drop every property and restart IDs at 1."""
        self._properties.clear()
        self._next_id = 1
