"""
Property model for rental listings.
Holds the in-memory record shape and the listing status enumeration.
"""

from dataclasses import dataclass, field, asdict
from datetime import datetime
from typing import Optional, Union
import enum

from rental_api.utils.helpers import utc_now, to_iso_timestamp


class PropertyStatus(str, enum.Enum):
    """Rental status of a property listing."""
    AVAILABLE = "available"
    RENTED = "rented"
    MAINTENANCE = "maintenance"

    @classmethod
    def values(cls):
        return [member.value for member in cls]


@dataclass
class Property:
    """
    A single rental property record.

    ``id`` and the timestamps are owned by the repository: they are assigned on
    creation and only ``updated_at`` changes afterwards.
    """
    id: int
    title: str
    address: str
    price: Union[int, float]
    description: Optional[str] = None
    status: PropertyStatus = PropertyStatus.AVAILABLE
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime = field(default_factory=utc_now)

    def to_dict(self) -> dict:
        """
        Convert property to dictionary.

        Returns:
            Dictionary representation of property with ISO 8601 timestamps
        """
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "address": self.address,
            "price": self.price,
            "status": self.status.value,
            "created_at": to_iso_timestamp(self.created_at),
            "updated_at": to_iso_timestamp(self.updated_at),
        }

    def copy(self) -> "Property":
        """Return a detached copy of this record."""
        return Property(**asdict(self))

    def __repr__(self) -> str:
        return f"<Property(id={self.id}, title='{self.title}', status={self.status.value})>"
