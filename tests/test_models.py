"""
Unit tests for the property model and timestamp helpers.
"""

import re
from datetime import datetime, timezone, timedelta

from rental_api.models.property import Property, PropertyStatus
from rental_api.utils.helpers import to_iso_timestamp, utc_now, get_current_timestamp


ISO_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z$")


class TestPropertyStatus:
    """Test the status enumeration."""

    def test_values(self):
        assert PropertyStatus.values() == ["available", "rented", "maintenance"]

    def test_string_enum(self):
        assert PropertyStatus("rented") is PropertyStatus.RENTED
        assert PropertyStatus.MAINTENANCE == "maintenance"


class TestPropertyModel:
    """Test the Property record."""

    def test_defaults(self):
        """Status defaults to available and description to None."""
        prop = Property(id=1, title="Flat A", address="1 Main St", price=1200)

        assert prop.status == PropertyStatus.AVAILABLE
        assert prop.description is None
        assert prop.created_at.tzinfo is not None

    def test_to_dict(self):
        """Test dictionary conversion with ISO timestamps."""
        created = datetime(2024, 1, 2, 3, 4, 5, 678000, tzinfo=timezone.utc)
        prop = Property(
            id=7,
            title="Flat B",
            address="2 High St",
            price=950.5,
            description="Cosy",
            status=PropertyStatus.RENTED,
            created_at=created,
            updated_at=created + timedelta(seconds=1)
        )

        assert prop.to_dict() == {
            "id": 7,
            "title": "Flat B",
            "description": "Cosy",
            "address": "2 High St",
            "price": 950.5,
            "status": "rented",
            "created_at": "2024-01-02T03:04:05.678Z",
            "updated_at": "2024-01-02T03:04:06.678Z",
        }

    def test_copy_is_detached(self):
        """Changing a copy leaves the original untouched."""
        prop = Property(id=1, title="Flat A", address="1 Main St", price=1200)
        snapshot = prop.copy()

        prop.title = "Changed"

        assert snapshot.title == "Flat A"
        assert snapshot.id == prop.id
        assert snapshot.created_at == prop.created_at

    def test_repr(self):
        prop = Property(id=3, title="Flat C", address="3 Low St", price=800)
        assert repr(prop) == "<Property(id=3, title='Flat C', status=available)>"


class TestTimestampHelpers:
    """Test timestamp formatting helpers."""

    def test_to_iso_timestamp_millisecond_precision(self):
        value = datetime(2024, 1, 1, 12, 0, 0, 123456, tzinfo=timezone.utc)
        assert to_iso_timestamp(value) == "2024-01-01T12:00:00.123Z"

    def test_to_iso_timestamp_converts_to_utc(self):
        value = datetime(2024, 1, 1, 14, 0, 0, tzinfo=timezone(timedelta(hours=2)))
        assert to_iso_timestamp(value) == "2024-01-01T12:00:00.000Z"

    def test_to_iso_timestamp_naive_is_utc(self):
        assert to_iso_timestamp(datetime(2024, 5, 6, 7, 8, 9)) == "2024-05-06T07:08:09.000Z"

    def test_utc_now_truncated_to_milliseconds(self):
        now = utc_now()
        assert now.tzinfo is not None
        assert now.microsecond % 1000 == 0

    def test_get_current_timestamp_format(self):
        assert ISO_PATTERN.match(get_current_timestamp())
