"""
Repository layer for data access operations.
"""

from rental_api.repositories.property import (
    PropertyRepository,
    PropertyFilters,
    PropertyListResult
)

__all__ = [
    "PropertyRepository",
    "PropertyFilters",
    "PropertyListResult"
]
