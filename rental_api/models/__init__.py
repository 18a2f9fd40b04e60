"""
Data models for the Rental Property API.
"""

from rental_api.models.property import Property, PropertyStatus

__all__ = [
    "Property",
    "PropertyStatus",
]
