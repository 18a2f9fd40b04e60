"""
API route handlers for the Rental Property API.
"""

from .properties import router as properties_router

__all__ = ["properties_router"]
