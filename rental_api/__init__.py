"""
Rental Property API.
A small FastAPI service for managing rental property records in memory.
"""

__version__ = "1.0.0"
