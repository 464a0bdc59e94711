"""
==============================================================================
Catalog Package - Game Catalog Models
==============================================================================

Classes:
--------
- CatalogEntry: Pydantic model for a listed game
- GameSeed: Pydantic model for rows of the seed file

==============================================================================
"""

from .models import CatalogEntry, GameSeed

__all__ = [
    "CatalogEntry",
    "GameSeed",
]
