"""
==============================================================================
API Endpoints
==============================================================================

Routers:
--------
- health: Health check endpoints
- games: Game catalog listing
- purchase: Purchase stub

==============================================================================
"""

from . import health, games, purchase

__all__ = ["health", "games", "purchase"]
