"""
==============================================================================
Database Package
==============================================================================

SQLAlchemy database infrastructure and ORM models.

Architecture:
------------
├── database.py   - DatabaseManager class, session factory
├── models.py     - Game ORM model
└── init_db.py    - DatabaseInitializer for setup and seeding

Usage:
------
    from storefront.db import DatabaseManager, Game, init_db

    init_db()

    session = DatabaseManager().get_session()
    games = session.query(Game).all()
    session.close()

==============================================================================
"""

from .database import DatabaseManager, Base, get_db, get_database_manager
from .models import Game
from .init_db import DatabaseInitializer, init_db

__all__ = [
    # Database management
    "DatabaseManager",
    "Base",
    "get_db",
    "get_database_manager",
    # Models
    "Game",
    # Initialization
    "DatabaseInitializer",
    "init_db",
]
