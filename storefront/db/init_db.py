"""
==============================================================================
Database Initialization Module
==============================================================================

Database initialization and setup utilities.

Initialization Flow:
-------------------
1. Create all tables from ORM models
2. If seeding is enabled and the games table is empty, load the seed file
3. Log initialization status

Seed File Structure:
-------------------
[
  {"title": "Game Title", "genre": "RPG", "price": 150000,
   "description": "...", "imageUrl": "https://..."},
  ...
]

Usage:
------
    from storefront.db import init_db, DatabaseInitializer

    init_db()

    initializer = DatabaseInitializer()
    initializer.create_tables()
    initializer.seed_games(Path("data/games.json"))

==============================================================================
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

from pydantic import ValidationError
from sqlalchemy.orm import Session

from storefront.catalog.models import GameSeed
from storefront.config import get_settings
from storefront.db.database import DatabaseManager
from storefront.db.models import Game


# Module logger
logger = logging.getLogger(__name__)


class DatabaseInitializer:
    """
    Database initialization manager.

    Creates tables and seeds the catalog for development setups.

    Attributes:
        _db_manager: DatabaseManager instance
        _settings: Application settings
        _session: Optional externally managed session
    """

    def __init__(
        self,
        db_manager: Optional[DatabaseManager] = None,
        session: Optional[Session] = None
    ) -> None:
        """
        Initialize the database initializer.

        Args:
            db_manager: Optional DatabaseManager instance (creates new if None)
            session: Optional existing session (creates new if None)
        """
        self._db_manager = db_manager or DatabaseManager()
        self._settings = get_settings()
        self._session = session

    def _get_session(self) -> Session:
        if self._session is not None:
            return self._session
        return self._db_manager.get_session()

    # =========================================================================
    # TABLE OPERATIONS
    # =========================================================================

    def create_tables(self) -> None:
        """Create all database tables from ORM models (idempotent)."""
        logger.info("Creating database tables...")
        self._db_manager.create_tables()
        logger.info("✅ Database tables created successfully")

    # =========================================================================
    # SEEDING
    # =========================================================================

    def seed_games(self, seed_file: Path) -> int:
        """
        Seed the games table from a JSON file when it is empty.

        Rows that fail validation or repeat an existing id are skipped
        with a warning.

        Args:
            seed_file: Path to the seed JSON

        Returns:
            Number of games inserted
        """
        if not seed_file.exists():
            logger.warning(f"⚠️ Seed file not found: {seed_file}")
            return 0

        session = self._get_session()

        try:
            if session.query(Game).first() is not None:
                logger.info("Games table already populated, skipping seed")
                return 0

            with seed_file.open("r", encoding="utf-8") as f:
                rows = json.load(f)

            if not isinstance(rows, list):
                logger.warning(f"Seed file {seed_file} is not a JSON array")
                return 0

            seen_ids = set()
            inserted = 0
            for index, row in enumerate(rows):
                try:
                    seed = GameSeed.model_validate(row)
                except ValidationError as e:
                    logger.warning(f"Skipping invalid seed row {index}: {e.error_count()} error(s)")
                    continue

                if seed.id:
                    if seed.id in seen_ids or session.get(Game, seed.id) is not None:
                        logger.warning(f"Skipping seed row {index}: duplicate id {seed.id!r}")
                        continue
                    seen_ids.add(seed.id)

                game = Game(
                    title=seed.title,
                    genre=seed.genre,
                    price=seed.price,
                    description=seed.description,
                    image_url=seed.image_url,
                )
                if seed.id:
                    game.id = seed.id
                session.add(game)
                inserted += 1

            session.commit()
            logger.info(f"✅ Seeded {inserted} games from {seed_file}")
            return inserted

        except Exception:
            session.rollback()
            raise
        finally:
            if self._session is None:
                session.close()

    # =========================================================================
    # FULL INITIALIZATION
    # =========================================================================

    def initialize(self) -> None:
        """Create tables and seed the catalog if configured."""
        self.create_tables()

        if self._settings.seed_on_startup:
            self.seed_games(self._settings.seed_path)


def init_db() -> None:
    """Initialize the database with tables and seed data."""
    DatabaseInitializer().initialize()
