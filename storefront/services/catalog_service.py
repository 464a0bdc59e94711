"""
==============================================================================
Catalog Service Module
==============================================================================

Read-side service answering "list all catalog entries".

Contract:
---------
- Entries are ordered by title ascending. Clients slice the first N
  entries for the featured view, so the ordering is part of the API.
- Only the public catalog fields are returned.
- Any storage fault becomes a generic STORAGE_FAILURE (500); the cause
  is logged here and never sent to the caller.

==============================================================================
"""

from __future__ import annotations

import logging
from typing import List

from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from storefront.catalog.models import CatalogEntry
from storefront.core import exceptions
from storefront.db.models import Game


# Module logger
logger = logging.getLogger(__name__)


class CatalogService:
    """
    Catalog read service.

    One query per call, no caching.

    Example:
        >>> service = CatalogService(db_session)
        >>> entries = service.list_entries()
        >>> [e.title for e in entries]
        ['Alpha', 'Zed']
    """

    def __init__(self, db: Session) -> None:
        """
        Initialize the catalog service.

        Args:
            db: SQLAlchemy database session
        """
        self._db = db

    def list_entries(self) -> List[CatalogEntry]:
        """
        List every catalog entry, title ascending.

        Returns:
            Ordered list of CatalogEntry

        Raises:
            AppException: STORAGE_FAILURE if the query fails or a stored
                row is not a valid entry
        """
        try:
            games = (
                self._db.query(Game)
                .order_by(Game.title.asc())
                .all()
            )
            entries = [CatalogEntry.model_validate(game) for game in games]
        except SQLAlchemyError:
            logger.exception("Failed to fetch games from storage")
            raise exceptions.storage_failure()
        except ValidationError:
            logger.exception("Stored game row is not a valid catalog entry")
            raise exceptions.storage_failure()

        logger.debug(f"Listed {len(entries)} games")
        return entries
