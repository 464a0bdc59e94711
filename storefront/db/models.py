"""
==============================================================================
SQLAlchemy ORM Models Module
==============================================================================

ORM model for the studio's game catalog.

Database Schema:
---------------

    ┌─────────────────────────────────────────────────────────────────┐
    │                             games                               │
    ├─────────────────────────────────────────────────────────────────┤
    │ id (VARCHAR(36), PK, UUID)                                      │
    │ title (VARCHAR, NOT NULL, INDEXED)                              │
    │ genre (VARCHAR, NOT NULL)                                       │
    │ price (FLOAT, NOT NULL, CHECK price >= 0)                       │
    │ description (TEXT, NOT NULL)                                    │
    │ image_url (VARCHAR, NULLABLE)                                   │
    │ created_at (DATETIME, DEFAULT now)                              │
    │ updated_at (DATETIME, AUTO UPDATE)                              │
    └─────────────────────────────────────────────────────────────────┘

Only the catalog columns are exposed over the API; the timestamps are
storage bookkeeping.

=============================================================================
"""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import Optional

from sqlalchemy import (
    CheckConstraint,
    Column,
    DateTime,
    Float,
    String,
    Text,
    func,
)

from storefront.db.database import Base


class Game(Base):
    """
    Catalog entry stored in the ``games`` table.

    Attributes:
        id: Unique identifier (UUID string)
        title: Display title
        genre: Free-text genre
        price: Non-negative price, 0 means free
        description: Long description
        image_url: Cover image URL, None when the game has no cover
    """

    __tablename__ = "games"
    __table_args__ = (
        CheckConstraint("price >= 0", name="ck_games_price_non_negative"),
    )

    id: str = Column(
        String(36),
        primary_key=True,
        default=lambda: str(uuid.uuid4()),
        doc="Unique game identifier (UUID)"
    )

    title: str = Column(
        String(255),
        nullable=False,
        index=True,
        doc="Display title"
    )

    genre: str = Column(
        String(100),
        nullable=False,
        default="",
        doc="Free-text genre"
    )

    price: float = Column(
        Float,
        nullable=False,
        default=0.0,
        doc="Price without currency minor units; 0 means free"
    )

    description: str = Column(
        Text,
        nullable=False,
        default="",
        doc="Long description"
    )

    image_url: Optional[str] = Column(
        String(1024),
        nullable=True,
        doc="Cover image URL"
    )

    created_at: datetime = Column(
        DateTime,
        default=func.now(),
        nullable=False,
        doc="Row creation timestamp"
    )

    updated_at: datetime = Column(
        DateTime,
        default=func.now(),
        onupdate=func.now(),
        nullable=False,
        doc="Last modification timestamp"
    )

    @property
    def is_free(self) -> bool:
        """Check if the game is given away."""
        return self.price <= 0

    def __repr__(self) -> str:
        return (
            f"Game(id={self.id!r}, "
            f"title={self.title!r}, "
            f"price={self.price})"
        )

    def __str__(self) -> str:
        return f"{self.title} ({self.genre})"
