"""
==============================================================================
Catalog Models Module
==============================================================================

Pydantic models for catalog entries as they travel over the wire.

==============================================================================
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class CatalogEntry(BaseModel):
    """
    Catalog entry exchanged between the service and the client.

    Exactly the public catalog fields; storage bookkeeping columns are
    never part of this model.

    Attributes:
        id: Opaque unique identifier
        title: Display title
        genre: Free-text genre
        price: Non-negative price, 0 means free
        description: Long description
        image_url: Cover image URL (``imageUrl`` on the wire)
    """

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        extra="ignore",
    )

    id: str = Field(..., min_length=1, description="Unique game identifier")
    title: str = Field(..., min_length=1, description="Display title")
    genre: str = Field(default="", description="Free-text genre")
    price: float = Field(..., ge=0, allow_inf_nan=False, description="Price, 0 means free")
    description: str = Field(default="", description="Long description")
    image_url: Optional[str] = Field(
        default=None,
        alias="imageUrl",
        description="Cover image URL"
    )

    @property
    def is_free(self) -> bool:
        """Check if the entry is given away."""
        return self.price <= 0


class GameSeed(BaseModel):
    """Row of the games seed file; ``id`` is generated when absent."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: Optional[str] = Field(default=None, min_length=1)
    title: str = Field(..., min_length=1)
    genre: str = ""
    price: float = Field(default=0.0, ge=0, allow_inf_nan=False)
    description: str = ""
    image_url: Optional[str] = Field(default=None, alias="imageUrl")
