"""
==============================================================================
Game Catalog Endpoints
==============================================================================

GET /api/games - every catalog entry, ordered by title ascending.

==============================================================================
"""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from storefront.catalog.models import CatalogEntry
from storefront.db.database import get_db
from storefront.schemas.common import ErrorResponse
from storefront.services.catalog_service import CatalogService


router = APIRouter(prefix="/games", tags=["Games"])


class GameController:
    """Controller for catalog listing."""

    def __init__(self, db: Session):
        self._service = CatalogService(db)

    def list_games(self) -> List[CatalogEntry]:
        return self._service.list_entries()


@router.get(
    "",
    response_model=List[CatalogEntry],
    responses={500: {"model": ErrorResponse}},
)
async def list_games(db: Session = Depends(get_db)):
    """List all games ordered by title."""
    controller = GameController(db)
    return controller.list_games()
