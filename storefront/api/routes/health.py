"""
==============================================================================
Health Check Endpoints
==============================================================================

System health status endpoints for monitoring and orchestration.

==============================================================================
"""

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from storefront.db.database import get_db
from storefront.db.models import Game


router = APIRouter(prefix="/health", tags=["Health"])


class HealthController:
    """Controller for health check operations."""

    def __init__(self, db: Session):
        self._db = db

    def check_database(self) -> str:
        """Check database connectivity."""
        try:
            self._db.execute(text("SELECT 1"))
            return "healthy"
        except SQLAlchemyError:
            return "unhealthy"

    def count_games(self) -> int:
        """Count catalog rows, -1 when the table is unreadable."""
        try:
            return self._db.query(Game).count()
        except SQLAlchemyError:
            return -1

    def get_health(self) -> dict:
        """Get full health status."""
        db_status = self.check_database()
        games = self.count_games() if db_status == "healthy" else -1

        overall = "healthy" if db_status == "healthy" and games >= 0 else "degraded"

        return {
            "status": overall,
            "components": {
                "api": "healthy",
                "database": db_status,
            },
            "details": {
                "games": max(games, 0)
            }
        }


@router.get("")
async def health_check(db: Session = Depends(get_db)):
    """Health check including database and catalog table."""
    controller = HealthController(db)
    return controller.get_health()


@router.get("/ready")
async def readiness_check():
    """Readiness probe for container orchestration."""
    return {"ready": True}


@router.get("/live")
async def liveness_check():
    """Liveness probe for container orchestration."""
    return {"alive": True}
