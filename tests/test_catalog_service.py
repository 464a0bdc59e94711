"""
==============================================================================
Catalog Service and Database Initialization Tests
==============================================================================
"""

import json
from pathlib import Path
from typing import List

import pytest
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session

from storefront.config import StorefrontConfig
from storefront.core.exceptions import AppException
from storefront.db.init_db import DatabaseInitializer
from storefront.db.models import Game
from storefront.services.catalog_service import CatalogService
from storefront.services.purchase_service import PurchaseService
from storefront.schemas.purchase import PurchaseRequest


class BrokenSession:
    """Session stand-in whose queries always fail."""

    def query(self, *args, **kwargs):
        raise OperationalError("SELECT * FROM games", {}, Exception("disk I/O error"))


class TestCatalogService:
    """Tests for CatalogService.list_entries."""

    def test_orders_by_title_ascending(self, db: Session, games: List[Game]):
        entries = CatalogService(db).list_entries()
        assert [entry.title for entry in entries] == ["Alpha", "Bravo", "Mystic Grove", "Zed"]

    def test_maps_storage_columns(self, db: Session, games: List[Game]):
        entry = CatalogService(db).list_entries()[-1]
        assert entry.id == "a"
        assert entry.genre == "Action"
        assert entry.image_url == "https://img.example/zed.png"
        assert entry.model_dump(by_alias=True).keys() == {
            "id", "title", "genre", "price", "description", "imageUrl"
        }

    def test_empty_store(self, db: Session):
        assert CatalogService(db).list_entries() == []

    def test_storage_fault_becomes_generic_failure(self):
        with pytest.raises(AppException) as exc_info:
            CatalogService(BrokenSession()).list_entries()

        exc = exc_info.value
        assert exc.status_code == 500
        assert exc.code == "STORAGE_FAILURE"
        assert "disk I/O" not in exc.message
        assert exc.to_dict() == {"error": exc.message, "code": "STORAGE_FAILURE"}

    def test_invalid_stored_row_becomes_generic_failure(self, db: Session):
        db.add(Game(id="", title="Nameless", genre="", price=1, description=""))
        db.commit()

        with pytest.raises(AppException) as exc_info:
            CatalogService(db).list_entries()

        assert exc_info.value.status_code == 500
        assert exc_info.value.code == "STORAGE_FAILURE"


class TestStorefrontConfig:
    """Tests for the presentation defaults."""

    def test_studio_description_is_complete(self):
        description = StorefrontConfig().studio_description
        assert description.startswith("KUMAGEMA adalah studio")
        assert "kualitas di atas kuantitas" in description
        assert description.endswith("temukan petualangan Anda berikutnya.")


class TestPurchaseService:
    """Tests for the purchase stub service."""

    def test_accepts_complete_request(self):
        response = PurchaseService().purchase(PurchaseRequest(gameId="g1", userId="u1"))
        assert response.success is True
        assert "g1" in response.message

    def test_rejects_missing_user(self):
        with pytest.raises(AppException) as exc_info:
            PurchaseService().purchase(PurchaseRequest(gameId="g1"))

        assert exc_info.value.status_code == 400
        assert exc_info.value.details == {"missing": ["userId"]}


class TestDatabaseInitializer:
    """Tests for seeding the games table."""

    def _write_seed(self, tmp_path: Path, rows) -> Path:
        seed_file = tmp_path / "games.json"
        seed_file.write_text(json.dumps(rows), encoding="utf-8")
        return seed_file

    def test_seeds_empty_table(self, db: Session, tmp_path: Path):
        seed_file = self._write_seed(tmp_path, [
            {"id": "fixed-id", "title": "Neon Drift", "genre": "Racing",
             "price": 150000, "description": "Fast", "imageUrl": "https://img.example/n.png"},
            {"title": "Pixel Harvest", "genre": "Sim", "price": 0, "description": "Farm"},
        ])

        inserted = DatabaseInitializer(session=db).seed_games(seed_file)

        assert inserted == 2
        neon = db.query(Game).filter(Game.id == "fixed-id").one()
        assert neon.image_url == "https://img.example/n.png"
        harvest = db.query(Game).filter(Game.title == "Pixel Harvest").one()
        assert harvest.id
        assert harvest.image_url is None

    def test_skips_invalid_rows(self, db: Session, tmp_path: Path):
        seed_file = self._write_seed(tmp_path, [
            {"title": "", "price": 10},
            {"title": "Negative", "price": -1},
            {"title": "Valid", "price": 10},
        ])

        assert DatabaseInitializer(session=db).seed_games(seed_file) == 1
        assert [game.title for game in db.query(Game).all()] == ["Valid"]

    def test_does_not_reseed_populated_table(self, db: Session, games: List[Game], tmp_path: Path):
        seed_file = self._write_seed(tmp_path, [{"title": "Extra", "price": 1}])

        assert DatabaseInitializer(session=db).seed_games(seed_file) == 0
        assert db.query(Game).count() == len(games)

    def test_missing_seed_file(self, db: Session, tmp_path: Path):
        assert DatabaseInitializer(session=db).seed_games(tmp_path / "absent.json") == 0

    def test_skips_duplicate_ids(self, db: Session, tmp_path: Path):
        seed_file = self._write_seed(tmp_path, [
            {"id": "a", "title": "First", "price": 10},
            {"id": "a", "title": "Second", "price": 20},
            {"id": "b", "title": "Third", "price": 30},
        ])

        assert DatabaseInitializer(session=db).seed_games(seed_file) == 2
        assert sorted(game.title for game in db.query(Game).all()) == ["First", "Third"]

    def test_skips_non_finite_prices(self, db: Session, tmp_path: Path):
        seed_file = self._write_seed(tmp_path, [
            {"title": "Endless", "price": float("inf")},
            {"title": "Unknown", "price": float("nan")},
            {"title": "Finite", "price": 5},
        ])

        assert DatabaseInitializer(session=db).seed_games(seed_file) == 1
        assert [game.title for game in db.query(Game).all()] == ["Finite"]
