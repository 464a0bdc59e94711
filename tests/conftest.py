"""
==============================================================================
Pytest Configuration and Fixtures
==============================================================================

Provides test database, client, catalog data and fake catalog sources.

==============================================================================
"""

import os

# Settings are cached on first import; point them at an in-memory database
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SEED_ON_STARTUP"] = "false"
os.environ["DEBUG"] = "false"

import asyncio
from typing import Generator, List, Optional

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

from storefront.main import app
from storefront.catalog.models import CatalogEntry
from storefront.config import StorefrontConfig
from storefront.db.database import Base, get_db
from storefront.db.models import Game


# ============================================================================
# DATABASE FIXTURES
# ============================================================================

SQLALCHEMY_TEST_DATABASE_URL = "sqlite://"

engine = create_engine(
    SQLALCHEMY_TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def db() -> Generator[Session, None, None]:
    """Create a fresh database for each test."""
    Base.metadata.create_all(bind=engine)

    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db: Session) -> Generator[TestClient, None, None]:
    """Create test client with database override."""
    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


# ============================================================================
# CATALOG FIXTURES
# ============================================================================

@pytest.fixture
def games(db: Session) -> List[Game]:
    """Insert games deliberately out of title order."""
    rows = [
        Game(id="a", title="Zed", genre="Action", price=150000,
             description="Last alphabetically", image_url="https://img.example/zed.png"),
        Game(id="b", title="Alpha", genre="RPG", price=0,
             description="Free to play"),
        Game(id="c", title="Mystic Grove", genre="Adventure", price=149.99,
             description="Fractional price"),
        Game(id="d", title="Bravo", genre="Puzzle", price=89000,
             description="Second alphabetically"),
    ]
    db.add_all(rows)
    db.commit()
    return rows


@pytest.fixture
def storefront_config() -> StorefrontConfig:
    """Default presentation config, independent of the environment."""
    return StorefrontConfig()


def make_entry(entry_id: str, title: str, price: float = 0, image_url: Optional[str] = None) -> CatalogEntry:
    return CatalogEntry(
        id=entry_id,
        title=title,
        genre="Genre",
        price=price,
        description=f"About {title}",
        image_url=image_url,
    )


@pytest.fixture
def entries() -> List[CatalogEntry]:
    """Five entries in title order."""
    return [
        make_entry("1", "Alpha", 0),
        make_entry("2", "Bravo", 150000, "https://img.example/bravo.png"),
        make_entry("3", "Charlie", 149.99),
        make_entry("4", "Delta", 89000),
        make_entry("5", "Echo", 1),
    ]


# ============================================================================
# FAKE CATALOG SOURCE
# ============================================================================

class FakeSource:
    """
    Scripted catalog source for store tests.

    Each call consumes the next scripted result; the last one repeats.
    When ``gate`` is set the call waits on it before resolving.
    """

    def __init__(self, *results):
        self.results = list(results)
        self.calls = 0
        self.gate: Optional[asyncio.Event] = None

    async def list_entries(self) -> List[CatalogEntry]:
        self.calls += 1
        if self.gate is not None:
            await self.gate.wait()
        result = self.results.pop(0) if len(self.results) > 1 else self.results[0]
        if isinstance(result, BaseException):
            raise result
        return list(result)
