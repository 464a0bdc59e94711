"""
==============================================================================
Catalog API Client Tests
==============================================================================

Exercises CatalogApiClient against httpx mock transports and against the
real application through an ASGI transport.

==============================================================================
"""

import asyncio
from typing import List

import httpx
import pytest
from fastapi.testclient import TestClient

from storefront.client.api_client import CatalogApiClient
from storefront.client.errors import (
    CatalogClientError,
    ConnectivityFailure,
    HttpStatusFailure,
)
from storefront.db.models import Game
from storefront.main import app


BASE_URL = "http://catalog.test"


def mock_client(handler) -> CatalogApiClient:
    return CatalogApiClient(
        BASE_URL,
        origin="http://localhost:5173",
        transport=httpx.MockTransport(handler),
    )


async def call(api: CatalogApiClient, method: str, *args):
    try:
        return await getattr(api, method)(*args)
    finally:
        await api.aclose()


class TestListEntries:
    """Tests for CatalogApiClient.list_entries."""

    def test_keeps_server_order(self):
        """The client trusts the server ordering and never re-sorts."""
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.path == "/api/games"
            return httpx.Response(200, json=[
                {"id": "a", "title": "Zed", "genre": "x", "price": 1, "description": ""},
                {"id": "b", "title": "Alpha", "genre": "x", "price": 0, "description": "",
                 "imageUrl": "https://img.example/alpha.png"},
            ])

        entries = asyncio.run(call(mock_client(handler), "list_entries"))

        assert [entry.title for entry in entries] == ["Zed", "Alpha"]
        assert entries[1].image_url == "https://img.example/alpha.png"
        assert entries[0].image_url is None

    def test_transport_error_is_connectivity_failure(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("Connection refused", request=request)

        with pytest.raises(ConnectivityFailure) as exc_info:
            asyncio.run(call(mock_client(handler), "list_entries"))

        message = exc_info.value.message
        assert BASE_URL in message
        assert "backend is running" in message
        assert "CORS" in message
        assert "http://localhost:5173" in message

    def test_error_status_is_http_status_failure(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(500, json={"error": "Server error", "code": "STORAGE_FAILURE"})

        with pytest.raises(HttpStatusFailure) as exc_info:
            asyncio.run(call(mock_client(handler), "list_entries"))

        assert exc_info.value.status_code == 500
        assert "500" in exc_info.value.message
        assert exc_info.value.detail == "Server error"

    def test_error_status_without_json_body(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(404, text="not found")

        with pytest.raises(HttpStatusFailure) as exc_info:
            asyncio.run(call(mock_client(handler), "list_entries"))

        assert exc_info.value.status_code == 404
        assert exc_info.value.detail is None

    def test_malformed_payload(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"games": []})

        with pytest.raises(CatalogClientError):
            asyncio.run(call(mock_client(handler), "list_entries"))

    def test_non_finite_price_is_rejected(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                200,
                text='[{"id": "a", "title": "Endless", "price": Infinity}]',
                headers={"content-type": "application/json"},
            )

        with pytest.raises(CatalogClientError):
            asyncio.run(call(mock_client(handler), "list_entries"))

    def test_invalid_json(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text="<html>")

        with pytest.raises(CatalogClientError):
            asyncio.run(call(mock_client(handler), "list_entries"))


class TestAgainstApplication:
    """Client round trips through the real FastAPI application."""

    def _asgi_client(self) -> CatalogApiClient:
        return CatalogApiClient(
            "http://testserver",
            transport=httpx.ASGITransport(app=app),
        )

    def test_lists_games_from_app(self, client: TestClient, games: List[Game]):
        entries = asyncio.run(call(self._asgi_client(), "list_entries"))
        assert [entry.title for entry in entries] == ["Alpha", "Bravo", "Mystic Grove", "Zed"]

    def test_purchase_round_trip(self, client: TestClient):
        response = asyncio.run(call(self._asgi_client(), "purchase", "game-1", "user-1"))
        assert response.success is True

    def test_service_info(self, client: TestClient):
        info = asyncio.run(call(self._asgi_client(), "service_info"))
        assert info.status == "OK"
