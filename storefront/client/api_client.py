"""
==============================================================================
Catalog API Client Module
==============================================================================

Async HTTP client for the catalog API built on httpx.

- No client-side timeout: requests wait for the transport to resolve or
  fail.
- Entries are returned in the order the server sent them. The server
  guarantees title-ascending order and the client does not re-sort.
- Transport errors become ConnectivityFailure, non-2xx responses become
  HttpStatusFailure, unparseable payloads become CatalogClientError.

Usage:
------
    async with CatalogApiClient("http://localhost:3000") as api:
        entries = await api.list_entries()

==============================================================================
"""

from __future__ import annotations

import logging
from typing import List, Optional

import httpx
from pydantic import TypeAdapter, ValidationError

from storefront.catalog.models import CatalogEntry
from storefront.client.errors import (
    CatalogClientError,
    ConnectivityFailure,
    HttpStatusFailure,
)
from storefront.config import get_settings
from storefront.schemas.common import ServiceInfo
from storefront.schemas.purchase import PurchaseResponse


# Module logger
logger = logging.getLogger(__name__)

_ENTRY_LIST = TypeAdapter(List[CatalogEntry])


class CatalogApiClient:
    """
    Client for the catalog storefront API.

    Attributes:
        base_url: API base URL, the only configuration surface
        origin: Origin the client runs on, quoted in connectivity errors

    Example:
        >>> api = CatalogApiClient("http://localhost:3000")
        >>> entries = await api.list_entries()
        >>> await api.aclose()
    """

    def __init__(
        self,
        base_url: str,
        origin: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """
        Initialize the API client.

        Args:
            base_url: API base URL, e.g. "http://localhost:3000"
            origin: Origin of the hosting client, for diagnostics
            transport: Optional httpx transport (tests, ASGI apps)
        """
        self.base_url = base_url.rstrip("/")
        self.origin = origin
        self._http = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=None,
            transport=transport,
            headers={"Accept": "application/json"},
        )

    @classmethod
    def from_settings(cls) -> CatalogApiClient:
        """Build a client from the configured base URL and origin."""
        settings = get_settings()
        return cls(settings.api_base_url, origin=settings.client_origin)

    # =========================================================================
    # LIFECYCLE
    # =========================================================================

    async def aclose(self) -> None:
        await self._http.aclose()

    async def __aenter__(self) -> CatalogApiClient:
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    # =========================================================================
    # REQUEST HELPERS
    # =========================================================================

    async def _request(self, method: str, path: str, **kwargs) -> httpx.Response:
        """Send a request, mapping transport and status failures."""
        try:
            response = await self._http.request(method, path, **kwargs)
        except httpx.TransportError as e:
            logger.error(f"Catalog API unreachable at {self.base_url}: {e!r}")
            raise ConnectivityFailure(self.base_url, self.origin) from e

        if not response.is_success:
            raise HttpStatusFailure(response.status_code, self._error_detail(response))

        return response

    @staticmethod
    def _error_detail(response: httpx.Response) -> Optional[str]:
        """Extract the server's ``error`` string from a failed response."""
        try:
            payload = response.json()
        except ValueError:
            return None
        if isinstance(payload, dict) and isinstance(payload.get("error"), str):
            return payload["error"]
        return None

    @staticmethod
    def _json(response: httpx.Response):
        try:
            return response.json()
        except ValueError as e:
            raise CatalogClientError(f"Error while fetching data: invalid JSON ({e})") from e

    # =========================================================================
    # ENDPOINTS
    # =========================================================================

    async def list_entries(self) -> List[CatalogEntry]:
        """
        Fetch the full catalog.

        Returns:
            Entries in server order (title ascending)

        Raises:
            ConnectivityFailure: API unreachable
            HttpStatusFailure: non-2xx status
            CatalogClientError: malformed payload
        """
        response = await self._request("GET", "/api/games")
        payload = self._json(response)

        try:
            return _ENTRY_LIST.validate_python(payload)
        except ValidationError as e:
            raise CatalogClientError(
                f"Error while fetching data: unexpected catalog payload ({e.error_count()} error(s))"
            ) from e

    async def purchase(self, game_id: str, user_id: str) -> PurchaseResponse:
        """Submit a purchase to the stub endpoint."""
        response = await self._request(
            "POST",
            "/api/purchase",
            json={"gameId": game_id, "userId": user_id},
        )
        return PurchaseResponse.model_validate(self._json(response))

    async def service_info(self) -> ServiceInfo:
        """Fetch the root service information payload."""
        response = await self._request("GET", "/")
        return ServiceInfo.model_validate(self._json(response))
