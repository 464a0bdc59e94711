"""
Catalog Client Errors

Failures raised by CatalogApiClient. Each carries a user-facing message;
CatalogStore turns them into its ``error`` state, never re-raising.
"""

from typing import Optional


class CatalogClientError(Exception):
    """Base class for catalog client failures."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ConnectivityFailure(CatalogClientError):
    """The catalog API could not be reached at all."""

    def __init__(self, base_url: str, origin: Optional[str] = None):
        self.base_url = base_url
        self.origin = origin
        allowed = f" from {origin}" if origin else ""
        super().__init__(
            f"Could not connect to the catalog API at {base_url}. "
            f"Make sure the backend is running and allows CORS{allowed}."
        )


class HttpStatusFailure(CatalogClientError):
    """The API answered with a non-success status code."""

    def __init__(self, status_code: int, detail: Optional[str] = None):
        self.status_code = status_code
        self.detail = detail
        message = f"HTTP error! status: {status_code}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)
