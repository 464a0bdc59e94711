"""
==============================================================================
Client Package - Storefront Catalog Client
==============================================================================

Classes:
--------
- CatalogApiClient: async httpx client for the catalog API
- CatalogStore: navigation-driven fetch and state lifecycle
- ImageSource: render-time image reference with placeholder fallback

Usage:
------
    api = CatalogApiClient.from_settings()
    store = CatalogStore(api)
    store.mark_ready()
    await store.navigate(Page.HOME)
    view = render_page(store)

==============================================================================
"""

from .errors import CatalogClientError, ConnectivityFailure, HttpStatusFailure
from .api_client import CatalogApiClient
from .store import CatalogStore, FetchStatus, Page
from .presentation import (
    FEATURED_COUNT,
    ImageSource,
    featured,
    format_price,
    render_page,
    resolve_image,
)

__all__ = [
    "CatalogClientError",
    "ConnectivityFailure",
    "HttpStatusFailure",
    "CatalogApiClient",
    "CatalogStore",
    "FetchStatus",
    "Page",
    "FEATURED_COUNT",
    "ImageSource",
    "featured",
    "format_price",
    "render_page",
    "resolve_image",
]
