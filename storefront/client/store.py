"""
==============================================================================
Catalog Store Module
==============================================================================

Client-side fetch and state lifecycle for the storefront.

The store turns navigation events into at most one in-flight catalog
request and a derived UI state. All state is mutated on the event loop
thread from the fetch task's continuation; there are no locks.

State Machine:
-------------

    ┌──────┐  navigate()  ┌─────────┐  success  ┌────────┐
    │ IDLE │ ───────────▶ │ LOADING │ ────────▶ │ LOADED │
    └──────┘              └─────────┘           └────────┘
                            │    ▲
                    failure │    │ navigate(catalog)
                            ▼    │
                          ┌────────┐
                          │ FAILED │
                          └────────┘

Fetch Policy (fetch-once-until-populated):
-----------------------------------------
- Navigating anywhere while ``entries`` is empty starts a fetch.
- Navigating to the catalog after a failed fetch starts a fetch.
- Otherwise the cached entries are reused. Visiting a page again does
  not refresh a populated list.
- While a fetch is in flight, further triggers join it (single-flight).

Failures never escape the store: they land in ``error`` and the
previously loaded entries stay in place.

==============================================================================
"""

from __future__ import annotations

import asyncio
import enum
import logging
from typing import Callable, List, Optional, Protocol

from storefront.catalog.models import CatalogEntry
from storefront.client.errors import CatalogClientError


# Module logger
logger = logging.getLogger(__name__)


class Page(str, enum.Enum):
    """Storefront pages."""

    HOME = "home"
    CATALOG = "catalog"

    def __str__(self) -> str:
        return self.value


class FetchStatus(str, enum.Enum):
    """Fetch lifecycle states."""

    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    FAILED = "failed"

    def __str__(self) -> str:
        return self.value


class CatalogSource(Protocol):
    """Anything that can list catalog entries (CatalogApiClient in production)."""

    async def list_entries(self) -> List[CatalogEntry]:
        ...


Listener = Callable[["CatalogStore"], None]


class CatalogStore:
    """
    Navigation-driven catalog state holder.

    Attributes:
        page: Current page
        entries: Last successfully loaded entries (server order)
        is_loading: True while a fetch is in flight
        error: Message of the last failed fetch, None otherwise
        is_ready: Presentation readiness gate
        status: Fetch lifecycle state

    Example:
        >>> store = CatalogStore(CatalogApiClient.from_settings())
        >>> task = store.navigate(Page.CATALOG)   # inside a running loop
        >>> await task
        >>> store.status
        <FetchStatus.LOADED: 'loaded'>
    """

    def __init__(self, source: CatalogSource, page: Page = Page.HOME) -> None:
        """
        Initialize the store.

        Args:
            source: Catalog source used for fetches
            page: Initial page (no fetch until the first navigate())
        """
        self._source = source
        self._page = page
        self._entries: List[CatalogEntry] = []
        self._status = FetchStatus.IDLE
        self._error: Optional[str] = None
        self._is_ready = False
        self._closed = False
        self._inflight: Optional[asyncio.Task] = None
        self._listeners: List[Listener] = []

    # =========================================================================
    # PROPERTIES
    # =========================================================================

    @property
    def page(self) -> Page:
        return self._page

    @property
    def entries(self) -> List[CatalogEntry]:
        """Loaded entries (copy)."""
        return list(self._entries)

    @property
    def status(self) -> FetchStatus:
        return self._status

    @property
    def is_loading(self) -> bool:
        return self._status == FetchStatus.LOADING

    @property
    def error(self) -> Optional[str]:
        return self._error

    @property
    def is_ready(self) -> bool:
        return self._is_ready

    @property
    def is_closed(self) -> bool:
        return self._closed

    @property
    def inflight(self) -> Optional[asyncio.Task]:
        """The running fetch task, if any."""
        return self._inflight

    # =========================================================================
    # SUBSCRIPTIONS
    # =========================================================================

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Register a listener called after every state change.

        Returns:
            Callable that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener(self)
            except Exception:
                logger.exception("Catalog store listener failed")

    # =========================================================================
    # READINESS
    # =========================================================================

    def mark_ready(self) -> None:
        """Open the presentation gate. Only the first call has an effect."""
        if self._is_ready or self._closed:
            return
        self._is_ready = True
        self._notify()

    # =========================================================================
    # NAVIGATION
    # =========================================================================

    def should_fetch(self, page: Page) -> bool:
        """Decide whether entering ``page`` needs a fetch right now."""
        if self._closed or self._inflight is not None:
            return False
        if not self._entries:
            return True
        return page == Page.CATALOG and self._status == FetchStatus.FAILED

    def navigate(self, page: Page) -> Optional[asyncio.Task]:
        """
        Switch to ``page`` and start a fetch if the policy calls for one.

        Must be called from a running event loop.

        Returns:
            The in-flight fetch task (new or joined), or None
        """
        if self._closed:
            logger.debug(f"Ignoring navigation to {page} on a closed store")
            return None

        page = Page(page)
        changed = page != self._page
        self._page = page

        if self._inflight is not None:
            logger.debug("Fetch already in flight, joining it")
            if changed:
                self._notify()
            return self._inflight

        if not self.should_fetch(page):
            if changed:
                self._notify()
            return None

        self._begin_loading()
        self._inflight = asyncio.get_running_loop().create_task(self._fetch())
        return self._inflight

    def close(self) -> None:
        """
        Tear the store down.

        An in-flight fetch is left to finish but its result is discarded.
        """
        self._closed = True
        self._listeners.clear()

    # =========================================================================
    # FETCH LIFECYCLE
    # =========================================================================

    def _begin_loading(self) -> None:
        self._status = FetchStatus.LOADING
        self._error = None
        self._notify()

    async def _fetch(self) -> None:
        """Fetch the catalog and apply the outcome. Never raises."""
        try:
            entries = await self._source.list_entries()
        except CatalogClientError as e:
            logger.error(f"Catalog fetch failed: {e.message}")
            self._apply_failure(e.message)
        except Exception as e:
            logger.exception("Unexpected error while fetching catalog")
            self._apply_failure(f"Error while fetching data: {e}")
        else:
            self._apply_success(entries)
        finally:
            self._inflight = None

    def _apply_success(self, entries: List[CatalogEntry]) -> None:
        if self._closed:
            logger.debug("Discarding catalog result for a closed store")
            return
        self._entries = list(entries)
        self._status = FetchStatus.LOADED
        self._error = None
        logger.info(f"Loaded {len(self._entries)} catalog entries")
        self._notify()

    def _apply_failure(self, message: str) -> None:
        if self._closed:
            logger.debug("Discarding catalog failure for a closed store")
            return
        self._status = FetchStatus.FAILED
        self._error = message
        self._notify()

    def __repr__(self) -> str:
        return (
            f"CatalogStore(page={self._page.value!r}, "
            f"status={self._status.value!r}, "
            f"entries={len(self._entries)})"
        )
