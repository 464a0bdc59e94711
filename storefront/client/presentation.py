"""
==============================================================================
Presentation Derivation Module
==============================================================================

Pure functions and view models derived from CatalogStore state.

Rules:
------
- Featured view: the first FEATURED_COUNT entries in server order.
- Prices: <= 0 renders the free label; whole numbers render with no
  decimals, fractional prices with exactly two. Numbers follow the id-ID
  convention ("." groups thousands, "," separates decimals) and the
  currency code is replaced by its glyph: 150000 -> "Rp 150.000".
- Images: a missing cover, or one that fails to load, becomes the
  configured placeholder. Falling back happens at most once.

==============================================================================
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import List, Literal, Optional, Sequence, Union

from pydantic import BaseModel, Field

from storefront.catalog.models import CatalogEntry
from storefront.client.store import CatalogStore, Page
from storefront.config import StorefrontConfig, get_storefront_config


FEATURED_COUNT = 3

NBSP = "\u00a0"

# en-style separators -> id-ID separators
_ID_SEPARATORS = str.maketrans({",": ".", ".": ","})


# =============================================================================
# PURE DERIVATIONS
# =============================================================================

def featured(entries: Sequence[CatalogEntry], count: int = FEATURED_COUNT) -> List[CatalogEntry]:
    """First ``count`` entries, in the order given."""
    return list(entries[:count])


def format_price(price: float, config: Optional[StorefrontConfig] = None) -> str:
    """
    Render a price for display.

    Args:
        price: Raw price, 0 or less means free
        config: Presentation config (process default if None)

    Returns:
        Free label or localized currency string

    Example:
        >>> format_price(0)
        'Gratis'
        >>> format_price(150000)
        'Rp\\xa0150.000'
        >>> format_price(149.99)
        'Rp\\xa0149,99'
    """
    config = config or get_storefront_config()

    if price <= 0:
        return config.free_label

    amount = Decimal(str(price))
    digits = 0 if amount == amount.to_integral_value() else 2
    amount = amount.quantize(Decimal(1).scaleb(-digits), rounding=ROUND_HALF_UP)

    number = f"{amount:,.{digits}f}".translate(_ID_SEPARATORS)
    formatted = f"{config.currency_code}{NBSP}{number}"
    return formatted.replace(config.currency_code, config.currency_glyph)


def resolve_image(image_url: Optional[str], config: Optional[StorefrontConfig] = None) -> str:
    """Cover image URL, or the placeholder when there is none."""
    config = config or get_storefront_config()
    return image_url or config.placeholder_image_url


class ImageSource:
    """
    Render-time image reference with a single placeholder fallback.

    Example:
        >>> image = ImageSource("https://cdn.example/cover.png", placeholder)
        >>> image.fail()    # cover failed to load
        True
        >>> image.fail()    # placeholder failed too, nothing more to do
        False
    """

    def __init__(self, image_url: Optional[str], placeholder: str) -> None:
        self._placeholder = placeholder
        self._src = image_url or placeholder
        self._fell_back = not image_url

    @property
    def src(self) -> str:
        return self._src

    @property
    def is_placeholder(self) -> bool:
        return self._fell_back

    def fail(self) -> bool:
        """
        Handle a load failure of the current source.

        Returns:
            True if the source switched to the placeholder, False if it
            was already the placeholder
        """
        if self._fell_back:
            return False
        self._src = self._placeholder
        self._fell_back = True
        return True


# =============================================================================
# VIEW MODELS
# =============================================================================

class StudioView(BaseModel):
    name: str
    tagline: str
    description: str
    logo_url: Optional[str] = None


class HomeCardView(BaseModel):
    """Featured card: cover and title only."""
    id: str
    title: str
    image_url: str


class GameCardView(BaseModel):
    """Full catalog card."""
    id: str
    title: str
    genre: str
    description: str
    image_url: str
    price_label: str
    is_free: bool
    action_label: str


class SplashView(BaseModel):
    kind: Literal["splash"] = "splash"
    message: str


class HomePageView(BaseModel):
    kind: Literal["home"] = "home"
    studio: StudioView
    featured: List[HomeCardView] = Field(default_factory=list)
    show_loader: bool = False
    error: Optional[str] = None
    call_to_action: Optional[str] = None


class CatalogPageView(BaseModel):
    kind: Literal["catalog"] = "catalog"
    state: Literal["loading", "error", "empty", "grid"]
    title: str
    cards: List[GameCardView] = Field(default_factory=list)
    error: Optional[str] = None


PageView = Union[SplashView, HomePageView, CatalogPageView]


def home_card(entry: CatalogEntry, config: StorefrontConfig) -> HomeCardView:
    return HomeCardView(
        id=entry.id,
        title=entry.title,
        image_url=resolve_image(entry.image_url, config),
    )


def game_card(entry: CatalogEntry, config: StorefrontConfig) -> GameCardView:
    return GameCardView(
        id=entry.id,
        title=entry.title,
        genre=entry.genre,
        description=entry.description,
        image_url=resolve_image(entry.image_url, config),
        price_label=format_price(entry.price, config),
        is_free=entry.is_free,
        action_label=config.claim_label if entry.is_free else config.buy_label,
    )


def render_home(store: CatalogStore, config: StorefrontConfig) -> HomePageView:
    """Landing page: studio profile plus the featured slice."""
    entries = store.entries
    cards = [home_card(entry, config) for entry in featured(entries)]

    if cards:
        call_to_action = config.see_all_label
    elif not store.is_loading and not store.error:
        call_to_action = config.browse_label
    else:
        call_to_action = None

    return HomePageView(
        studio=StudioView(
            name=config.studio_name,
            tagline=config.studio_tagline,
            description=config.studio_description,
            logo_url=config.studio_logo_url,
        ),
        featured=cards,
        # Loader only for the first load; a populated page stays as is
        show_loader=store.is_loading and not entries,
        error=store.error,
        call_to_action=call_to_action,
    )


def render_catalog(store: CatalogStore, config: StorefrontConfig) -> CatalogPageView:
    """Full catalog page."""
    title = f"Katalog Game {config.studio_name}"
    entries = store.entries

    if store.is_loading:
        return CatalogPageView(state="loading", title=title)

    if not entries:
        if store.error:
            return CatalogPageView(state="error", title=title, error=store.error)
        return CatalogPageView(state="empty", title=title)

    return CatalogPageView(
        state="grid",
        title=title,
        cards=[game_card(entry, config) for entry in entries],
        error=store.error,
    )


def render_page(store: CatalogStore, config: Optional[StorefrontConfig] = None) -> PageView:
    """Render the store's current page, or the splash until it is ready."""
    config = config or get_storefront_config()

    if not store.is_ready:
        return SplashView(message=config.splash_message)

    if store.page == Page.CATALOG:
        return render_catalog(store, config)
    return render_home(store, config)
