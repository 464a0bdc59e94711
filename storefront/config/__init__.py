"""
==============================================================================
Configuration Package
==============================================================================

Centralized configuration management using Pydantic Settings.

Usage:
------
    from storefront.config import get_settings, get_storefront_config

    settings = get_settings()
    print(settings.database_url)

    # Immutable presentation constants
    config = get_storefront_config()
    print(config.studio_name)

==============================================================================
"""

from .settings import (
    CURRENCY_GLYPHS,
    Settings,
    StorefrontConfig,
    get_settings,
    get_storefront_config,
)

__all__ = [
    "CURRENCY_GLYPHS",
    "Settings",
    "StorefrontConfig",
    "get_settings",
    "get_storefront_config",
]
