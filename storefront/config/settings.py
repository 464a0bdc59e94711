"""
==============================================================================
Application Settings Module
==============================================================================

Configuration management for the storefront using Pydantic Settings.

A single ``Settings`` instance is created per process (see
``get_settings``) and every layer reads from it. The rendering layer does
not read settings directly: it receives a frozen ``StorefrontConfig``
built once from the settings.

Configuration Priority (highest to lowest):
------------------------------------------
1. Environment variables
2. .env file
3. Default values

==============================================================================
"""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# Module logger
logger = logging.getLogger(__name__)


# Currency code -> glyph shown to shoppers
CURRENCY_GLYPHS: Dict[str, str] = {
    "IDR": "Rp",
    "USD": "$",
    "EUR": "€",
    "JPY": "¥",
}


class StorefrontConfig(BaseModel):
    """
    Immutable storefront presentation configuration.

    Holds the studio profile and the price/image rendering constants.
    Built once at process start and passed explicitly to the
    presentation layer.
    """

    model_config = ConfigDict(frozen=True)

    studio_name: str = "KUMAGEMA"
    studio_tagline: str = "Menciptakan Dunia Baru, Satu Pixel dalam Satu Waktu."
    studio_description: str = (
        "KUMAGEMA adalah studio pengembangan game independen yang bersemangat "
        "untuk menciptakan pengalaman interaktif yang unik dan mendalam. "
        "Kami percaya pada kualitas di atas kuantitas, mendedikasikan diri untuk "
        "merancang gameplay yang menarik dan cerita yang tak terlupakan. "
        "Jelajahi katalog kami dan temukan petualangan Anda berikutnya."
    )
    studio_logo_url: Optional[str] = None
    placeholder_image_url: str = "https://placehold.co/600x400/374151/ffffff?text=KUMAGEMA"
    currency_code: str = "IDR"
    free_label: str = "Gratis"
    buy_label: str = "Beli Sekarang"
    claim_label: str = "Dapatkan"
    see_all_label: str = "Lihat Semua Game Lain"
    browse_label: str = "Lihat Katalog Game"
    splash_message: str = "Memuat Tampilan..."

    @property
    def currency_glyph(self) -> str:
        """Local glyph for the configured currency code."""
        return CURRENCY_GLYPHS.get(self.currency_code, self.currency_code)


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Attributes:
        app_name: Display name for the service
        app_env: Environment mode (development/staging/production)
        debug: Enable debug mode for verbose logging
        host: Server bind address
        port: Server port number
        database_url: SQLAlchemy database connection string
        seed_on_startup: Seed the games table when it is empty
        seed_file: Path to the games seed JSON
        cors_origins: Allowed CORS origins (JSON array string)
        api_base_url: Base URL the catalog client talks to
        client_origin: Origin the browser-hosted client is served from
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_default=True,
    )

    # =========================================================================
    # APPLICATION SETTINGS
    # =========================================================================
    app_name: str = Field(
        default="KUMAGEMA API v1",
        description="Display name for the service"
    )

    app_env: str = Field(
        default="development",
        description="Environment mode: development, staging, production"
    )

    debug: bool = Field(
        default=False,
        description="Enable debug mode for verbose logging"
    )

    # =========================================================================
    # SERVER SETTINGS
    # =========================================================================
    host: str = Field(default="0.0.0.0", description="Server bind address")

    port: int = Field(
        default=3000,
        ge=1,
        le=65535,
        description="Server port number"
    )

    # =========================================================================
    # DATABASE SETTINGS
    # =========================================================================
    database_url: str = Field(
        default="sqlite:///./storage/db/storefront.db",
        description="SQLAlchemy database connection string"
    )

    seed_on_startup: bool = Field(
        default=True,
        description="Seed the games table from seed_file when it is empty"
    )

    seed_file: str = Field(
        default="data/games.json",
        description="Path to the games seed JSON"
    )

    # =========================================================================
    # CORS SETTINGS
    # =========================================================================
    cors_origins: str = Field(
        default='["*"]',
        description="Allowed CORS origins as JSON array string"
    )

    # =========================================================================
    # CLIENT SETTINGS
    # =========================================================================
    api_base_url: str = Field(
        default="http://localhost:3000",
        description="Base URL of the catalog API used by the client"
    )

    client_origin: str = Field(
        default="http://localhost:5173",
        description="Origin the storefront client is served from"
    )

    # =========================================================================
    # STOREFRONT PRESENTATION SETTINGS
    # =========================================================================
    studio_name: str = Field(default="KUMAGEMA")
    studio_tagline: str = Field(
        default="Menciptakan Dunia Baru, Satu Pixel dalam Satu Waktu."
    )
    studio_description: str = Field(
        default=(
            "KUMAGEMA adalah studio pengembangan game independen yang bersemangat "
            "untuk menciptakan pengalaman interaktif yang unik dan mendalam. "
            "Kami percaya pada kualitas di atas kuantitas, mendedikasikan diri untuk "
            "merancang gameplay yang menarik dan cerita yang tak terlupakan. "
            "Jelajahi katalog kami dan temukan petualangan Anda berikutnya."
        )
    )
    studio_logo_url: Optional[str] = Field(default=None)
    placeholder_image_url: str = Field(
        default="https://placehold.co/600x400/374151/ffffff?text=KUMAGEMA"
    )
    currency_code: str = Field(default="IDR", min_length=3, max_length=3)
    free_label: str = Field(default="Gratis", min_length=1)

    # =========================================================================
    # VALIDATORS
    # =========================================================================
    @field_validator("app_env")
    @classmethod
    def validate_app_env(cls, value: str) -> str:
        """Normalize the environment name, falling back to development."""
        valid_envs = {"development", "staging", "production"}
        normalized = value.lower().strip()

        if normalized not in valid_envs:
            logger.warning(
                f"Unknown environment '{value}', defaulting to 'development'"
            )
            return "development"

        return normalized

    @field_validator("currency_code")
    @classmethod
    def validate_currency_code(cls, value: str) -> str:
        return value.upper()

    @field_validator("api_base_url")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    # =========================================================================
    # COMPUTED PROPERTIES
    # =========================================================================
    @property
    def seed_path(self) -> Path:
        """Seed file as a Path object."""
        return Path(self.seed_file)

    @property
    def is_memory_database(self) -> bool:
        """True for in-memory SQLite URLs."""
        return self.database_url in ("sqlite://", "sqlite:///:memory:")

    @property
    def cors_origins_list(self) -> List[str]:
        """
        Parse CORS origins from JSON string to list.

        Returns:
            List of allowed origin strings
        """
        try:
            origins = json.loads(self.cors_origins)
            if isinstance(origins, list):
                return origins
            return ["*"]
        except json.JSONDecodeError:
            logger.warning(
                f"Invalid CORS origins JSON: {self.cors_origins}, "
                "defaulting to ['*']"
            )
            return ["*"]

    @property
    def storefront_config(self) -> StorefrontConfig:
        """Frozen presentation configuration derived from these settings."""
        return StorefrontConfig(
            studio_name=self.studio_name,
            studio_tagline=self.studio_tagline,
            studio_description=self.studio_description,
            studio_logo_url=self.studio_logo_url,
            placeholder_image_url=self.placeholder_image_url,
            currency_code=self.currency_code,
            free_label=self.free_label,
        )

    # =========================================================================
    # UTILITY METHODS
    # =========================================================================
    def get_database_path(self) -> Optional[Path]:
        """
        Extract database file path for file-backed SQLite databases.

        Returns:
            Path to database file, or None for other databases
        """
        if self.database_url.startswith("sqlite") and not self.is_memory_database:
            db_path = self.database_url.replace("sqlite:///", "")
            if db_path.startswith("./"):
                db_path = db_path[2:]
            return Path(db_path)
        return None

    def ensure_directories(self) -> None:
        """Create the SQLite database directory if one is needed."""
        db_path = self.get_database_path()
        if db_path:
            db_path.parent.mkdir(parents=True, exist_ok=True)

        logger.debug("Required directories created/verified")

    def __repr__(self) -> str:
        """String representation for debugging."""
        return (
            f"Settings(app_name={self.app_name!r}, "
            f"app_env={self.app_env!r}, "
            f"debug={self.debug})"
        )


# =============================================================================
# SINGLETON INSTANCE MANAGEMENT
# =============================================================================

@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Get the global Settings instance.

    Uses lru_cache so that only one Settings instance is created
    throughout the process lifetime.

    Returns:
        Global Settings instance
    """
    settings = Settings()
    settings.ensure_directories()

    if settings.debug:
        logger.info(f"Configuration loaded: {settings}")

    return settings


@lru_cache(maxsize=1)
def get_storefront_config() -> StorefrontConfig:
    """Get the process-wide StorefrontConfig, built once from settings."""
    return get_settings().storefront_config
