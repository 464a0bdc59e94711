"""
==============================================================================
Game Studio Catalog Storefront - Application Entry Point
==============================================================================

FastAPI application serving the studio catalog:
- GET  /            service information
- GET  /api/games   catalog listing, title ascending
- POST /api/purchase purchase stub
- GET  /api/health  health probes

Usage:
------
    # Development
    uvicorn storefront.main:app --reload --port 3000

    # Production
    uvicorn storefront.main:app --host 0.0.0.0 --port 3000

==============================================================================
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from storefront.config import get_settings
from storefront.core.exceptions import register_exception_handlers
from storefront.db import get_database_manager, init_db
from storefront.api.router import api_router
from storefront.schemas.common import ServiceInfo


# ============================================================================
# LOGGING SETUP
# ============================================================================

settings = get_settings()

logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s"
)

logger = logging.getLogger(__name__)


# ============================================================================
# APPLICATION FACTORY
# ============================================================================

class Application:
    """
    FastAPI application factory and manager.

    Handles application lifecycle including:
    - Startup and shutdown events
    - Middleware configuration
    - Router registration
    - Exception handler setup
    """

    def __init__(self):
        self._settings = get_settings()
        self._app = self._create_app()

    def _create_app(self) -> FastAPI:
        """Create and configure the FastAPI application."""
        app = FastAPI(
            title=self._settings.app_name,
            version="1.0.0",
            description="Game studio catalog storefront API",
            lifespan=self._lifespan,
            docs_url="/docs",
            redoc_url="/redoc",
        )

        self._configure_middleware(app)
        register_exception_handlers(app)
        app.include_router(api_router)
        self._register_root(app)

        return app

    @asynccontextmanager
    async def _lifespan(self, app: FastAPI):
        """Application lifespan manager."""
        self._startup()
        yield
        self._shutdown()

    def _startup(self) -> None:
        """Application startup tasks."""
        logger.info("=" * 60)
        logger.info(f"🚀 Starting {self._settings.app_name}")
        logger.info("=" * 60)

        init_db()

        if not get_database_manager().verify_connection():
            logger.error("❌ Database unreachable, refusing to start")
            raise RuntimeError("Database connection could not be established")

        base = f"http://{self._settings.host}:{self._settings.port}"
        logger.info("=" * 60)
        logger.info(f"✅ {self._settings.app_name} ready")
        logger.info(f"📍 Running on {base}")
        logger.info(f"🎮 API Games: {base}/api/games")
        logger.info("=" * 60)

    def _shutdown(self) -> None:
        """Application shutdown tasks."""
        logger.info("🛑 Shutting down...")
        get_database_manager().dispose()
        logger.info("✅ Shutdown complete")

    def _configure_middleware(self, app: FastAPI) -> None:
        """Configure CORS and request logging."""
        app.add_middleware(
            CORSMiddleware,
            allow_origins=self._settings.cors_origins_list,
            allow_credentials=False,
            allow_methods=["*"],
            allow_headers=["*"],
        )

        @app.middleware("http")
        async def log_requests(request: Request, call_next):
            response = await call_next(request)
            logger.info(f"{request.method} {request.url.path} -> {response.status_code}")
            return response

    def _register_root(self, app: FastAPI) -> None:
        """Register root service info endpoint."""

        @app.get("/", response_model=ServiceInfo)
        async def root():
            """Service information."""
            return ServiceInfo(
                status="OK",
                service=f"{self._settings.app_name} - server running",
                database=get_database_manager().dialect_label,
            )

    @property
    def app(self) -> FastAPI:
        """Get the FastAPI application instance."""
        return self._app


# ============================================================================
# APPLICATION INSTANCE
# ============================================================================

application = Application()
app = application.app


# ============================================================================
# ENTRY POINT
# ============================================================================

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "storefront.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level="debug" if settings.debug else "info"
    )
