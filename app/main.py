"""
==============================================================================
Catalog Service - Application Entry Point
==============================================================================

FastAPI application exposing the category tree and product catalog:
- RESTful CRUD and search endpoints
- Schema creation on startup
- Health probes

Usage:
------
    # Development
    uvicorn app.main:app --reload

    # Production
    uvicorn app.main:app --host 0.0.0.0 --port 8000

==============================================================================
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import get_settings
from app.core.exceptions import register_exception_handlers
from app.db import init_db
from app.db.database import get_database_manager
from app.api.router import api_router


# ============================================================================
# LOGGING SETUP
# ============================================================================

settings = get_settings()

logging.basicConfig(
    level=settings.effective_log_level,
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
        """Initialize the application."""
        self._settings = get_settings()
        self._app = self._create_app()

    def _create_app(self) -> FastAPI:
        """Create and configure the FastAPI application."""
        app = FastAPI(
            title=self._settings.app_name,
            version="1.0.0",
            description="Category tree and product catalog service",
            lifespan=self._lifespan,
            docs_url="/docs",
            redoc_url="/redoc",
        )

        self._configure_middleware(app)
        register_exception_handlers(app)
        app.include_router(api_router)

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
        logger.info(f"🚀 Starting {self._settings.app_name} ({self._settings.app_env})")
        logger.info("=" * 60)

        init_db()

        logger.info(f"✅ {self._settings.app_name} ready")
        logger.info(f"📍 Running on http://{self._settings.host}:{self._settings.port}")
        logger.info(f"📖 API Docs: http://{self._settings.host}:{self._settings.port}/docs")

    def _shutdown(self) -> None:
        """Application shutdown tasks."""
        logger.info("🛑 Shutting down...")
        get_database_manager().dispose()
        logger.info("✅ Shutdown complete")

    def _configure_middleware(self, app: FastAPI) -> None:
        """Configure application middleware."""
        app.add_middleware(
            CORSMiddleware,
            allow_origins=self._settings.cors_origins_list,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
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
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level="debug" if settings.debug else "info"
    )
