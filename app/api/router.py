"""
==============================================================================
Main API Router
==============================================================================

Combines all v1 API routes under the configured API prefix.

==============================================================================
"""

from fastapi import APIRouter

from app.config import get_settings
from app.api.v1 import health, categories, products


class MainAPIRouter:
    """
    Main API router combining all versioned routes.

    Provides a single entry point for all API endpoints.
    """

    def __init__(self, prefix: str = ""):
        """Initialize the main router with all sub-routers."""
        self._router = APIRouter(prefix=prefix)
        self._include_routers()

    def _include_routers(self) -> None:
        """Include all v1 routers."""
        self._router.include_router(health.router)
        self._router.include_router(categories.router)
        self._router.include_router(products.router)

    @property
    def router(self) -> APIRouter:
        """Get the FastAPI router instance."""
        return self._router


# Create main API router instance
api_router = MainAPIRouter(prefix=get_settings().api_prefix).router
