"""
==============================================================================
FastAPI Dependencies Module
==============================================================================

Dependency injection functions for route handlers.

    get_db                  → request-scoped SQLAlchemy session
    get_category_service    → CategoryService bound to that session
    get_product_service     → ProductService bound to that session

Tests replace get_db through app.dependency_overrides; the services follow.

==============================================================================
"""

from __future__ import annotations

from fastapi import Depends
from sqlalchemy.orm import Session

from app.db.database import get_db
from app.services.category_service import CategoryService
from app.services.product_service import ProductService


def get_category_service(db: Session = Depends(get_db)) -> CategoryService:
    """Provide a CategoryService for the current request."""
    return CategoryService(db)


def get_product_service(db: Session = Depends(get_db)) -> ProductService:
    """Provide a ProductService for the current request."""
    return ProductService(db)


__all__ = [
    "get_db",
    "get_category_service",
    "get_product_service",
]
