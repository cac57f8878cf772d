"""
==============================================================================
Repositories Package - Data Access Layer
==============================================================================

One repository per entity, each bound to a request-scoped Session.

    ┌─────────────────┐
    │    Service      │
    └────────┬────────┘
             │
    ┌────────▼────────┐
    │   Repository    │  ← get / save / delete / find_where / find_all
    └────────┬────────┘
             │
    ┌────────▼────────┐
    │  SQLAlchemy ORM │
    └─────────────────┘

==============================================================================
"""

from .base import SQLAlchemyRepository, like_pattern
from .category_repository import CategoryRepository
from .product_repository import ProductRepository

__all__ = [
    "SQLAlchemyRepository",
    "like_pattern",
    "CategoryRepository",
    "ProductRepository",
]
