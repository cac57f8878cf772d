"""
==============================================================================
Services Package - Business Logic Layer
==============================================================================

Service classes implementing the catalog rules.

This package provides:
- CategoryService: Category tree creation, moves, guarded deletes, search
- ProductService: Product CRUD with a validated category reference

Architecture Pattern: Service Layer
----------------------------------
    ┌─────────────────┐
    │   API Router    │
    └────────┬────────┘
             │
    ┌────────▼────────┐
    │    Service      │  ← Business Logic
    └────────┬────────┘
             │
    ┌────────▼────────┐
    │   Repository    │  ← Data Access (via ORM)
    └─────────────────┘

Failures are raised as AppException with a closed ErrorCode.

Usage:
------
    from app.services import CategoryService

    service = CategoryService(db_session)
    category = service.create(CategoryCreate(name="Food"))

==============================================================================
"""

from .category_service import CategoryService
from .product_service import ProductService

__all__ = [
    "CategoryService",
    "ProductService",
]
