"""
==============================================================================
Schemas Package - Pydantic Models
==============================================================================

Request and response schemas using Pydantic for validation.

This package provides:
- Common: Acknowledgement and id responses
- Category: Category tree schemas
- Product: Product schemas

==============================================================================
"""

from .common import OkResponse, IdResponse
from .category import (
    CategoryCreate,
    CategoryUpdate,
    CategoryDetail,
    CategoryWithSubCategories,
)
from .product import (
    ProductCreate,
    ProductUpdate,
    ProductDetail,
)

__all__ = [
    # Common
    "OkResponse",
    "IdResponse",
    # Category
    "CategoryCreate",
    "CategoryUpdate",
    "CategoryDetail",
    "CategoryWithSubCategories",
    # Product
    "ProductCreate",
    "ProductUpdate",
    "ProductDetail",
]
