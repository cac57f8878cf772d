"""
==============================================================================
Product Schemas Module
==============================================================================

Request and response schemas for catalog products.

==============================================================================
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from app.db.models import Product


class ProductCreate(BaseModel):
    """Product creation request."""
    model_config = ConfigDict(populate_by_name=True)

    name: str
    description: Optional[str] = None
    category_id: Optional[int] = Field(default=None, alias="categoryId")


class ProductUpdate(BaseModel):
    """
    Product update request.

    Same rules as category updates: only name is optional-preserve.
    """
    model_config = ConfigDict(populate_by_name=True)

    name: Optional[str] = None
    description: Optional[str] = None
    category_id: Optional[int] = Field(default=None, alias="categoryId")


class ProductDetail(BaseModel):
    """Product as returned by the API."""
    model_config = ConfigDict(populate_by_name=True)

    id: int
    name: str
    description: Optional[str] = None
    category_id: Optional[int] = Field(default=None, alias="categoryId")

    @classmethod
    def from_entity(cls, product: Product) -> "ProductDetail":
        return cls(
            id=product.id,
            name=product.name,
            description=product.description,
            category_id=product.category_id,
        )
