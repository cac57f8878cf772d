"""
==============================================================================
Category Schemas Module
==============================================================================

Request and response schemas for the category tree.

JSON field names are camelCase (parentId, subCategories); Python code
uses the snake_case attribute names.

==============================================================================
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from app.db.models import Category


# =============================================================================
# REQUEST SCHEMAS
# =============================================================================

class CategoryCreate(BaseModel):
    """Category creation request."""
    model_config = ConfigDict(populate_by_name=True)

    name: str
    description: Optional[str] = None
    parent_id: Optional[int] = Field(default=None, alias="parentId")


class CategoryUpdate(BaseModel):
    """
    Category update request.

    An omitted name keeps the stored one. Description and parentId are
    always applied: omitting them clears the description and detaches the
    category from its parent.
    """
    model_config = ConfigDict(populate_by_name=True)

    name: Optional[str] = None
    description: Optional[str] = None
    parent_id: Optional[int] = Field(default=None, alias="parentId")


# =============================================================================
# RESPONSE SCHEMAS
# =============================================================================

class CategoryDetail(BaseModel):
    """Single category without its tree links."""
    id: int
    name: str
    description: Optional[str] = None

    @classmethod
    def from_entity(cls, category: Category) -> "CategoryDetail":
        return cls(
            id=category.id,
            name=category.name,
            description=category.description,
        )


class CategoryWithSubCategories(CategoryDetail):
    """
    Category with its direct children flattened to id/name/description.

    Grandchildren are never included.
    """
    model_config = ConfigDict(populate_by_name=True)

    sub_categories: List[CategoryDetail] = Field(
        default_factory=list,
        alias="subCategories"
    )

    @classmethod
    def from_entity(cls, category: Category) -> "CategoryWithSubCategories":
        return cls(
            id=category.id,
            name=category.name,
            description=category.description,
            sub_categories=[CategoryDetail.from_entity(c) for c in category.children],
        )
