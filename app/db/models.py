"""
==============================================================================
SQLAlchemy ORM Models Module
==============================================================================

ORM models for the catalog.

This module defines:
- Category: Node of the category tree (self-referential parent)
- Product: Catalog item optionally classified under one Category

Database Schema:
---------------

    ┌─────────────────────────────────────────────────────────────────┐
    │                          categories                              │
    ├─────────────────────────────────────────────────────────────────┤
    │ id (INTEGER, PK, AUTO INCREMENT)                                │
    │ name (VARCHAR, NOT NULL)                                        │
    │ description (VARCHAR, NULLABLE)                                 │
    │ parent_id (INTEGER, FK → categories.id, NULLABLE, SET NULL)     │
    └─────────────────────────────────────────────────────────────────┘
              │  ▲
              │  │ N:1 (parent, ON DELETE SET NULL)
              │  └──────────┘
              │
              │ 1:N (ON DELETE SET NULL)
              ▼
    ┌─────────────────────────────────────────────────────────────────┐
    │                           products                               │
    ├─────────────────────────────────────────────────────────────────┤
    │ id (INTEGER, PK, AUTO INCREMENT)                                │
    │ name (VARCHAR, NOT NULL)                                        │
    │ description (VARCHAR, NULLABLE)                                 │
    │ category_id (INTEGER, FK → categories.id, NULLABLE, SET NULL)   │
    └─────────────────────────────────────────────────────────────────┘

Deleting a category never cascades: rows that pointed at it keep living
with a NULL reference. Both relationships use passive_deletes so the
database, not the ORM, applies that rule.

=============================================================================
"""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, relationship

from app.db.database import Base


# =============================================================================
# CATEGORY MODEL
# =============================================================================

class Category(Base):
    """
    Category tree node.

    Attributes:
        id: Generated integer identifier
        name: Display name
        description: Optional free text
        parent_id: Identifier of the parent category, NULL for roots

    Relationships:
        parent: Parent category, if any
        children: Direct sub-categories
        products: Products classified under this category
    """

    __tablename__ = "categories"

    id = Column(
        Integer,
        primary_key=True,
        autoincrement=True,
        doc="Generated category identifier"
    )

    name = Column(
        String,
        nullable=False,
        doc="Category display name"
    )

    description = Column(
        String,
        nullable=True,
        doc="Optional category description"
    )

    parent_id = Column(
        Integer,
        ForeignKey("categories.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
        doc="Parent category identifier (NULL for roots)"
    )

    parent: Mapped[Optional["Category"]] = relationship(
        "Category",
        remote_side=[id],
        back_populates="children",
        doc="Parent category"
    )

    children: Mapped[List["Category"]] = relationship(
        "Category",
        back_populates="parent",
        passive_deletes=True,
        order_by="Category.id",
        doc="Direct sub-categories"
    )

    products: Mapped[List["Product"]] = relationship(
        "Product",
        back_populates="category",
        passive_deletes=True,
        doc="Products classified under this category"
    )

    def __repr__(self) -> str:
        return (
            f"Category(id={self.id!r}, "
            f"name={self.name!r}, "
            f"parent_id={self.parent_id!r})"
        )


# =============================================================================
# PRODUCT MODEL
# =============================================================================

class Product(Base):
    """
    Catalog product.

    Attributes:
        id: Generated integer identifier
        name: Display name
        description: Optional free text
        category_id: Identifier of the linked category, or NULL

    Relationships:
        category: Linked category, loaded together with the product
    """

    __tablename__ = "products"

    id = Column(
        Integer,
        primary_key=True,
        autoincrement=True,
        doc="Generated product identifier"
    )

    name = Column(
        String,
        nullable=False,
        doc="Product display name"
    )

    description = Column(
        String,
        nullable=True,
        doc="Optional product description"
    )

    category_id = Column(
        Integer,
        ForeignKey("categories.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
        doc="Linked category identifier"
    )

    category: Mapped[Optional[Category]] = relationship(
        "Category",
        back_populates="products",
        lazy="joined",
        doc="Linked category"
    )

    def __repr__(self) -> str:
        return (
            f"Product(id={self.id!r}, "
            f"name={self.name!r}, "
            f"category_id={self.category_id!r})"
        )
