"""
==============================================================================
Category Service Module
==============================================================================

Business rules for the category tree.

Tree Rules:
----------
- A parent must exist before a category is created or moved under it
- A category can't be moved under itself or one of its descendants
- A category with sub-categories or products can't be deleted
- Every check runs before the single write of an operation

Listing and search load one level of children only.

==============================================================================
"""

from __future__ import annotations

import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from app.core import exceptions
from app.db.models import Category
from app.repositories import CategoryRepository
from app.schemas.category import CategoryCreate, CategoryUpdate


# Module logger
logger = logging.getLogger(__name__)


class CategoryService:
    """
    Category tree management service.

    Attributes:
        _categories: CategoryRepository bound to the request session

    Example:
        >>> service = CategoryService(db_session)
        >>> food = service.create(CategoryCreate(name="Food"))
        >>> fruit = service.create(CategoryCreate(name="Fruit", parent_id=food.id))
        >>> service.delete(food.id)
        Traceback (most recent call last):
        ...
        app.core.exceptions.AppException: Unable to delete category
    """

    def __init__(
        self,
        db: Session,
        categories: Optional[CategoryRepository] = None
    ) -> None:
        """
        Initialize the category service.

        Args:
            db: SQLAlchemy database session
            categories: Optional repository (built from db if None)
        """
        self._categories = categories or CategoryRepository(db)

    # =========================================================================
    # CREATE OPERATIONS
    # =========================================================================

    def create(self, data: CategoryCreate) -> Category:
        """
        Create a category, optionally under an existing parent.

        Raises:
            AppException: CATEGORY_NOT_FOUND if parent_id doesn't exist
        """
        if data.parent_id is not None:
            self._require_parent(data.parent_id)

        category = Category(
            name=data.name,
            description=data.description,
            parent_id=data.parent_id,
        )
        category = self._categories.save(category)

        logger.info(f"✅ Category created: {category.name} (id={category.id}, parent={category.parent_id})")
        return category

    # =========================================================================
    # READ OPERATIONS
    # =========================================================================

    def find_by_id(self, category_id: int) -> Category:
        """
        Get category by id.

        Raises:
            AppException: CATEGORY_NOT_FOUND if category doesn't exist
        """
        category = self._categories.get(category_id)

        if category is None:
            logger.warning(f"Category not found: {category_id}")
            raise exceptions.category_not_found(category_id)

        return category

    def find_by_query(self, query: str) -> List[Category]:
        """Categories whose name or description contains query, any case."""
        return self._categories.find_where(query)

    def find_all(self) -> List[Category]:
        """Every category with its direct children loaded."""
        return self._categories.find_all()

    # =========================================================================
    # UPDATE OPERATIONS
    # =========================================================================

    def update(self, category_id: int, data: CategoryUpdate) -> Category:
        """
        Update a category in place.

        The name changes only when given. Description and parent are always
        overwritten, so None clears the description and makes the category
        a root.

        Raises:
            AppException: CATEGORY_NOT_FOUND if category or parent doesn't exist
            AppException: CATEGORY_CYCLE if the parent is the category itself
                or one of its descendants
        """
        category = self.find_by_id(category_id)

        if data.parent_id is not None:
            self._require_parent(data.parent_id)
            if category_id in self._categories.ancestor_ids(data.parent_id):
                logger.warning(
                    f"Rejected move of category {category_id} under {data.parent_id}: cycle"
                )
                raise exceptions.category_cycle(category_id, data.parent_id)

        if data.name is not None:
            category.name = data.name
        category.description = data.description
        category.parent_id = data.parent_id

        category = self._categories.save(category)

        logger.info(f"Category updated: {category.name} (id={category.id}, parent={category.parent_id})")
        return category

    # =========================================================================
    # DELETE OPERATIONS
    # =========================================================================

    def delete(self, category_id: int) -> None:
        """
        Delete a category that nothing references.

        Raises:
            AppException: CATEGORY_NOT_FOUND if category doesn't exist
            AppException: UNABLE_TO_DELETE_CATEGORY if it still has
                sub-categories or products
        """
        category = self.find_by_id(category_id)

        children = len(self._categories.children_of(category_id))
        products = self._categories.count_products(category_id)

        if children or products:
            logger.warning(
                f"Refused to delete category {category_id}: "
                f"{children} sub-categories, {products} products"
            )
            raise exceptions.unable_to_delete_category(category_id, children, products)

        self._categories.delete(category)

        logger.info(f"Category deleted: {category.name} (id={category_id})")

    # =========================================================================
    # HELPERS
    # =========================================================================

    def _require_parent(self, parent_id: int) -> None:
        if not self._categories.exists(parent_id):
            logger.warning(f"Parent category not found: {parent_id}")
            raise exceptions.category_not_found(parent_id)
