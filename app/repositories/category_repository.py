"""Category data access."""

from __future__ import annotations

from typing import List, Set

from sqlalchemy import or_
from sqlalchemy.orm import Query, selectinload

from app.db.models import Category, Product
from app.repositories.base import LIKE_ESCAPE, SQLAlchemyRepository, like_pattern


class CategoryRepository(SQLAlchemyRepository[Category]):
    """Category storage with tree lookups."""

    model = Category

    def _with_children(self) -> Query:
        return (
            self._query()
            .options(selectinload(Category.children))
            .populate_existing()
        )

    def find_all(self) -> List[Category]:
        """All categories, each with its direct children loaded."""
        return self._with_children().order_by(Category.id).all()

    def find_where(self, query: str) -> List[Category]:
        """Categories whose name or description contains `query`, ignoring case."""
        pattern = like_pattern(query)
        return (
            self._with_children()
            .filter(
                or_(
                    Category.name.ilike(pattern, escape=LIKE_ESCAPE),
                    Category.description.ilike(pattern, escape=LIKE_ESCAPE),
                )
            )
            .order_by(Category.id)
            .all()
        )

    def children_of(self, category_id: int) -> List[Category]:
        return (
            self._query()
            .filter(Category.parent_id == category_id)
            .order_by(Category.id)
            .all()
        )

    def count_products(self, category_id: int) -> int:
        return (
            self._db.query(Product)
            .filter(Product.category_id == category_id)
            .count()
        )

    def ancestor_ids(self, category_id: int) -> Set[int]:
        """
        Ids on the path from `category_id` up to its root, inclusive.

        Stops early on an already seen id so a corrupted tree cannot loop.
        """
        seen: Set[int] = set()
        current = category_id
        while current is not None and current not in seen:
            seen.add(current)
            current = (
                self._db.query(Category.parent_id)
                .filter(Category.id == current)
                .scalar()
            )
        return seen
