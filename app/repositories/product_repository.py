"""Product data access."""

from __future__ import annotations

from typing import List

from sqlalchemy import or_

from app.db.models import Category, Product
from app.repositories.base import LIKE_ESCAPE, SQLAlchemyRepository, like_pattern


class ProductRepository(SQLAlchemyRepository[Product]):
    """Product storage. The linked category is joined eagerly by the model."""

    model = Product

    def find_where(self, query: str) -> List[Product]:
        """Products whose name, description or category name contains `query`."""
        pattern = like_pattern(query)
        return (
            self._query()
            .outerjoin(Category, Product.category_id == Category.id)
            .filter(
                or_(
                    Product.name.ilike(pattern, escape=LIKE_ESCAPE),
                    Product.description.ilike(pattern, escape=LIKE_ESCAPE),
                    Category.name.ilike(pattern, escape=LIKE_ESCAPE),
                )
            )
            .order_by(Product.id)
            .all()
        )
