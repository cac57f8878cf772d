"""
==============================================================================
Product Service Module
==============================================================================

Product CRUD with a validated, nullable category reference.

==============================================================================
"""

from __future__ import annotations

import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from app.core import exceptions
from app.db.models import Product
from app.repositories import CategoryRepository, ProductRepository
from app.schemas.product import ProductCreate, ProductUpdate


# Module logger
logger = logging.getLogger(__name__)


class ProductService:
    """
    Product management service.

    Attributes:
        _products: ProductRepository bound to the request session
        _categories: CategoryRepository used to validate category references
    """

    def __init__(
        self,
        db: Session,
        products: Optional[ProductRepository] = None,
        categories: Optional[CategoryRepository] = None
    ) -> None:
        self._products = products or ProductRepository(db)
        self._categories = categories or CategoryRepository(db)

    def create(self, data: ProductCreate) -> Product:
        """
        Create a product.

        Raises:
            AppException: CATEGORY_NOT_FOUND if category_id doesn't exist
        """
        if data.category_id is not None:
            self._require_category(data.category_id)

        product = Product(
            name=data.name,
            description=data.description,
            category_id=data.category_id,
        )
        product = self._products.save(product)

        logger.info(f"✅ Product created: {product.name} (id={product.id}, category={product.category_id})")
        return product

    def find_by_id(self, product_id: int) -> Product:
        """
        Get product by id.

        Raises:
            AppException: PRODUCT_NOT_FOUND if product doesn't exist
        """
        product = self._products.get(product_id)

        if product is None:
            logger.warning(f"Product not found: {product_id}")
            raise exceptions.product_not_found(product_id)

        return product

    def find_by_query(self, query: str) -> List[Product]:
        """Products matching query in name, description or category name."""
        return self._products.find_where(query)

    def find_all(self) -> List[Product]:
        return self._products.find_all()

    def update(self, product_id: int, data: ProductUpdate) -> Product:
        """
        Update a product in place.

        The name changes only when given. Description and category are
        always overwritten.

        Raises:
            AppException: PRODUCT_NOT_FOUND if product doesn't exist
            AppException: CATEGORY_NOT_FOUND if category_id doesn't exist
        """
        product = self.find_by_id(product_id)

        if data.category_id is not None:
            self._require_category(data.category_id)

        if data.name is not None:
            product.name = data.name
        product.description = data.description
        product.category_id = data.category_id

        product = self._products.save(product)

        logger.info(f"Product updated: {product.name} (id={product.id}, category={product.category_id})")
        return product

    def delete(self, product_id: int) -> None:
        """
        Delete a product.

        Raises:
            AppException: PRODUCT_NOT_FOUND if product doesn't exist
        """
        product = self.find_by_id(product_id)
        self._products.delete(product)

        logger.info(f"Product deleted: {product.name} (id={product_id})")

    def _require_category(self, category_id: int) -> None:
        if not self._categories.exists(category_id):
            logger.warning(f"Category not found for product: {category_id}")
            raise exceptions.category_not_found(category_id)
