"""
==============================================================================
Service Layer Tests
==============================================================================

Tests for CategoryService and ProductService against the test database.

==============================================================================
"""

import pytest
from sqlalchemy.orm import Session

from app.core.exceptions import AppException, ErrorCode
from app.db.models import Category, Product
from app.schemas.category import CategoryCreate, CategoryUpdate
from app.schemas.product import ProductCreate, ProductUpdate
from app.services import CategoryService, ProductService


@pytest.fixture
def categories(db: Session) -> CategoryService:
    return CategoryService(db)


@pytest.fixture
def products(db: Session) -> ProductService:
    return ProductService(db)


class TestCategoryService:
    """Tests for category tree rules."""

    def test_create_then_find(self, categories: CategoryService):
        created = categories.create(CategoryCreate(name="Garden", description="Outdoor"))
        found = categories.find_by_id(created.id)
        assert found.name == "Garden"
        assert found.description == "Outdoor"
        assert found.parent_id is None
        assert found.children == []

    def test_create_under_missing_parent(self, categories: CategoryService, db: Session):
        with pytest.raises(AppException) as exc_info:
            categories.create(CategoryCreate(name="Lost", parent_id=42))
        assert exc_info.value.code == ErrorCode.CATEGORY_NOT_FOUND
        assert exc_info.value.status_code == 404
        assert db.query(Category).count() == 0

    def test_find_missing(self, categories: CategoryService):
        with pytest.raises(AppException) as exc_info:
            categories.find_by_id(1)
        assert exc_info.value.code == ErrorCode.CATEGORY_NOT_FOUND

    def test_update_with_only_description_none(
        self, categories: CategoryService, root_category: Category
    ):
        updated = categories.update(root_category.id, CategoryUpdate(description=None))
        assert updated.name == "Electronics"
        assert updated.description is None

    def test_update_without_parent_detaches(
        self, categories: CategoryService, child_category: Category
    ):
        updated = categories.update(child_category.id, CategoryUpdate(name="Mobiles"))
        assert updated.name == "Mobiles"
        assert updated.parent_id is None

    def test_update_under_itself(self, categories: CategoryService, root_category: Category):
        with pytest.raises(AppException) as exc_info:
            categories.update(root_category.id, CategoryUpdate(parent_id=root_category.id))
        assert exc_info.value.code == ErrorCode.CATEGORY_CYCLE
        assert exc_info.value.status_code == 409

    def test_update_under_grandchild(self, categories: CategoryService, db: Session):
        a = categories.create(CategoryCreate(name="A"))
        b = categories.create(CategoryCreate(name="B", parent_id=a.id))
        c = categories.create(CategoryCreate(name="C", parent_id=b.id))

        with pytest.raises(AppException):
            categories.update(a.id, CategoryUpdate(name="A2", parent_id=c.id))

        db.expire_all()
        stored = db.get(Category, a.id)
        assert stored.name == "A"
        assert stored.parent_id is None

    def test_move_to_sibling_branch(self, categories: CategoryService):
        a = categories.create(CategoryCreate(name="A"))
        b = categories.create(CategoryCreate(name="B", parent_id=a.id))
        c = categories.create(CategoryCreate(name="C"))

        moved = categories.update(b.id, CategoryUpdate(name="B", parent_id=c.id))
        assert moved.parent_id == c.id
        listing = {cat.name: [child.name for child in cat.children] for cat in categories.find_all()}
        assert listing == {"A": [], "B": [], "C": ["B"]}

    def test_delete_leaf(self, categories: CategoryService, db: Session, root_category: Category):
        categories.delete(root_category.id)
        assert db.query(Category).count() == 0

    def test_delete_with_child_changes_nothing(
        self, categories: CategoryService, db: Session, child_category: Category
    ):
        parent_id = child_category.parent_id
        with pytest.raises(AppException) as exc_info:
            categories.delete(parent_id)
        assert exc_info.value.code == ErrorCode.UNABLE_TO_DELETE_CATEGORY
        assert exc_info.value.details["children"] == 1
        assert db.query(Category).count() == 2

    def test_delete_with_product_changes_nothing(
        self, categories: CategoryService, db: Session, product: Product
    ):
        with pytest.raises(AppException) as exc_info:
            categories.delete(product.category_id)
        assert exc_info.value.details["products"] == 1
        assert db.query(Category).count() == 1
        assert db.query(Product).one().category_id is not None

    def test_find_by_query_matches_description(self, categories: CategoryService):
        categories.create(CategoryCreate(name="Tools", description="Hammers and SAWS"))
        categories.create(CategoryCreate(name="Toys"))
        assert [c.name for c in categories.find_by_query("saw")] == ["Tools"]

    def test_find_by_query_treats_wildcards_literally(self, categories: CategoryService):
        categories.create(CategoryCreate(name="100% cotton"))
        categories.create(CategoryCreate(name="1000 threads"))
        assert [c.name for c in categories.find_by_query("0%")] == ["100% cotton"]


class TestProductService:
    """Tests for product rules."""

    def test_create_then_find(self, products: ProductService, root_category: Category):
        created = products.create(
            ProductCreate(name="Headphones", category_id=root_category.id)
        )
        found = products.find_by_id(created.id)
        assert found.name == "Headphones"
        assert found.description is None
        assert found.category.name == "Electronics"

    def test_create_with_missing_category(self, products: ProductService, db: Session):
        with pytest.raises(AppException) as exc_info:
            products.create(ProductCreate(name="Ghost", category_id=9999))
        assert exc_info.value.code == ErrorCode.CATEGORY_NOT_FOUND
        assert db.query(Product).count() == 0

    def test_update_keeps_name(self, products: ProductService, product: Product):
        updated = products.update(product.id, ProductUpdate(description="New text"))
        assert updated.name == "Charger"
        assert updated.description == "New text"
        assert updated.category_id is None

    def test_update_missing_product(self, products: ProductService):
        with pytest.raises(AppException) as exc_info:
            products.update(1, ProductUpdate(name="X"))
        assert exc_info.value.code == ErrorCode.PRODUCT_NOT_FOUND

    def test_update_missing_category_changes_nothing(
        self, products: ProductService, db: Session, product: Product
    ):
        with pytest.raises(AppException) as exc_info:
            products.update(product.id, ProductUpdate(name="Renamed", category_id=9999))
        assert exc_info.value.code == ErrorCode.CATEGORY_NOT_FOUND

        db.expire_all()
        stored = db.get(Product, product.id)
        assert stored.name == "Charger"
        assert stored.description == "USB-C wall charger"

    def test_delete(self, products: ProductService, db: Session, product: Product):
        products.delete(product.id)
        assert db.query(Product).count() == 0
        assert db.query(Category).count() == 1

    def test_delete_missing(self, products: ProductService):
        with pytest.raises(AppException) as exc_info:
            products.delete(1)
        assert exc_info.value.code == ErrorCode.PRODUCT_NOT_FOUND

    def test_find_all_resolves_category(
        self, products: ProductService, product: Product
    ):
        products.create(ProductCreate(name="Loose"))
        found = {p.name: p.category for p in products.find_all()}
        assert found["Charger"].name == "Electronics"
        assert found["Loose"] is None

    def test_find_by_query_matches_uncategorized_by_name(
        self, products: ProductService, product: Product
    ):
        products.create(ProductCreate(name="Loose cable"))
        products.create(ProductCreate(name="Loose screws", description="M3"))
        assert [p.name for p in products.find_by_query("LOOSE C")] == ["Loose cable"]
        assert [p.name for p in products.find_by_query("m3")] == ["Loose screws"]

    def test_find_by_query_matches_category_name(
        self, products: ProductService, product: Product
    ):
        products.create(ProductCreate(name="Loose"))
        found = products.find_by_query("tronics")
        assert [p.name for p in found] == ["Charger"]
        assert found[0].category.name == "Electronics"
