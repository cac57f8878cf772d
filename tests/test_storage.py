"""
==============================================================================
Storage Tests
==============================================================================

Schema rules enforced by the database and repository helpers.

==============================================================================
"""

import pytest
from sqlalchemy import delete, text
from sqlalchemy.orm import Session

from app.config import Settings
from app.db import DatabaseInitializer, DatabaseManager
from app.db.models import Category, Product
from app.repositories import CategoryRepository, SQLAlchemyRepository, like_pattern


class TestSetNullOnDelete:
    """Rows referencing a deleted category keep living with a NULL reference."""

    def test_children_lose_parent(self, db: Session, child_category: Category):
        parent_id = child_category.parent_id
        child_id = child_category.id

        db.execute(delete(Category).where(Category.id == parent_id))
        db.commit()

        db.expire_all()
        orphan = db.get(Category, child_id)
        assert orphan is not None
        assert orphan.parent_id is None

    def test_products_lose_category(self, db: Session, product: Product):
        product_id = product.id

        db.execute(delete(Category).where(Category.id == product.category_id))
        db.commit()

        db.expire_all()
        stored = db.get(Product, product_id)
        assert stored is not None
        assert stored.category_id is None
        assert stored.category is None


class TestSqliteConnection:
    """Per-connection SQLite setup."""

    @pytest.mark.parametrize(
        "value, expected",
        [("ÉCOLE", "école"), ("ЭЛЕКТРОНИКА", "электроника"), ("ABC", "abc")],
    )
    def test_lower_folds_non_ascii(self, db: Session, value: str, expected: str):
        assert db.execute(text("SELECT lower(:value)"), {"value": value}).scalar() == expected

    def test_lower_keeps_null(self, db: Session):
        assert db.execute(text("SELECT lower(NULL)")).scalar() is None

    def test_foreign_keys_enabled(self, db: Session):
        assert db.execute(text("PRAGMA foreign_keys")).scalar() == 1


class TestCategoryRepository:
    """Tests for tree lookups."""

    def test_ancestor_ids(self, db: Session, child_category: Category):
        repository = CategoryRepository(db)
        assert repository.ancestor_ids(child_category.id) == {
            child_category.id,
            child_category.parent_id,
        }

    def test_children_and_products(self, db: Session, child_category: Category, product: Product):
        repository = CategoryRepository(db)
        root_id = child_category.parent_id
        assert [c.id for c in repository.children_of(root_id)] == [child_category.id]
        assert repository.count_products(root_id) == 1
        assert repository.count_products(child_category.id) == 0

    def test_exists(self, db: Session, root_category: Category):
        repository = CategoryRepository(db)
        assert repository.exists(root_category.id)
        assert not repository.exists(root_category.id + 1)

    def test_base_repository_is_abstract(self, db: Session):
        with pytest.raises(TypeError):
            SQLAlchemyRepository(db)


def test_like_pattern_escapes_wildcards():
    assert like_pattern("ab") == "%ab%"
    assert like_pattern("50%_off") == "%50\\%\\_off%"


def test_settings_normalization():
    settings = Settings(app_env="Weird", api_prefix="api/v1/", database_url="sqlite://")
    assert settings.app_env == "development"
    assert settings.api_prefix == "/api/v1"
    assert settings.get_database_path() is None
    assert Settings(database_url="sqlite:///./data/x.db").get_database_path().as_posix() == "data/x.db"


class TestDatabaseInitializer:
    """Table management on the application engine."""

    def _add_category(self, name: str) -> None:
        session = DatabaseManager().get_session()
        try:
            session.add(Category(name=name))
            session.commit()
        finally:
            session.close()

    def test_reset_recreates_empty_tables(self):
        initializer = DatabaseInitializer()
        initializer.create_tables()
        self._add_category("Temporary")
        assert initializer.get_stats()["categories"] >= 1

        initializer.reset()

        assert initializer.get_stats() == {"categories": 0, "products": 0}

    def test_reset_refused_in_production(self, monkeypatch: pytest.MonkeyPatch):
        initializer = DatabaseInitializer()
        initializer.reset()
        self._add_category("Kept")
        monkeypatch.setattr(
            initializer, "_settings", Settings(app_env="production", database_url="sqlite://")
        )

        with pytest.raises(RuntimeError):
            initializer.reset()

        assert initializer.get_stats()["categories"] == 1
