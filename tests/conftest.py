"""
==============================================================================
Pytest Configuration and Fixtures
==============================================================================

Provides test database, client, and catalog fixtures.

==============================================================================
"""

import os

# The application database is never touched by tests
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from typing import Generator
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

from app.main import app
from app.db.database import Base, configure_sqlite_engine
from app.db.models import Category, Product
from app.core.dependencies import get_db


# ============================================================================
# DATABASE FIXTURES
# ============================================================================

# In-memory SQLite for testing
SQLALCHEMY_TEST_DATABASE_URL = "sqlite://"

engine = create_engine(
    SQLALCHEMY_TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
configure_sqlite_engine(engine)

TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def db() -> Generator[Session, None, None]:
    """Create a fresh database for each test."""
    Base.metadata.create_all(bind=engine)

    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db: Session) -> Generator[TestClient, None, None]:
    """Create test client with database override."""
    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


# ============================================================================
# CATALOG FIXTURES
# ============================================================================

@pytest.fixture
def root_category(db: Session) -> Category:
    """A root category without children."""
    category = Category(name="Electronics", description="Devices and gadgets")
    db.add(category)
    db.commit()
    db.refresh(category)
    return category


@pytest.fixture
def child_category(db: Session, root_category: Category) -> Category:
    """A category under root_category."""
    category = Category(name="Phones", description=None, parent_id=root_category.id)
    db.add(category)
    db.commit()
    db.refresh(category)
    return category


@pytest.fixture
def product(db: Session, root_category: Category) -> Product:
    """A product classified under root_category."""
    item = Product(name="Charger", description="USB-C wall charger", category_id=root_category.id)
    db.add(item)
    db.commit()
    db.refresh(item)
    return item
