"""
==============================================================================
Database Connection Management Module
==============================================================================

Database connection management using SQLAlchemy.

This module implements:
- DatabaseManager: Singleton class for managing the engine and sessions
- Session factory with proper lifecycle management
- Connection pooling configuration

SQLAlchemy Architecture:
-----------------------
    ┌─────────────────┐
    │ DatabaseManager │ (Singleton)
    └────────┬────────┘
             │
    ┌────────▼────────┐
    │     Engine      │ (Connection pool)
    └────────┬────────┘
             │
    ┌────────▼────────┐
    │  SessionLocal   │ (Session factory)
    └────────┬────────┘
             │
    ┌────────▼────────┐
    │    Session      │ (Request-scoped)
    └─────────────────┘

SQLite Note:
-----------
Foreign keys are off by default in SQLite. Every new connection turns
them on, otherwise ON DELETE SET NULL on categories/products is ignored.
lower() is replaced with a Unicode-aware version so ILIKE folds non-ASCII
case the way PostgreSQL does. In-memory URLs share one connection through
StaticPool.

==============================================================================
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Generator, Optional

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from app.config import get_settings


# Module logger
logger = logging.getLogger(__name__)

# SQLAlchemy declarative base for all models
Base = declarative_base()


def _unicode_lower(value):
    if value is None:
        return None
    return str(value).lower()


def configure_sqlite_engine(engine: Engine) -> None:
    """
    Prepare every new connection of a SQLite engine.

    - Turns on foreign key enforcement
    - Replaces the built-in lower(), which only folds ASCII, so ILIKE
      searches are case-insensitive for any script
    """

    @event.listens_for(engine, "connect")
    def set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()
        dbapi_connection.create_function("lower", 1, _unicode_lower)


class DatabaseManager:
    """
    Centralized database connection manager.

    The engine is created lazily on first access, so settings can still be
    changed before the first connection.

    Example:
        >>> db_manager = DatabaseManager()
        >>> session = db_manager.get_session()
        >>> categories = session.query(Category).all()
        >>> session.close()
    """

    _instance: Optional[DatabaseManager] = None

    def __new__(cls) -> DatabaseManager:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self) -> None:
        if getattr(self, '_initialized', False):
            return

        self._settings = get_settings()
        self._engine: Optional[Engine] = None
        self._session_factory: Optional[sessionmaker] = None
        self._initialized = True

        logger.debug("DatabaseManager initialized")

    # =========================================================================
    # ENGINE MANAGEMENT
    # =========================================================================

    @property
    def engine(self) -> Engine:
        """Get the SQLAlchemy engine, creating it on first access."""
        if self._engine is None:
            self._engine = self._create_engine()
        return self._engine

    def _create_engine(self) -> Engine:
        """
        Create the SQLAlchemy engine with appropriate configuration.

        - SQLite: disables check_same_thread, enables foreign keys,
          StaticPool for in-memory databases
        - PostgreSQL/MySQL: connection pooling with pre-ping
        """
        database_url = self._settings.database_url
        echo = self._settings.db_echo

        if database_url.startswith("sqlite"):
            engine_kwargs = {
                "connect_args": {"check_same_thread": False},
                "echo": echo,
            }
            if self._settings.get_database_path() is None:
                engine_kwargs["poolclass"] = StaticPool

            engine = create_engine(database_url, **engine_kwargs)
            configure_sqlite_engine(engine)

            logger.info(f"Created SQLite engine: {database_url}")

        else:
            engine = create_engine(
                database_url,
                pool_size=5,
                max_overflow=10,
                pool_timeout=30,
                pool_recycle=1800,
                pool_pre_ping=True,
                echo=echo,
            )

            logger.info(f"Created database engine with pooling: {engine.url!r}")

        return engine

    # =========================================================================
    # SESSION MANAGEMENT
    # =========================================================================

    @property
    def session_factory(self) -> sessionmaker:
        """Get the session factory, creating it on first access."""
        if self._session_factory is None:
            self._session_factory = sessionmaker(
                bind=self.engine,
                autocommit=False,
                autoflush=False,
                expire_on_commit=False,
            )
        return self._session_factory

    def get_session(self) -> Session:
        """
        Get a new database session.

        The caller is responsible for closing the session.
        """
        return self.session_factory()

    # =========================================================================
    # TABLE MANAGEMENT
    # =========================================================================

    def create_tables(self) -> None:
        """Create all tables that don't already exist."""
        Base.metadata.create_all(bind=self.engine)
        logger.info("Database tables created/verified")

    def drop_tables(self) -> None:
        """
        Drop all tables defined in the models.

        WARNING: This will delete all data!
        """
        Base.metadata.drop_all(bind=self.engine)
        logger.warning("All database tables dropped")

    # =========================================================================
    # CONNECTION MANAGEMENT
    # =========================================================================

    def verify_connection(self) -> bool:
        """Return True if a trivial query succeeds."""
        try:
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            logger.debug("Database connection verified")
            return True
        except Exception as e:
            logger.error(f"Database connection failed: {e}")
            return False

    def dispose(self) -> None:
        """Dispose of the connection pool on shutdown."""
        if self._engine is not None:
            self._engine.dispose()
            logger.info("Database connection pool disposed")

    def __repr__(self) -> str:
        return f"DatabaseManager(url={self._settings.database_url!r})"


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================

@lru_cache(maxsize=1)
def get_database_manager() -> DatabaseManager:
    """Get the global DatabaseManager instance."""
    return DatabaseManager()


def get_db() -> Generator[Session, None, None]:
    """
    FastAPI dependency that yields a request-scoped database session.

    Usage:
        @router.get("/categories")
        async def list_categories(db: Session = Depends(get_db)):
            ...
    """
    db_manager = get_database_manager()
    session = db_manager.get_session()
    try:
        yield session
    finally:
        session.close()
