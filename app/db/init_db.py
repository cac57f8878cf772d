"""
==============================================================================
Database Initialization Module
==============================================================================

Database setup utilities run at application startup.

Initialization Flow:
-------------------
1. Create all tables from ORM models (existing tables are kept)
2. Verify the connection
3. Log row counts

Usage:
------
    from app.db import init_db, DatabaseInitializer

    init_db()

    initializer = DatabaseInitializer()
    initializer.reset()  # development only

==============================================================================
"""

from __future__ import annotations

import logging
from typing import Dict, Optional

from sqlalchemy.orm import Session

from app.config import get_settings
from app.db.database import DatabaseManager
from app.db.models import Category, Product


# Module logger
logger = logging.getLogger(__name__)


class DatabaseInitializer:
    """
    Database initialization manager.

    Attributes:
        _db_manager: DatabaseManager instance
        _settings: Application settings
        _session: Optional externally owned session
    """

    def __init__(
        self,
        db_manager: Optional[DatabaseManager] = None,
        session: Optional[Session] = None
    ) -> None:
        self._db_manager = db_manager or DatabaseManager()
        self._settings = get_settings()
        self._session = session

    def _get_session(self) -> Session:
        if self._session is not None:
            return self._session
        return self._db_manager.get_session()

    # =========================================================================
    # TABLE OPERATIONS
    # =========================================================================

    def create_tables(self) -> None:
        """Create all database tables that don't already exist."""
        logger.info("Creating database tables...")
        self._db_manager.create_tables()
        logger.info("✅ Database tables created successfully")

    def drop_tables(self) -> None:
        """Drop all database tables."""
        logger.warning("Dropping all database tables...")
        self._db_manager.drop_tables()
        logger.warning("⚠️ All database tables dropped")

    def get_stats(self) -> Dict[str, int]:
        """
        Count rows per table.

        Returns:
            Dictionary with category and product counts
        """
        session = self._get_session()

        try:
            return {
                "categories": session.query(Category).count(),
                "products": session.query(Product).count(),
            }
        finally:
            if self._session is None:
                session.close()

    # =========================================================================
    # INITIALIZATION METHODS
    # =========================================================================

    def initialize(self) -> None:
        """Create tables and verify the connection."""
        logger.info("=" * 60)
        logger.info("Initializing database...")
        logger.info("=" * 60)

        self.create_tables()

        if self._db_manager.verify_connection():
            stats = self.get_stats()
            logger.info(
                f"✅ Database connection verified "
                f"({stats['categories']} categories, {stats['products']} products)"
            )
        else:
            logger.warning("⚠️ Database connection check failed")

        logger.info("Database initialization complete")

    def reset(self) -> None:
        """
        Drop and recreate all tables.

        Raises:
            RuntimeError: When running in production
        """
        if self._settings.is_production:
            logger.error("Cannot reset database in production!")
            raise RuntimeError("Database reset not allowed in production")

        logger.warning("RESETTING DATABASE - ALL DATA WILL BE LOST")
        self.drop_tables()
        self.create_tables()
        logger.warning("Database reset complete")


def init_db() -> None:
    """Initialize the database with the global DatabaseManager."""
    DatabaseInitializer().initialize()
