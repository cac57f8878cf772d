"""
==============================================================================
Repository Base Module
==============================================================================

Narrow data access contract shared by the catalog repositories.

Services only talk to the store through these methods:

    get(entity_id)      → entity or None
    exists(entity_id)   → bool
    save(entity)        → persisted entity (committed, refreshed)
    delete(entity)      → None (committed)
    find_where(query)   → entities matching a case-insensitive substring
    find_all()          → every entity

==============================================================================
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, List, Optional, Type, TypeVar

from sqlalchemy.orm import Query, Session

from app.db.database import Base


ModelT = TypeVar("ModelT", bound=Base)

LIKE_ESCAPE = "\\"


def like_pattern(query: str) -> str:
    """
    Build a LIKE pattern that matches `query` as a literal substring.

    Wildcards typed by the caller are escaped with LIKE_ESCAPE.
    """
    escaped = (
        query.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", f"{LIKE_ESCAPE}%")
        .replace("_", f"{LIKE_ESCAPE}_")
    )
    return f"%{escaped}%"


class SQLAlchemyRepository(ABC, Generic[ModelT]):
    """
    Base repository bound to a request-scoped session.

    Subclasses set `model` and implement find_where().
    """

    model: Type[ModelT]

    def __init__(self, db: Session) -> None:
        self._db = db

    def _query(self) -> Query:
        return self._db.query(self.model)

    def get(self, entity_id: int) -> Optional[ModelT]:
        return self._db.get(self.model, entity_id)

    def exists(self, entity_id: int) -> bool:
        return self._query().filter(self.model.id == entity_id).first() is not None

    def save(self, entity: ModelT) -> ModelT:
        """Add or update an entity and commit the transaction."""
        self._db.add(entity)
        try:
            self._db.commit()
        except Exception:
            self._db.rollback()
            raise
        self._db.refresh(entity)
        return entity

    def delete(self, entity: ModelT) -> None:
        """Delete an entity and commit the transaction."""
        self._db.delete(entity)
        try:
            self._db.commit()
        except Exception:
            self._db.rollback()
            raise

    def find_all(self) -> List[ModelT]:
        return self._query().order_by(self.model.id).all()

    @abstractmethod
    def find_where(self, query: str) -> List[ModelT]:
        """Entities matching `query` as a case-insensitive substring."""
