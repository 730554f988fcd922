# backend/carwash/repositories/base_repository.py
"""
Base Repository Pattern for the car wash platform

Repositories wrap one model each and translate SQLAlchemy failures into
RepositoryException. They flush but never commit; the calling service owns
the transaction.

Services are deactivated and bookings cancelled rather than deleted, so the
base class has no delete operation; VehicleRepository adds its own.
"""

from abc import ABC, abstractmethod
from contextlib import contextmanager
import logging
from typing import Any, Generic, Iterator, List, Optional, Type, TypeVar

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Query, Session

from ..core.exceptions import RepositoryException

T = TypeVar("T")

logger = logging.getLogger(__name__)


class IRepository(ABC, Generic[T]):
    """Data access operations every repository provides."""

    @abstractmethod
    def get_by_id(self, id: Any) -> Optional[T]:
        """Entity with this primary key, or None."""

    @abstractmethod
    def get_all(self, skip: int = 0, limit: int = 100) -> List[T]:
        ...

    @abstractmethod
    def create(self, **kwargs: Any) -> T:
        """
        Add and flush a new entity.

        Raises:
            RepositoryException: If the insert fails
        """

    @abstractmethod
    def update(self, id: Any, **kwargs: Any) -> Optional[T]:
        """Set the given fields; None when the entity does not exist."""

    @abstractmethod
    def exists(self, **kwargs: Any) -> bool:
        ...

    @abstractmethod
    def count(self, **kwargs: Any) -> int:
        ...


class BaseRepository(IRepository[T]):
    """
    SQLAlchemy implementation of IRepository for a single model.

    Attributes:
        db: Session shared with the calling service
        model: Mapped class this repository reads and writes
    """

    def __init__(self, db: Session, model: Type[T]):
        self.db = db
        self.model = model
        self.logger = logging.getLogger(f"{__name__}.{model.__name__}")

    @contextmanager
    def _guard(self, action: str, rollback: bool = False) -> Iterator[None]:
        """Translate database errors for ``action``; writes also roll the session back."""
        name = self.model.__name__
        try:
            yield
        except IntegrityError as exc:
            self.logger.error("Integrity error during %s %s: %s", action, name, exc)
            self.db.rollback()
            raise RepositoryException(f"Integrity constraint violated on {name}: {exc}") from exc
        except SQLAlchemyError as exc:
            self.logger.error("Database error during %s %s: %s", action, name, exc)
            if rollback:
                self.db.rollback()
            raise RepositoryException(f"Failed to {action} {name}: {exc}") from exc

    def get_by_id(self, id: Any) -> Optional[T]:
        if id is None:
            return None
        with self._guard("get"):
            return self.db.get(self.model, str(id))

    def get_all(self, skip: int = 0, limit: int = 100) -> List[T]:
        with self._guard("list"):
            return self._build_query().offset(skip).limit(limit).all()

    def create(self, **kwargs: Any) -> T:
        """Add the entity and flush so defaults and constraints apply immediately."""
        with self._guard("create", rollback=True):
            entity = self.model(**kwargs)
            self.db.add(entity)
            self.db.flush()
            return entity

    def update(self, id: Any, **kwargs: Any) -> Optional[T]:
        """Only known attributes are set; unknown keys are ignored."""
        with self._guard("update", rollback=True):
            entity = self.get_by_id(id)
            if entity is None:
                return None
            for key, value in kwargs.items():
                if hasattr(entity, key):
                    setattr(entity, key, value)
            self.db.flush()
            return entity

    def exists(self, **kwargs: Any) -> bool:
        return self.find_one_by(**kwargs) is not None

    def count(self, **kwargs: Any) -> int:
        with self._guard("count"):
            return self._build_query().filter_by(**kwargs).count()

    def find_one_by(self, **kwargs: Any) -> Optional[T]:
        """First entity whose columns equal the given values."""
        with self._guard("find"):
            return self._build_query().filter_by(**kwargs).first()

    # Helpers for subclasses

    def _build_query(self) -> Query:
        return self.db.query(self.model)

    def _execute_query(self, query: Query) -> List[T]:
        with self._guard("query"):
            return query.all()
