"""
Entity store contracts and the SQLAlchemy implementation shared by all resources.

Services depend on the Protocol types only; the SQLAlchemy stores bind them to
a database session. Stores speak domain records (dataclasses) and map to and
from ORM rows explicitly, so nothing above this layer touches the ORM.
"""
import logging
from typing import Any, Generic, List, Optional, Protocol, Type, TypeVar

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.exceptions import ConflictError, NotFoundError

logger = logging.getLogger(__name__)

E = TypeVar("E")


class EntityStore(Protocol[E]):
    """Persistence operations every resource service relies on."""

    def create(self, entity: E) -> E: ...

    def find_by_id(self, entity_id: int) -> Optional[E]: ...

    def find_all(self) -> List[E]: ...

    def exists_by_id(self, entity_id: int) -> bool: ...

    def update(self, entity: E) -> E: ...

    def delete_by_id(self, entity_id: int) -> None: ...


class SqlAlchemyStore(Generic[E]):
    """
    EntityStore backed by a SQLAlchemy session.

    Subclasses set `model` and `entity_name` and provide the three mapping
    hooks. Listing order is ascending id.
    """

    model: Type[Any]
    entity_name = "Entity"

    def __init__(self, db: Session):
        self.db = db

    def _to_domain(self, row) -> E:
        raise NotImplementedError

    def _to_row(self, entity: E):
        raise NotImplementedError

    def _apply(self, row, entity: E) -> None:
        """Copy every persisted field except identity from entity onto row."""
        raise NotImplementedError

    def create(self, entity: E) -> E:
        row = self._to_row(entity)
        self.db.add(row)
        self._commit()
        self.db.refresh(row)
        return self._to_domain(row)

    def find_by_id(self, entity_id: int) -> Optional[E]:
        row = self.db.get(self.model, entity_id)
        return self._to_domain(row) if row is not None else None

    def find_all(self) -> List[E]:
        rows = self.db.execute(select(self.model).order_by(self.model.id)).scalars().all()
        return [self._to_domain(row) for row in rows]

    def exists_by_id(self, entity_id: int) -> bool:
        stmt = select(self.model.id).where(self.model.id == entity_id)
        return self.db.execute(stmt).first() is not None

    def update(self, entity: E) -> E:
        row = self.db.get(self.model, entity.id)
        if row is None:
            raise NotFoundError(self.entity_name, "id", entity.id)

        self._apply(row, entity)
        self._commit()
        self.db.refresh(row)
        return self._to_domain(row)

    def delete_by_id(self, entity_id: int) -> None:
        row = self.db.get(self.model, entity_id)
        if row is None:
            return

        self.db.delete(row)
        self._commit()

    def _find_one_by(self, column, value) -> Optional[E]:
        row = self.db.execute(select(self.model).where(column == value)).scalars().first()
        return self._to_domain(row) if row is not None else None

    def _exists_by(self, column, value) -> bool:
        stmt = select(self.model.id).where(column == value)
        return self.db.execute(stmt).first() is not None

    def _distinct_values(self, column) -> List[str]:
        """Distinct non-null values of a column in ascending order."""
        stmt = select(column).distinct().where(column.isnot(None)).order_by(column)
        return list(self.db.execute(stmt).scalars().all())

    def _commit(self) -> None:
        try:
            self.db.commit()
        except IntegrityError as e:
            # Unique constraint violations surface here
            self.db.rollback()
            logger.warning(f"Integrity error writing {self.entity_name}: {e.orig}")
            raise ConflictError(
                f"{self.entity_name} conflicts with an existing record"
            ) from e
