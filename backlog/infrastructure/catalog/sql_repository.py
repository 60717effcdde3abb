"""
Adapter: Generic SQLAlchemy Core repositories.

Implements EntityRepository and SoftDeleteRepository ports for any
table whose columns match an entity dataclass. Storage exceptions are
left to propagate; procedures normalize them.
"""

import logging
from datetime import datetime
from typing import Any, Generic, Optional, TypeVar
from uuid import uuid4

from sqlalchemy import Table, delete, insert, select, update
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.sql.elements import ColumnElement

from backlog.domain.catalog.ports import EntityRepository, SoftDeleteRepository
from backlog.infrastructure.catalog.tables import utcnow

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SqlRepository(EntityRepository[T], Generic[T]):
    """Table-backed repository.

    Args:
        engine: Shared SQLAlchemy engine.
        table: Table holding the rows.
        entity: Dataclass the rows are mapped onto.
    """

    def __init__(self, engine: Engine, table: Table, entity: type[T]) -> None:
        self._engine = engine
        self._table = table
        self._entity = entity

    @property
    def table(self) -> Table:
        return self._table

    def _scope(self) -> list[ColumnElement]:
        """Predicates every default read and update is intersected with."""
        return []

    def _filters(self, filters: dict[str, Any]) -> list[ColumnElement]:
        return [self._table.c[name] == value for name, value in filters.items()]

    def _to_entity(self, row) -> T:
        return self._entity(**row._mapping)

    def _fetch(self, conn: Connection, *clauses: ColumnElement) -> list[T]:
        stmt = select(self._table).where(*clauses)
        if "created_at" in self._table.c:
            stmt = stmt.order_by(self._table.c.created_at, self._table.c.id)
        return [self._to_entity(row) for row in conn.execute(stmt)]

    def _fetch_one(self, conn: Connection, *clauses: ColumnElement) -> Optional[T]:
        rows = self._fetch(conn, *clauses)
        return rows[0] if rows else None

    def create(self, values: dict[str, Any]) -> T:
        now = utcnow()
        row = {"id": uuid4().hex, "created_at": now, "updated_at": now, **values}
        with self._engine.begin() as conn:
            conn.execute(insert(self._table).values(**row))
            created = self._fetch_one(conn, self._table.c.id == row["id"])
        logger.info("Created %s %s", self._table.name, row["id"])
        return created

    def find_unique(self, entity_id: str) -> Optional[T]:
        with self._engine.connect() as conn:
            return self._fetch_one(conn, self._table.c.id == entity_id, *self._scope())

    def find_many(self, **filters: Any) -> list[T]:
        with self._engine.connect() as conn:
            return self._fetch(conn, *self._filters(filters), *self._scope())

    def update(self, entity_id: str, values: dict[str, Any]) -> Optional[T]:
        clauses = [self._table.c.id == entity_id, *self._scope()]
        with self._engine.begin() as conn:
            result = conn.execute(
                update(self._table)
                .where(*clauses)
                .values(**values, updated_at=utcnow())
            )
            if result.rowcount == 0:
                return None
            return self._fetch_one(conn, self._table.c.id == entity_id)

    def delete(self, entity_id: str) -> Optional[T]:
        with self._engine.begin() as conn:
            existing = self._fetch_one(conn, self._table.c.id == entity_id, *self._scope())
            if existing is None:
                return None
            conn.execute(delete(self._table).where(self._table.c.id == entity_id))
        logger.info("Deleted %s %s", self._table.name, entity_id)
        return existing


class SoftDeleteSqlRepository(SqlRepository[T], SoftDeleteRepository[T]):
    """Repository for tables with a nullable ``deleted`` timestamp.

    Default reads and updates only see active rows. The deleted-only
    queries and ``soft_delete`` build their statements from the bare
    table, so the active-only predicate is never applied to them.
    """

    def _scope(self) -> list[ColumnElement]:
        return [self._table.c.deleted.is_(None)]

    def find_deleted_many(self, **filters: Any) -> list[T]:
        with self._engine.connect() as conn:
            return self._fetch(conn, *self._filters(filters), self._table.c.deleted.is_not(None))

    def find_deleted_unique(self, entity_id: str) -> Optional[T]:
        with self._engine.connect() as conn:
            return self._fetch_one(
                conn, self._table.c.id == entity_id, self._table.c.deleted.is_not(None)
            )

    def _stamp(
        self, conn: Connection, entity_id: str, stamp: datetime, *clauses: ColumnElement
    ) -> bool:
        result = conn.execute(
            update(self._table)
            .where(self._table.c.id == entity_id, *clauses)
            .values(deleted=stamp)
        )
        return result.rowcount > 0

    def soft_delete(self, entity_id: str, now: Optional[datetime] = None) -> Optional[T]:
        with self._engine.begin() as conn:
            if not self._stamp(conn, entity_id, now or utcnow()):
                return None
            deleted = self._fetch_one(conn, self._table.c.id == entity_id)
        logger.info("Soft-deleted %s %s", self._table.name, entity_id)
        return deleted

    def delete(self, entity_id: str) -> Optional[T]:
        """Soft-delete an active row and return it as it was before.

        The lookup and the stamp share one transaction; the stamp is
        scoped to active rows so a concurrent delete cannot stamp twice.
        """
        with self._engine.begin() as conn:
            existing = self._fetch_one(conn, self._table.c.id == entity_id, *self._scope())
            if existing is None:
                return None
            if not self._stamp(conn, entity_id, utcnow(), *self._scope()):
                return None
        logger.info("Soft-deleted %s %s", self._table.name, entity_id)
        return existing
