"""Table Repository: shared list/get/insert/update/delete over one table.

Invariants:
    - One session (one pooled connection) per operation, released on exit
    - One SQL statement per operation; writes commit before the row is returned
    - A None identifier matches nothing and never reaches the database
    - Rows leave as plain dicts keyed by column name
"""

from typing import Any, ClassVar

from sqlalchemy import Select, Table, delete, insert, select, update

from inventory.core.repository_protocols import Row
from inventory.infrastructure.database import DatabaseSessionManager


class TableRepository:
    """Base for the per-entity repositories. Subclasses set `table`."""

    table: ClassVar[Table]

    def __init__(self, db: DatabaseSessionManager):
        self.db = db

    def _list_query(self) -> Select:
        return select(self.table).order_by(self.table.c.id.asc())

    async def list_all(self) -> list[Row]:
        async with self.db.session() as session:
            result = await session.execute(self._list_query())
            return [dict(row) for row in result.mappings().all()]

    async def get(self, entity_id: int | None) -> Row | None:
        if entity_id is None:
            return None
        async with self.db.session() as session:
            result = await session.execute(
                select(self.table).where(self.table.c.id == entity_id),
            )
            row = result.mappings().first()
        return dict(row) if row is not None else None

    async def delete(self, entity_id: int | None) -> bool:
        """Delete one row. Dependent rows follow the FK ON DELETE rule."""
        if entity_id is None:
            return False
        async with self.db.session() as session:
            result = await session.execute(
                delete(self.table)
                .where(self.table.c.id == entity_id)
                .returning(self.table.c.id),
            )
            deleted = result.first() is not None
            await session.commit()
        return deleted

    async def _insert(self, values: dict[str, Any]) -> Row:
        async with self.db.session() as session:
            result = await session.execute(
                insert(self.table).values(**values).returning(*self.table.c),
            )
            row = dict(result.mappings().one())
            await session.commit()
        return row

    async def _update(self, entity_id: int | None, values: dict[str, Any]) -> Row | None:
        """Full replace of the given columns; None when no row matched."""
        if entity_id is None:
            return None
        async with self.db.session() as session:
            result = await session.execute(
                update(self.table)
                .where(self.table.c.id == entity_id)
                .values(**values)
                .returning(*self.table.c),
            )
            row = result.mappings().first()
            row = dict(row) if row is not None else None
            await session.commit()
        return row
