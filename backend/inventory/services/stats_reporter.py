"""Stats Reporter: whole-table counts for the dashboard.

Invariants:
    - Three independent COUNT(*) queries, each on its own pooled session
    - No snapshot across the three: under concurrent writes they may reflect
      slightly different instants
"""

import asyncio

from sqlalchemy import Table, func, select

from inventory.infrastructure.database import DatabaseSessionManager
from inventory.models.computer import Computer
from inventory.models.maintenance_log import MaintenanceLog
from inventory.models.user import User


class StatsReporter:
    """Aggregate counter over users, computers and maintenance logs."""

    def __init__(self, db: DatabaseSessionManager):
        self.db = db

    async def _count(self, table: Table) -> int:
        async with self.db.session() as session:
            result = await session.execute(
                select(func.count()).select_from(table),
            )
            return int(result.scalar_one())

    async def collect(self) -> dict[str, int]:
        computers, users, maintenance = await asyncio.gather(
            self._count(Computer.__table__),
            self._count(User.__table__),
            self._count(MaintenanceLog.__table__),
        )
        return {
            "computers": computers,
            "users": users,
            "maintenance": maintenance,
        }
