"""Maintenance Log Repository: CRUD over maintenance_logs, listing joined to computers.

Invariants:
    - list_all orders by date DESC (id DESC breaks ties) and adds computer_hostname
      through a LEFT JOIN, so a log whose computer reference is NULL still lists
    - get returns the bare row (no hostname)
    - create: missing/empty status becomes 'Scheduled'; update writes status as given
"""

from sqlalchemy import Select, select

from inventory.core.domain_types import DEFAULT_MAINTENANCE_STATUS
from inventory.core.repository_protocols import Row
from inventory.models.computer import Computer
from inventory.models.maintenance_log import MaintenanceLog
from inventory.services.table_repository import TableRepository

MAINTENANCE_FIELDS = ("computer_id", "date", "type", "description", "technician")


class MaintenanceLogRepository(TableRepository):
    """Maintenance history, newest first."""

    table = MaintenanceLog.__table__

    def _list_query(self) -> Select:
        logs = self.table
        computers = Computer.__table__
        return (
            select(logs, computers.c.hostname.label("computer_hostname"))
            .select_from(
                logs.outerjoin(computers, logs.c.computer_id == computers.c.id),
            )
            .order_by(logs.c.date.desc(), logs.c.id.desc())
        )

    async def create(self, payload: Row) -> Row:
        values = {f: payload.get(f) for f in MAINTENANCE_FIELDS}
        values["status"] = payload.get("status") or DEFAULT_MAINTENANCE_STATUS
        return await self._insert(values)

    async def update(self, entity_id: int | None, payload: Row) -> Row | None:
        values = {f: payload.get(f) for f in MAINTENANCE_FIELDS}
        values["status"] = payload.get("status")
        return await self._update(entity_id, values)
