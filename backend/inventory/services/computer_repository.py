"""Computer Repository: CRUD over the computers table.

Invariants:
    - create: missing/empty status becomes 'Active'
    - create and update: a falsy user_id is stored as NULL (unassigned)
    - update is a full replace: an omitted status is written as NULL
    - delete cascades to maintenance_logs at the database level
"""

from inventory.core.domain_types import DEFAULT_COMPUTER_STATUS
from inventory.core.repository_protocols import Row
from inventory.models.computer import Computer
from inventory.services.table_repository import TableRepository

COMPUTER_FIELDS = ("hostname", "brand", "model", "cpu", "ram", "storage", "os")


def _computer_values(payload: Row, status: str | None) -> dict:
    values = {f: payload.get(f) for f in COMPUTER_FIELDS}
    values["status"] = status
    values["user_id"] = payload.get("user_id") or None
    return values


class ComputerRepository(TableRepository):
    """Computers ordered by id."""

    table = Computer.__table__

    async def create(self, payload: Row) -> Row:
        status = payload.get("status") or DEFAULT_COMPUTER_STATUS
        return await self._insert(_computer_values(payload, status))

    async def update(self, entity_id: int | None, payload: Row) -> Row | None:
        return await self._update(
            entity_id, _computer_values(payload, payload.get("status")),
        )
