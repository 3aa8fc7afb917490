"""User Repository: CRUD over the users table."""

from inventory.core.repository_protocols import Row
from inventory.models.user import User
from inventory.services.table_repository import TableRepository

USER_FIELDS = ("name", "email", "department", "position")


class UserRepository(TableRepository):
    """Users ordered by id; deleting one clears computers.user_id (FK SET NULL)."""

    table = User.__table__

    async def create(self, payload: Row) -> Row:
        return await self._insert({f: payload.get(f) for f in USER_FIELDS})

    async def update(self, entity_id: int | None, payload: Row) -> Row | None:
        return await self._update(
            entity_id, {f: payload.get(f) for f in USER_FIELDS},
        )
