"""Boundary Protocols: contracts between the HTTP layer and persistence.

Invariants:
    - Routes depend on these Protocols, never on a concrete repository class
    - Rows cross the boundary as plain dicts keyed by column name
    - A missing row is None (get/update) or False (delete), never an exception

Design Decisions:
    - Protocol over ABC: structural subtyping, tests can pass any fake with the same shape
"""

from typing import Any, Protocol


Row = dict[str, Any]


class EntityRepository(Protocol):
    """Contract shared by the user, computer and maintenance-log repositories."""
    async def list_all(self) -> list[Row]: ...
    async def get(self, entity_id: int | None) -> Row | None: ...
    async def create(self, payload: Row) -> Row: ...
    async def update(self, entity_id: int | None, payload: Row) -> Row | None: ...
    async def delete(self, entity_id: int | None) -> bool: ...


class StatsSource(Protocol):
    """Contract for the aggregate counter."""
    async def collect(self) -> dict[str, int]: ...
