"""Not-found translation shared by the entity routes."""

from inventory.core.domain_types import Entity
from inventory.core.errors import ResourceNotFoundError
from inventory.core.repository_protocols import Row


def found_or_404(row: Row | None, entity: Entity, raw_id: str) -> Row:
    """Return the row, or raise the entity's 404."""
    if row is None:
        raise ResourceNotFoundError(entity.value, raw_id)
    return row


def deleted_or_404(deleted: bool, entity: Entity, raw_id: str) -> dict:
    if not deleted:
        raise ResourceNotFoundError(entity.value, raw_id)
    return {"message": f"{entity.value} deleted successfully"}
