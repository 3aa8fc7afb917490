"""Maintenance Logs: CRUD endpoints for computer service history.

Invariants:
    - GET /api/maintenance lists newest date first, each row with computer_hostname
    - GET /api/maintenance/{id} returns the bare row (no hostname)
    - POST without status stores 'Scheduled'
"""

from fastapi import APIRouter, Depends, status

from inventory.api.dependencies import get_maintenance_repository
from inventory.api.lookups import deleted_or_404, found_or_404
from inventory.core.domain_types import Entity, parse_identifier
from inventory.core.repository_protocols import EntityRepository
from inventory.schemas.common import MessageOut
from inventory.schemas.maintenance import (
    MaintenanceLogListItem, MaintenanceLogOut, MaintenanceLogPayload,
)

router = APIRouter(prefix="/api/maintenance", tags=["maintenance"])


@router.get("", response_model=list[MaintenanceLogListItem])
async def list_maintenance_logs(
    repo: EntityRepository = Depends(get_maintenance_repository),
):
    return await repo.list_all()


@router.get("/{log_id}", response_model=MaintenanceLogOut)
async def get_maintenance_log(
    log_id: str,
    repo: EntityRepository = Depends(get_maintenance_repository),
):
    log = await repo.get(parse_identifier(log_id))
    return found_or_404(log, Entity.MAINTENANCE_LOG, log_id)


@router.post(
    "", response_model=MaintenanceLogOut,
    status_code=status.HTTP_201_CREATED,
)
async def create_maintenance_log(
    body: MaintenanceLogPayload,
    repo: EntityRepository = Depends(get_maintenance_repository),
):
    return await repo.create(body.model_dump())


@router.put("/{log_id}", response_model=MaintenanceLogOut)
async def update_maintenance_log(
    log_id: str,
    body: MaintenanceLogPayload,
    repo: EntityRepository = Depends(get_maintenance_repository),
):
    log = await repo.update(parse_identifier(log_id), body.model_dump())
    return found_or_404(log, Entity.MAINTENANCE_LOG, log_id)


@router.delete("/{log_id}", response_model=MessageOut)
async def delete_maintenance_log(
    log_id: str,
    repo: EntityRepository = Depends(get_maintenance_repository),
):
    deleted = await repo.delete(parse_identifier(log_id))
    return deleted_or_404(deleted, Entity.MAINTENANCE_LOG, log_id)
