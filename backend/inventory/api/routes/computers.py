"""Computers: CRUD endpoints for computer assets.

Invariants:
    - GET /api/computers lists every computer ordered by id ascending
    - POST without status stores 'Active'; PUT is a full replace
    - DELETE also removes the computer's maintenance logs (FK cascade)
"""

import logging

from fastapi import APIRouter, Depends, status

from inventory.api.dependencies import get_computer_repository
from inventory.api.lookups import deleted_or_404, found_or_404
from inventory.core.domain_types import Entity, parse_identifier
from inventory.core.repository_protocols import EntityRepository
from inventory.schemas.common import MessageOut
from inventory.schemas.computer import ComputerOut, ComputerPayload

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/computers", tags=["computers"])


@router.get("", response_model=list[ComputerOut])
async def list_computers(
    repo: EntityRepository = Depends(get_computer_repository),
):
    return await repo.list_all()


@router.get("/{computer_id}", response_model=ComputerOut)
async def get_computer(
    computer_id: str,
    repo: EntityRepository = Depends(get_computer_repository),
):
    computer = await repo.get(parse_identifier(computer_id))
    return found_or_404(computer, Entity.COMPUTER, computer_id)


@router.post(
    "", response_model=ComputerOut, status_code=status.HTTP_201_CREATED,
)
async def create_computer(
    body: ComputerPayload,
    repo: EntityRepository = Depends(get_computer_repository),
):
    computer = await repo.create(body.model_dump())
    logger.info(
        f"Computer {computer['hostname']} created",
        extra={"entity": "computer", "entity_id": computer["id"]},
    )
    return computer


@router.put("/{computer_id}", response_model=ComputerOut)
async def update_computer(
    computer_id: str,
    body: ComputerPayload,
    repo: EntityRepository = Depends(get_computer_repository),
):
    computer = await repo.update(parse_identifier(computer_id), body.model_dump())
    return found_or_404(computer, Entity.COMPUTER, computer_id)


@router.delete("/{computer_id}", response_model=MessageOut)
async def delete_computer(
    computer_id: str,
    repo: EntityRepository = Depends(get_computer_repository),
):
    deleted = await repo.delete(parse_identifier(computer_id))
    return deleted_or_404(deleted, Entity.COMPUTER, computer_id)
