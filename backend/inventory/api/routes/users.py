"""Users: CRUD endpoints for employees.

Invariants:
    - GET /api/users lists every user ordered by id ascending
    - Unknown or non-numeric ids return 404 "User not found"
    - Duplicate email surfaces as a 500 database error
"""

import logging

from fastapi import APIRouter, Depends, status

from inventory.api.dependencies import get_user_repository
from inventory.api.lookups import deleted_or_404, found_or_404
from inventory.core.domain_types import Entity, parse_identifier
from inventory.core.repository_protocols import EntityRepository
from inventory.schemas.common import MessageOut
from inventory.schemas.user import UserOut, UserPayload

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/users", tags=["users"])


@router.get("", response_model=list[UserOut])
async def list_users(repo: EntityRepository = Depends(get_user_repository)):
    return await repo.list_all()


@router.get("/{user_id}", response_model=UserOut)
async def get_user(
    user_id: str, repo: EntityRepository = Depends(get_user_repository),
):
    user = await repo.get(parse_identifier(user_id))
    return found_or_404(user, Entity.USER, user_id)


@router.post(
    "", response_model=UserOut, status_code=status.HTTP_201_CREATED,
)
async def create_user(
    body: UserPayload, repo: EntityRepository = Depends(get_user_repository),
):
    user = await repo.create(body.model_dump())
    logger.info("User created", extra={"entity": "user", "entity_id": user["id"]})
    return user


@router.put("/{user_id}", response_model=UserOut)
async def update_user(
    user_id: str,
    body: UserPayload,
    repo: EntityRepository = Depends(get_user_repository),
):
    user = await repo.update(parse_identifier(user_id), body.model_dump())
    return found_or_404(user, Entity.USER, user_id)


@router.delete("/{user_id}", response_model=MessageOut)
async def delete_user(
    user_id: str, repo: EntityRepository = Depends(get_user_repository),
):
    """Delete a user. Their computers stay, with user_id cleared."""
    deleted = await repo.delete(parse_identifier(user_id))
    return deleted_or_404(deleted, Entity.USER, user_id)
