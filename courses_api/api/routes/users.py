"""User Routes — list users (authenticated) and register (anonymous).

Invariants:
    - GET requires a verified identity; POST does not
    - POST never echoes the created user back, only a message
"""

from typing import Any

from fastapi import APIRouter, Depends, status

from courses_api.api.dependencies import (
    get_user_repository, read_json_payload, require_identity,
)
from courses_api.core.domain_types import VerifiedIdentity
from courses_api.infrastructure.repositories import SqlUserRepository
from courses_api.schemas.message import MessageResponse
from courses_api.schemas.user import UserResponse
from courses_api.services import user_accounts

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=list[UserResponse])
async def list_users(
    identity: VerifiedIdentity = Depends(require_identity),
    users: SqlUserRepository = Depends(get_user_repository),
):
    """All users, password excluded."""
    return await user_accounts.list_users(identity, users)


@router.post(
    "", response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_user(
    payload: dict[str, Any] = Depends(read_json_payload),
    users: SqlUserRepository = Depends(get_user_repository),
):
    """Register a user. 400 with the ordered violation list on bad input."""
    await user_accounts.register_user(payload, users)
    return MessageResponse(message="Successfully created new user.")
