"""User Accounts — list and register users.

Invariants:
    - Passwords are hashed before they reach the repository
    - Listing never exposes the password column (UserResponse has no such field)
    - Registration is anonymous; listing requires a VerifiedIdentity
"""

import logging
from typing import Any, Mapping

from courses_api.core.domain_types import VerifiedIdentity
from courses_api.core.field_validation import check_payload
from courses_api.core.repository_protocols import UserRepository
from courses_api.core.rule_sets import USER_RULES
from courses_api.infrastructure.password_hasher import hash_secret_async
from courses_api.schemas.user import UserResponse

logger = logging.getLogger(__name__)


async def list_users(
    identity: VerifiedIdentity, users: UserRepository,
) -> list[UserResponse]:
    rows = await users.find_all()
    logger.info(
        f"Listed {len(rows)} users", extra={"user_id": identity.user_id},
    )
    return [UserResponse.model_validate(row) for row in rows]


async def register_user(
    payload: Mapping[str, Any], users: UserRepository,
) -> None:
    """Validate, hash the password, persist. Raises ValidationFailedError."""
    error = check_payload(payload, USER_RULES)
    if error:
        raise error
    await users.create({
        "first_name": payload["firstName"],
        "last_name": payload["lastName"],
        "email_address": payload["emailAddress"],
        "password": await hash_secret_async(payload["password"]),
    })
