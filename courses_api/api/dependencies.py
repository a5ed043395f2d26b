"""Request Dependencies — repositories and the authentication gate.

Invariants:
    - Repositories are bound to the request's AsyncSession (get_db)
    - require_identity re-resolves the caller on every request (no caching)
    - Gate order: header -> user lookup -> bcrypt verify; first failure wins
    - Basic credentials are decoded as UTF-8, so any secret accepted at
      registration can be presented back

Design Decisions:
    - The header is parsed here rather than by HTTPBasic, which only decodes
      ASCII; a malformed header is treated the same as a missing one (401)
    - The gate returns a VerifiedIdentity that routes pass on explicitly
"""

import base64
import binascii
import logging
from typing import Any

from fastapi import Body, Depends, Request
from fastapi.security import HTTPBasicCredentials
from fastapi.security.utils import get_authorization_scheme_param
from sqlalchemy.ext.asyncio import AsyncSession

from courses_api.core.authentication import (
    classify_attempt, match_identity, outcome_to_error,
)
from courses_api.core.domain_types import UserId, VerifiedIdentity
from courses_api.infrastructure.database import get_db
from courses_api.infrastructure.password_hasher import verify_secret_async
from courses_api.infrastructure.repositories import (
    SqlCourseRepository, SqlUserRepository,
)

logger = logging.getLogger(__name__)


def get_user_repository(db: AsyncSession = Depends(get_db)) -> SqlUserRepository:
    return SqlUserRepository(db)


def get_course_repository(
    db: AsyncSession = Depends(get_db),
) -> SqlCourseRepository:
    return SqlCourseRepository(db)


async def read_basic_credentials(request: Request) -> HTTPBasicCredentials | None:
    """Decoded Basic credentials, or None when absent or undecodable."""
    scheme, param = get_authorization_scheme_param(
        request.headers.get("Authorization"),
    )
    if scheme.lower() != "basic" or not param:
        return None
    try:
        decoded = base64.b64decode(param, validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError):
        return None
    username, separator, password = decoded.partition(":")
    if not separator:
        return None
    return HTTPBasicCredentials(username=username, password=password)


async def require_identity(
    credentials: HTTPBasicCredentials | None = Depends(read_basic_credentials),
    users: SqlUserRepository = Depends(get_user_repository),
) -> VerifiedIdentity:
    """Authentication gate: 401 without credentials, 403 when they don't verify."""
    user = None
    secret_matches = False
    if credentials is not None:
        user = match_identity(
            await users.find_by_email(credentials.username), credentials.username,
        )
        if user is not None:
            secret_matches = await verify_secret_async(
                credentials.password, user.password,
            )
    outcome = classify_attempt(
        credentials is not None, user is not None, secret_matches,
    )
    error = outcome_to_error(outcome)
    if error:
        raise error
    logger.info(
        f"Authentication successful for user {user.id}",
        extra={"user_id": user.id},
    )
    return VerifiedIdentity(
        user_id=UserId(user.id), email_address=user.email_address,
    )


async def read_json_payload(
    payload: Any = Body(default=None),
) -> dict[str, Any]:
    """Request body as a dict; a missing or non-object body reads as empty."""
    return payload if isinstance(payload, dict) else {}
