"""Credential Resolution — pure decisions behind the authentication gate.

Invariants:
    - All functions are PURE: no IO, no hashing, no DB
    - Email match is exact and case-sensitive; the first candidate wins
    - Only AUTHENTICATED maps to no error; every other outcome maps to 401/403

Design Decisions:
    - Outcome enum instead of raising: the gate dependency performs the IO
      (lookup, bcrypt) and asks this module what the result means
      (ADR: functional core, imperative shell)
"""

from typing import Iterable, TypeVar

from courses_api.core.domain_types import AuthOutcome
from courses_api.core.errors import (
    ForbiddenError, RequestRejectedError, UnauthenticatedError,
)
from courses_api.core.repository_protocols import UserLike


U = TypeVar("U", bound=UserLike)

UNKNOWN_IDENTITY_REASON = "No user matches the credential provided."
SECRET_MISMATCH_REASON = "The password did not match the user credential."


def match_identity(candidates: Iterable[U], name: str) -> U | None:
    """First user whose email address equals the credential name."""
    for candidate in candidates:
        if candidate.email_address == name:
            return candidate
    return None


def classify_attempt(
    has_credentials: bool, user_found: bool, secret_matches: bool,
) -> AuthOutcome:
    """Collapse the gate's three observations into one outcome."""
    if not has_credentials:
        return AuthOutcome.MISSING_CREDENTIALS
    if not user_found:
        return AuthOutcome.UNKNOWN_IDENTITY
    if not secret_matches:
        return AuthOutcome.SECRET_MISMATCH
    return AuthOutcome.AUTHENTICATED


def outcome_to_error(outcome: AuthOutcome) -> RequestRejectedError | None:
    """Error the gate must raise for an outcome, None when authenticated."""
    if outcome is AuthOutcome.MISSING_CREDENTIALS:
        return UnauthenticatedError()
    if outcome is AuthOutcome.UNKNOWN_IDENTITY:
        return ForbiddenError(UNKNOWN_IDENTITY_REASON)
    if outcome is AuthOutcome.SECRET_MISMATCH:
        return ForbiddenError(SECRET_MISMATCH_REASON)
    return None
