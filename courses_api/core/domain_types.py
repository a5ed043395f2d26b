"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - UserId and CourseId wrap ints; never pass bare ints through domain logic
    - VerifiedIdentity only exists after the secret was checked
    - All valid states encoded as Enums, no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - VerifiedIdentity is a frozen value passed explicitly to services,
      never stashed on the request object (ADR: no ambient state)
"""

from dataclasses import dataclass
from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", int)
CourseId = NewType("CourseId", int)


@dataclass(frozen=True)
class VerifiedIdentity:
    """A user whose Basic credentials were matched and verified."""
    user_id: UserId
    email_address: str


# ─── Enums ───────────────────────────────────────────────────────

class Presence(str, Enum):
    """How a field rule treats an absent value."""
    REQUIRED = "required"       # absent, null or falsy is a violation
    IF_PRESENT = "if_present"   # checks run only when the key exists


class AuthOutcome(str, Enum):
    """Result of resolving a credential pair against the user store."""
    MISSING_CREDENTIALS = "missing_credentials"
    UNKNOWN_IDENTITY = "unknown_identity"
    SECRET_MISMATCH = "secret_mismatch"
    AUTHENTICATED = "authenticated"
