"""Password Hashing — bcrypt hash creation and verification.

Invariants:
    - Plain-text secrets are never stored or logged
    - verify_secret uses bcrypt.checkpw (constant-time digest comparison)
    - Async wrappers run bcrypt in a worker thread; the event loop never blocks

Design Decisions:
    - bcrypt only consumes the first 72 bytes of a secret; longer secrets are
      truncated explicitly instead of raising
    - Cost factor comes from settings so tests can run at the minimum (4)
"""

import asyncio

import bcrypt

from courses_api.config import get_settings


_BCRYPT_MAX_BYTES = 72


def _encode(secret: str) -> bytes:
    return secret.encode("utf-8")[:_BCRYPT_MAX_BYTES]


def hash_secret(secret: str, rounds: int | None = None) -> str:
    """One-way hash suitable for the users.password column."""
    salt = bcrypt.gensalt(rounds=rounds or get_settings().bcrypt_rounds)
    return bcrypt.hashpw(_encode(secret), salt).decode("utf-8")


def verify_secret(secret: str, hashed: str) -> bool:
    return bcrypt.checkpw(_encode(secret), hashed.encode("utf-8"))


async def hash_secret_async(secret: str) -> str:
    return await asyncio.to_thread(hash_secret, secret)


async def verify_secret_async(secret: str, hashed: str) -> bool:
    return await asyncio.to_thread(verify_secret, secret, hashed)
