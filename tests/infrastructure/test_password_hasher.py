"""Password Hashing — bcrypt round trip and edge cases."""

from courses_api.infrastructure.password_hasher import (
    hash_secret,
    hash_secret_async,
    verify_secret,
    verify_secret_async,
)


def test_hash_is_not_plain_text():
    hashed = hash_secret("abc123", rounds=4)
    assert hashed != "abc123"
    assert hashed.startswith("$2")


def test_round_trip_matches_only_same_secret():
    hashed = hash_secret("abc123", rounds=4)
    assert verify_secret("abc123", hashed) is True
    assert verify_secret("abc124", hashed) is False


def test_same_secret_hashes_differently():
    assert hash_secret("abc123", rounds=4) != hash_secret("abc123", rounds=4)


def test_secrets_longer_than_72_bytes_do_not_raise():
    long_secret = "x" * 100
    hashed = hash_secret(long_secret, rounds=4)
    assert verify_secret(long_secret, hashed) is True


def test_unicode_secret_round_trip():
    hashed = hash_secret("pässwörd", rounds=4)
    assert verify_secret("pässwörd", hashed) is True
    assert verify_secret("password", hashed) is False


async def test_async_wrappers_round_trip():
    hashed = await hash_secret_async("abc123")
    assert await verify_secret_async("abc123", hashed) is True
    assert await verify_secret_async("abc124", hashed) is False
