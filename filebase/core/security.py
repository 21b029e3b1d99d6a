"""Security helpers (hashing and verification)."""

from __future__ import annotations

import asyncio
from functools import lru_cache

from argon2 import PasswordHasher, exceptions as argon_exc

from .config import get_settings


@lru_cache
def _hasher(time_cost: int, memory_cost: int) -> PasswordHasher:
    return PasswordHasher(time_cost=time_cost, memory_cost=memory_cost)


def get_hasher() -> PasswordHasher:
    """Return the PasswordHasher matching the configured cost."""
    settings = get_settings()
    return _hasher(settings.hash_time_cost, settings.hash_memory_cost)


def hash_password(password: str) -> str:
    """Create a salted Argon2 hash of the password."""
    return get_hasher().hash(password)


def verify_password(password: str, stored_hash: str | None) -> bool:
    if not stored_hash:
        return False
    try:
        return get_hasher().verify(stored_hash, password)
    except (argon_exc.VerifyMismatchError, argon_exc.VerificationError, argon_exc.InvalidHashError):
        return False


def needs_rehash(stored_hash: str) -> bool:
    """True when the hash was produced with parameters other than the configured ones."""
    try:
        return get_hasher().check_needs_rehash(stored_hash)
    except argon_exc.InvalidHashError:
        return False


async def hash_password_async(password: str) -> str:
    # argon2 is CPU bound; keep it off the event loop.
    return await asyncio.to_thread(hash_password, password)


async def verify_password_async(password: str, stored_hash: str | None) -> bool:
    return await asyncio.to_thread(verify_password, password, stored_hash)
