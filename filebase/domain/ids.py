"""Identifier generation for documents and user records."""
from __future__ import annotations

import random
import string
import time

LETTERS = string.ascii_uppercase
DIGITS = string.digits

_rng = random.Random()


def random_letters(length: int, rng: random.Random | None = None) -> str:
    rng = rng or _rng
    return "".join(rng.choice(LETTERS) for _ in range(length))


def random_digits(length: int, rng: random.Random | None = None) -> str:
    rng = rng or _rng
    return "".join(rng.choice(DIGITS) for _ in range(length))


def generate_user_id(rng: random.Random | None = None) -> str:
    """
    Build an ID shaped like ``AA12-BB43``.

    Every group is drawn independently; nothing checks the result against
    existing users, so uniqueness is only probabilistic.
    """
    first = random_letters(2, rng) + random_digits(2, rng)
    second = random_letters(2, rng) + random_digits(2, rng)
    return f"{first}-{second}"


def generate_document_id(now_ms: int | None = None) -> str:
    """Return ``doc<epoch millis>``. Two calls within one millisecond collide."""
    if now_ms is None:
        now_ms = time.time_ns() // 1_000_000
    return f"doc{now_ms}"
