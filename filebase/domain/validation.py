"""Domain helpers for username, email and password validation."""
from __future__ import annotations

import re

from filebase.core.errors import ValidationError

USERNAME_PATTERN = re.compile(r"[a-zA-Z0-9_]{3,30}")
# Loose on purpose: one "@", a dot somewhere after it, no whitespace.
EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
PASSWORD_PATTERN = re.compile(r"(?=.*\d)(?=.*[a-z])(?=.*[A-Z])(?=.*[\W_]).{8,}", re.ASCII)

USERNAME_MESSAGE = "Username must be 3-30 characters long and can only contain letters, numbers, and underscores."
EMAIL_MESSAGE = "Invalid email format."
PASSWORD_MESSAGE = (
    "Password must be at least 8 characters long, contain at least one digit, "
    "one lowercase letter, one uppercase letter, and one special character."
)


def is_valid_username(value: str | None) -> bool:
    if not isinstance(value, str):
        return False
    return bool(USERNAME_PATTERN.fullmatch(value))


def is_valid_email(value: str | None) -> bool:
    if not isinstance(value, str):
        return False
    return bool(EMAIL_PATTERN.fullmatch(value))


def is_valid_password(value: str | None) -> bool:
    if not isinstance(value, str):
        return False
    return bool(PASSWORD_PATTERN.fullmatch(value))


def validate_username(value: str | None) -> None:
    if not is_valid_username(value):
        raise ValidationError("username", USERNAME_MESSAGE)


def validate_email(value: str | None) -> None:
    if not is_valid_email(value):
        raise ValidationError("email", EMAIL_MESSAGE)


def validate_password(value: str | None) -> None:
    if not is_valid_password(value):
        raise ValidationError("password", PASSWORD_MESSAGE)


def validate_registration(username: str | None, email: str | None, password: str | None) -> None:
    """Run the three checks in order; the first failure is raised."""
    validate_username(username)
    validate_email(email)
    validate_password(password)
