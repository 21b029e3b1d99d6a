"""Error taxonomy for the store and the account layer."""

from __future__ import annotations


class FilebaseError(Exception):
    """Base error for the project."""


class StoreError(FilebaseError):
    """Raised for persistence-level issues."""


class StoreIOError(StoreError, OSError):
    """The backing storage could not be read or written."""


class CorruptStateError(StoreError):
    """The backing storage does not hold a valid document tree."""


class AccountError(FilebaseError):
    """Base class for registration and login failures."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(AccountError):
    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field


class DuplicateEmailError(AccountError):
    pass


class UserNotFoundError(AccountError):
    pass


class InvalidCredentialsError(AccountError):
    pass
