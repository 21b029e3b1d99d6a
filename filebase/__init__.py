"""
File-persisted document store with a Firestore-like reference API and a
small account (register/login) layer on top of the ``users`` collection.
"""

from filebase.core.errors import (
    AccountError,
    CorruptStateError,
    DuplicateEmailError,
    FilebaseError,
    InvalidCredentialsError,
    StoreError,
    StoreIOError,
    UserNotFoundError,
    ValidationError,
)
from filebase.database import Database
from filebase.repositories import (
    CollectionReference,
    DocumentReference,
    JsonFileStore,
    MemoryStore,
    Store,
)

__all__ = [
    "AccountError",
    "CollectionReference",
    "CorruptStateError",
    "Database",
    "DocumentReference",
    "DuplicateEmailError",
    "FilebaseError",
    "InvalidCredentialsError",
    "JsonFileStore",
    "MemoryStore",
    "Store",
    "StoreError",
    "StoreIOError",
    "UserNotFoundError",
    "ValidationError",
]
