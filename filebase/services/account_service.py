"""
Registration and login on top of the ``users`` collection.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Any, Callable, Optional

from filebase.core.errors import DuplicateEmailError, InvalidCredentialsError, UserNotFoundError
from filebase.core.security import hash_password_async, needs_rehash, verify_password_async
from filebase.domain.ids import generate_user_id
from filebase.domain.validation import validate_registration
from filebase.repositories.base import Document, Store

logger = logging.getLogger(__name__)

USERS_COLLECTION = "users"


def public_projection(record: Document) -> dict[str, Any]:
    """The part of a user record that is safe to hand back to callers."""
    return {"id": record.get("id"), "username": record.get("username"), "email": record.get("email")}


@dataclass
class AccountService:
    """Handles registration and login flows."""

    store: Store
    id_factory: Callable[[], str] = field(default=generate_user_id)

    def __post_init__(self):
        self.collection_name = USERS_COLLECTION

    # -------------------------------------- helpers --------------------------------------
    def users(self):
        return self.store.collection(self.collection_name)

    def find_user_by_email(self, email: str) -> tuple[Optional[str], Optional[Document]]:
        """Return ``(doc_id, record)`` of the first user whose email matches exactly."""
        for doc_id, record in self.users().get().items():
            if isinstance(record, dict) and record.get("email") == email:
                return doc_id, record
        return None, None

    # -------------------------------------- register --------------------------------------
    async def register_user(self, username: str, email: str, password: str) -> dict[str, Any]:
        validate_registration(username, email, password)

        _, existing = self.find_user_by_email(email)
        if existing is not None:
            raise DuplicateEmailError("This email is already registered.")

        user_id = self.id_factory()
        password_hash = await hash_password_async(password)

        record = {"id": user_id, "username": username, "email": email, "password": password_hash}
        self.users().add(record)
        logger.info(f"Registered user {user_id}")
        return public_projection(record)

    # -------------------------------------- login --------------------------------------
    async def login_user(self, email: str, password: str) -> dict[str, Any]:
        doc_id, user = self.find_user_by_email(email)
        if user is None:
            raise UserNotFoundError("No user found with this email.")
        stored_hash = user.get("password")
        if not await verify_password_async(password, stored_hash):
            raise InvalidCredentialsError("Invalid password.")

        if needs_rehash(stored_hash):
            new_hash = await hash_password_async(password)
            self.users().doc(doc_id).update({"password": new_hash})
            logger.info(f"Upgraded password hash for user {user.get('id')}")

        return public_projection(user)
