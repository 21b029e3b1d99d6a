"""
Entry point tying a Store to the account service.

    db = Database()                     # settings-driven backend
    db = Database(data_file="db.json")  # explicit JSON file
    users = db.collection("users")
    user = await db.register_user("ada", "ada@example.com", "S3cret!pass")
"""

from __future__ import annotations

import os
from typing import Any, Optional

from filebase.core.config import Settings, get_settings, resolve_data_file
from filebase.domain.ids import generate_user_id
from filebase.repositories import CollectionReference, JsonFileStore, MemoryStore, Store
from filebase.services.account_service import AccountService


def build_store(settings: Settings) -> Store:
    """Instantiate the backend selected by FILEBASE_BACKEND."""
    if settings.backend == "memory":
        return MemoryStore(serialize_writes=settings.serialize_writes)
    if settings.backend == "sql":
        from filebase.repositories.sql_storage import SQLStore

        return SQLStore(settings.database_url, serialize_writes=settings.serialize_writes)
    return JsonFileStore(
        settings.data_file,
        create_missing=settings.create_missing,
        serialize_writes=settings.serialize_writes,
    )


class Database:
    def __init__(
        self,
        data_file: str | os.PathLike | None = None,
        *,
        store: Optional[Store] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        self.settings = settings or get_settings()
        if store is None:
            if data_file is not None:
                store = JsonFileStore(
                    resolve_data_file(data_file),
                    create_missing=self.settings.create_missing,
                    serialize_writes=self.settings.serialize_writes,
                )
            else:
                store = build_store(self.settings)
        self.store = store
        self.accounts = AccountService(store)

    def collection(self, name: str) -> CollectionReference:
        return self.store.collection(name)

    def generate_user_id(self) -> str:
        return generate_user_id()

    async def register_user(self, username: str, email: str, password: str) -> dict[str, Any]:
        return await self.accounts.register_user(username, email, password)

    async def login_user(self, email: str, password: str) -> dict[str, Any]:
        return await self.accounts.login_user(email, password)
