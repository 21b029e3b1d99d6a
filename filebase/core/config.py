"""
Configuration helpers for filebase.

Settings are read once from environment variables (data file path, storage
backend, hashing cost, log level) so that stores and services never fetch
os.environ directly.
"""

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
import os

from argon2 import PasswordHasher

PACKAGE_DIR = Path(__file__).resolve().parents[1]
DEFAULT_DATA_FILE = "database.json"
BACKENDS = ("json", "memory", "sql")
_ARGON2_DEFAULTS = PasswordHasher()


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    backend: str
    data_file: Path
    create_missing: bool
    serialize_writes: bool
    database_url: str
    hash_time_cost: int
    hash_memory_cost: int
    log_level: str


def resolve_data_file(value: str | os.PathLike | None) -> Path:
    """Resolve the backing file path; relative paths are anchored at the package directory."""
    path = Path(value or DEFAULT_DATA_FILE)
    if not path.is_absolute():
        path = PACKAGE_DIR / path
    return path


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str | None, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    def _bool(value: str | None, default: bool = False) -> bool:
        if value is None:
            return default
        return value.strip().lower() in {"1", "true", "yes", "on"}

    backend = (os.getenv("FILEBASE_BACKEND") or "json").strip().lower()
    if backend not in BACKENDS:
        backend = "json"

    return Settings(
        app_env=(os.getenv("FILEBASE_ENV") or "dev").lower(),
        backend=backend,
        data_file=resolve_data_file(os.getenv("FILEBASE_DATA_FILE")),
        create_missing=_bool(os.getenv("FILEBASE_CREATE_MISSING"), True),
        serialize_writes=_bool(os.getenv("FILEBASE_SERIALIZE_WRITES"), False),
        database_url=os.getenv("DATABASE_URL", "").strip(),
        hash_time_cost=max(1, _int(os.getenv("FILEBASE_HASH_TIME_COST"), _ARGON2_DEFAULTS.time_cost)),
        hash_memory_cost=max(32, _int(os.getenv("FILEBASE_HASH_MEMORY_COST"), _ARGON2_DEFAULTS.memory_cost)),
        log_level=(os.getenv("FILEBASE_LOG_LEVEL") or "WARNING").upper(),
    )
