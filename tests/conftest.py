from __future__ import annotations

import itertools
import sys
from pathlib import Path

import pytest

# Garante que o pacote filebase seja importável durante os testes locais
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from filebase.core import config as core_config  # noqa: E402
from filebase.domain import ids  # noqa: E402


@pytest.fixture(autouse=True)
def cheap_settings(monkeypatch):
    """Keep argon2 fast and settings isolated from the developer's environment."""
    for name in (
        "FILEBASE_BACKEND",
        "FILEBASE_DATA_FILE",
        "FILEBASE_CREATE_MISSING",
        "FILEBASE_SERIALIZE_WRITES",
        "DATABASE_URL",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("FILEBASE_HASH_TIME_COST", "1")
    monkeypatch.setenv("FILEBASE_HASH_MEMORY_COST", "1024")
    core_config.get_settings.cache_clear()
    yield
    core_config.get_settings.cache_clear()


@pytest.fixture()
def sequential_doc_ids(monkeypatch):
    """Replace the millisecond clock IDs with doc1, doc2, ... so adds never collide."""
    counter = itertools.count(1)
    monkeypatch.setattr(ids, "generate_document_id", lambda now_ms=None: f"doc{next(counter)}")
    return counter
