"""
JSON file persistence adapter.

The whole document tree lives in one human-diffable JSON file. Every write
rewrites the file in place; a crash mid-write can leave it truncated.
"""

from __future__ import annotations

from pathlib import Path
import json
import logging
import os

from filebase.core.errors import CorruptStateError, StoreIOError

from .base import DocumentTree, Store, check_tree

logger = logging.getLogger(__name__)


class JsonFileStore(Store):
    def __init__(self, path: str | os.PathLike, *, create_missing: bool = True, serialize_writes: bool = False) -> None:
        super().__init__(serialize_writes=serialize_writes)
        self.path = Path(path)
        self.create_missing = create_missing

    def __repr__(self) -> str:
        return f"JsonFileStore({str(self.path)!r})"

    def read(self) -> DocumentTree:
        if self.create_missing and not self.path.exists():
            logger.debug(f"{self.path} does not exist yet; starting from an empty tree")
            return {}
        try:
            raw = self.path.read_bytes()
        except OSError as exc:
            raise StoreIOError(f"Cannot read {self.path}: {exc}") from exc
        try:
            tree = json.loads(raw.decode("utf-8"))
        except UnicodeDecodeError as exc:
            raise CorruptStateError(f"{self.path} is not valid UTF-8: {exc}") from exc
        except json.JSONDecodeError as exc:
            raise CorruptStateError(f"{self.path} is not valid JSON: {exc}") from exc
        return check_tree(tree)

    def write(self, tree: DocumentTree) -> None:
        check_tree(tree)
        payload = json.dumps(tree, ensure_ascii=False, indent=2)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(payload, encoding="utf-8")
        except OSError as exc:
            raise StoreIOError(f"Cannot write {self.path}: {exc}") from exc
