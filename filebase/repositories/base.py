"""
Store interface shared by every persistence backend.

A Store only knows how to read and write the whole document tree
(``{collection: {doc_id: document}}``). Reference objects and the
read-merge-write cycle are built on top of those two primitives, so a backend
can be swapped without touching CollectionReference/DocumentReference.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
import logging
import threading
from typing import Any, Iterable

from filebase.core.errors import CorruptStateError

from .references import CollectionReference

logger = logging.getLogger(__name__)

Document = dict[str, Any]
Collection = dict[str, Document]
DocumentTree = dict[str, Collection]


def check_tree(tree: Any) -> DocumentTree:
    """Make sure a freshly loaded value has the collection -> id -> document shape."""
    if not isinstance(tree, dict):
        raise CorruptStateError("document tree must be an object of collections")
    for name, collection in tree.items():
        if not isinstance(name, str):
            raise CorruptStateError("collection names must be strings")
        if not isinstance(collection, dict):
            raise CorruptStateError(f"collection {name!r} must be an object of documents")
        for doc_id, document in collection.items():
            if not isinstance(document, dict):
                raise CorruptStateError(f"document {name}/{doc_id} must be an object of fields")
    return tree


class Store(ABC):
    """Whole-tree persistence plus the reference entry point."""

    def __init__(self, serialize_writes: bool = False) -> None:
        self.serialize_writes = serialize_writes
        self.lock = threading.RLock()

    @abstractmethod
    def read(self) -> DocumentTree:
        """Load the full document tree."""

    @abstractmethod
    def write(self, tree: DocumentTree) -> None:
        """Replace the persisted tree with ``tree``."""

    def collection(self, name: str) -> CollectionReference:
        tree = self.read()
        return CollectionReference(name, tree.get(name) or {}, self)

    def merge_collection(self, name: str, data: Collection, touched: Iterable[str] = ()) -> Collection:
        """
        Read the tree, patch one collection and write the tree back.

        Without ``serialize_writes`` the whole collection is replaced by
        ``data``: a reference created before someone else's flush silently
        discards that flush (last writer wins). With it, the cycle runs under
        ``self.lock`` and only the ``touched`` document IDs are applied on top
        of the current collection. Returns the collection as written.
        """
        if not self.serialize_writes:
            tree = self.read()
            tree[name] = data
            self.write(tree)
            logger.debug(f"Flushed collection {name!r} ({len(data)} documents)")
            return data

        with self.lock:
            tree = self.read()
            current = tree.get(name) or {}
            for doc_id in touched:
                if doc_id in data:
                    current[doc_id] = data[doc_id]
                else:
                    current.pop(doc_id, None)
            tree[name] = current
            self.write(tree)
        logger.debug(f"Flushed collection {name!r} under lock ({len(current)} documents)")
        return current
