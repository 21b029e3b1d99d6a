"""
Firestore-like reference objects.

A CollectionReference holds a snapshot of one collection taken when it was
created; DocumentReference is a handle on one ID of that snapshot. Every
mutation changes the snapshot first and then flushes it through the Store.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterator, Optional

from filebase.domain import ids

if TYPE_CHECKING:
    from .base import Collection, Document, Store


class CollectionReference:
    def __init__(self, name: str, data: "Collection", store: "Store") -> None:
        self.name = name
        self.data = data
        self.store = store
        self._touched: set[str] = set()

    def __repr__(self) -> str:
        return f"CollectionReference({self.name!r}, documents={len(self.data)})"

    def __iter__(self) -> Iterator[str]:
        return iter(self.data)

    def __len__(self) -> int:
        return len(self.data)

    def __contains__(self, doc_id: object) -> bool:
        return doc_id in self.data

    def get(self) -> "Collection":
        """Return the in-memory snapshot (no re-read)."""
        return self.data

    def doc(self, doc_id: str) -> "DocumentReference":
        return DocumentReference(doc_id, self)

    def add(self, document: "Document") -> dict[str, Any]:
        new_id = ids.generate_document_id()
        self.data[new_id] = document
        self._touched.add(new_id)
        self.flush()
        return {"id": new_id, "data": document}

    def refresh(self) -> "CollectionReference":
        """Replace the snapshot contents with what the store currently holds."""
        tree = self.store.read()
        self.data.clear()
        self.data.update(tree.get(self.name) or {})
        self._touched.clear()
        return self

    def flush(self) -> None:
        merged = self.store.merge_collection(self.name, self.data, self._touched)
        if merged is not self.data:
            self.data.clear()
            self.data.update(merged)
        self._touched.clear()

    def _put(self, doc_id: str, document: "Document") -> None:
        self.data[doc_id] = document
        self._touched.add(doc_id)
        self.flush()

    def _remove(self, doc_id: str) -> None:
        self.data.pop(doc_id, None)
        self._touched.add(doc_id)
        self.flush()


class DocumentReference:
    def __init__(self, doc_id: str, parent: CollectionReference) -> None:
        self.id = doc_id
        self.parent = parent

    def __repr__(self) -> str:
        return f"DocumentReference({self.parent.name!r}, {self.id!r})"

    def get(self) -> Optional["Document"]:
        return self.parent.data.get(self.id)

    def exists(self) -> bool:
        return self.id in self.parent.data

    def set(self, document: "Document") -> None:
        self.parent._put(self.id, document)

    def update(self, fields: "Document") -> None:
        """Shallow-merge ``fields`` into the document; a missing document starts empty."""
        merged = {**(self.parent.data.get(self.id) or {}), **fields}
        self.parent._put(self.id, merged)

    def delete(self) -> None:
        self.parent._remove(self.id)
