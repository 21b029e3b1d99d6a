"""In-memory Store, mostly useful for tests and throwaway databases."""

from __future__ import annotations

import copy

from .base import DocumentTree, Store, check_tree


class MemoryStore(Store):
    def __init__(self, tree: DocumentTree | None = None, *, serialize_writes: bool = False) -> None:
        super().__init__(serialize_writes=serialize_writes)
        self._tree: DocumentTree = copy.deepcopy(check_tree(tree or {}))

    def read(self) -> DocumentTree:
        return copy.deepcopy(self._tree)

    def write(self, tree: DocumentTree) -> None:
        self._tree = copy.deepcopy(check_tree(tree))
