"""
Persistence adapters.

Each Store encapsulates how the document tree is stored/retrieved (JSON file,
memory, SQL). Reference objects only talk to the Store interface.
"""

from .base import Store
from .json_storage import JsonFileStore
from .memory_storage import MemoryStore
from .references import CollectionReference, DocumentReference

__all__ = ["CollectionReference", "DocumentReference", "JsonFileStore", "MemoryStore", "Store"]
