"""Store backed by SQLAlchemy: one row per collection, one row per document."""
from __future__ import annotations

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError

from filebase.core.errors import StoreIOError
from filebase.db import models
from filebase.db.session import Base, get_engine, get_session

from .base import DocumentTree, Store, check_tree


class SQLStore(Store):
    """
    The tree is still read and written as a whole, so the reference
    semantics (snapshots, read-merge-write) are identical to the JSON file.
    """

    def __init__(self, url: str | None = None, *, serialize_writes: bool = False, create_tables: bool = True) -> None:
        super().__init__(serialize_writes=serialize_writes)
        self.url = url
        if create_tables:
            try:
                Base.metadata.create_all(bind=get_engine(url))
            except SQLAlchemyError as exc:
                raise StoreIOError(f"Cannot prepare SQL store: {exc}") from exc

    def read(self) -> DocumentTree:
        tree: DocumentTree = {}
        try:
            with get_session(self.url) as session:
                for name in session.execute(select(models.CollectionRow.name)).scalars():
                    tree[name] = {}
                rows = session.execute(select(models.DocumentRow)).scalars().all()
                for row in rows:
                    tree.setdefault(row.collection, {})[row.doc_id] = row.data
        except SQLAlchemyError as exc:
            raise StoreIOError(f"Cannot read SQL store: {exc}") from exc
        return tree

    def write(self, tree: DocumentTree) -> None:
        check_tree(tree)
        try:
            with get_session(self.url) as session:
                session.execute(delete(models.DocumentRow))
                session.execute(delete(models.CollectionRow))
                for name, documents in tree.items():
                    session.add(models.CollectionRow(name=name))
                    for doc_id, document in documents.items():
                        session.add(models.DocumentRow(collection=name, doc_id=doc_id, data=document))
                session.commit()
        except SQLAlchemyError as exc:
            raise StoreIOError(f"Cannot write SQL store: {exc}") from exc
