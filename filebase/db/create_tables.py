"""
Create the ``collections`` and ``documents`` tables used by SQLStore.

Uso:
  python -m filebase.db.create_tables [--url sqlite:///filebase.db]
"""
from __future__ import annotations

import argparse

from sqlalchemy import inspect
from sqlalchemy.exc import SQLAlchemyError

from .session import Base, get_engine
from . import models  # noqa: F401  # registers CollectionRow/DocumentRow on Base.metadata


def create_all(url: str | None = None) -> list[str]:
    """Create any missing tables and return the table names now present."""
    engine = get_engine(url)
    Base.metadata.create_all(bind=engine)
    return sorted(inspect(engine).get_table_names())


def main(argv: list[str] | None = None) -> None:
    ap = argparse.ArgumentParser(description="Create the filebase SQL tables")
    ap.add_argument("--url", help="SQLAlchemy URL (default: DATABASE_URL)")
    args = ap.parse_args(argv)
    try:
        tables = create_all(args.url)
    except (SQLAlchemyError, RuntimeError) as exc:
        raise SystemExit(f"Failed to create tables: {exc}") from exc
    print(f"Tables ready: {', '.join(tables)}")


if __name__ == "__main__":
    main()
