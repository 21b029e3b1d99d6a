#!/usr/bin/env python3
"""
One-off migration script: JSON document file -> SQL store.

Uso:
  python scripts/migrate_json_to_sql.py [--source path/database.json] [--url sqlite:///filebase.db]
"""
from __future__ import annotations

import argparse
from pathlib import Path
import sys

# Garantir que o pacote filebase seja importável quando rodado diretamente
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from filebase.core.config import get_settings, resolve_data_file
from filebase.core.errors import StoreError
from filebase.core.log import configure_logging
from filebase.repositories import JsonFileStore
from filebase.repositories.sql_storage import SQLStore


def migrate(source: Path, url: str | None = None) -> dict[str, int]:
    """Copy every collection of ``source`` into the SQL store; returns documents per collection."""
    tree = JsonFileStore(source, create_missing=False).read()
    SQLStore(url).write(tree)
    return {name: len(documents) for name, documents in tree.items()}


def main() -> None:
    ap = argparse.ArgumentParser(description="Copy a JSON document file into the SQL store")
    ap.add_argument("--source", help="JSON file (default: FILEBASE_DATA_FILE)")
    ap.add_argument("--url", help="SQLAlchemy URL (default: DATABASE_URL)")
    args = ap.parse_args()
    configure_logging(get_settings().log_level)

    source = resolve_data_file(args.source) if args.source else get_settings().data_file
    try:
        counts = migrate(source, args.url)
    except (StoreError, RuntimeError) as exc:
        raise SystemExit(f"Migration failed: {exc}") from exc
    for name, count in counts.items():
        print(f"{name}: {count} documents")


if __name__ == "__main__":
    main()
