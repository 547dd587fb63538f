"""Create the database (if missing) and apply database/schema.sql.

Usage: APP_ENV=production python scripts/init_db.py
"""
from __future__ import annotations

import importlib
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from config import get_settings_module  # noqa: E402

from src.employee_contributions.employee_contributions.database.bootstrap import (  # noqa: E402
    DEFAULT_SCHEMA_PATH,
    apply_schema,
    list_tables,
)


def main() -> int:
    settings_module = get_settings_module()
    db_config = dict(importlib.import_module(settings_module).DB_CONFIG)

    apply_schema(db_config, schema_path=DEFAULT_SCHEMA_PATH)
    tables = sorted(list_tables(db_config))
    print(f"[{settings_module}] {db_config['database']}@{db_config['host']}: {', '.join(tables)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
