"""Create the database (if needed) and apply database/schema.sql.

Usage:
    APP_ENV=development python scripts/init_db.py
"""
from __future__ import annotations

import importlib
from pathlib import Path

from dotenv import load_dotenv

from config import get_settings_module

from student_attendance.database.bootstrap import apply_schema, list_tables
from student_attendance.database.connection import DBConfig

ROOT = Path(__file__).resolve().parents[1]


def main() -> None:
    load_dotenv()
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    apply_schema(db_config, schema_path=ROOT / "database" / "schema.sql")
    tables = list_tables(db_config)
    print(f"OK: schema applied to {DBConfig.from_mapping(db_config).describe()} ({', '.join(sorted(tables))})")


if __name__ == "__main__":
    main()
