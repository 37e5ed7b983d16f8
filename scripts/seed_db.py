"""Load the reference timetable and institution holidays, and create the demo student.

Usage:
    APP_ENV=development python scripts/seed_db.py
"""
from __future__ import annotations

import importlib
from pathlib import Path

from dotenv import load_dotenv

from config import get_settings_module

from student_attendance.database.bootstrap import DEMO_EMAIL, DEMO_PASSWORD, apply_seed_sql, ensure_demo_student
from student_attendance.database.connection import DBConfig

ROOT = Path(__file__).resolve().parents[1]


def main() -> None:
    load_dotenv()
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    apply_seed_sql(db_config, seed_path=ROOT / "database" / "seed.sql")
    user_id = ensure_demo_student(db_config)
    print(f"OK: seeded {DBConfig.from_mapping(db_config).describe()}")
    print(f"Demo student: {DEMO_EMAIL} / {DEMO_PASSWORD} (id={user_id})")


if __name__ == "__main__":
    main()
