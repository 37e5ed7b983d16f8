"""Apply database/schema.sql and database/seed.sql, and keep a demo student around."""
from __future__ import annotations

import logging
import re
import uuid
from pathlib import Path
from typing import Iterator, List, Mapping

from werkzeug.security import generate_password_hash

from ..core.enums import Role
from .connection import DatabaseConnection, DBConfig

logger = logging.getLogger(__name__)

DEMO_EMAIL = "demo.student@jss.edu"
DEMO_PASSWORD = "student123"

# Script files may pin a database name; the configured one always wins.
_DATABASE_PINNING = re.compile(r"^\s*(CREATE\s+DATABASE|USE)\b[^;]*;\s*$", re.IGNORECASE | re.MULTILINE)

# Quoted strings, line comments, statement separators.
_SQL_TOKEN = re.compile(r"'(?:[^'\\]|\\.)*'|\"(?:[^\"\\]|\\.)*\"|--[^\n]*|#[^\n]*|;", re.DOTALL)


def split_statements(script: str) -> Iterator[str]:
    """Yield the statements of a SQL script, dropping comments.

    Semicolons inside quoted literals do not end a statement.
    """

    script = _DATABASE_PINNING.sub("", script)
    parts: List[str] = []
    pos = 0
    for match in _SQL_TOKEN.finditer(script):
        parts.append(script[pos : match.start()])
        token = match.group(0)
        pos = match.end()

        if token.startswith(("--", "#")):
            continue
        if token == ";":
            statement = "".join(parts).strip()
            parts = []
            if statement:
                yield statement
            continue
        parts.append(token)

    parts.append(script[pos:])
    tail = "".join(parts).strip()
    if tail:
        yield tail


def _factory(db_config: Mapping) -> DatabaseConnection:
    return DatabaseConnection(DBConfig.from_mapping(db_config))


def _run_script(factory: DatabaseConnection, path: Path) -> int:
    conn = factory.connect()
    try:
        cur = conn.cursor()
        count = 0
        for statement in split_statements(path.read_text(encoding="utf-8")):
            cur.execute(statement)
            count += 1
        conn.commit()
        return count
    finally:
        conn.close()


def ensure_database_exists(db_config: Mapping) -> None:
    factory = _factory(db_config)
    conn = factory.connect(with_database=False)
    try:
        conn.cursor().execute(
            f"CREATE DATABASE IF NOT EXISTS `{factory.config.database}` "
            f"CHARACTER SET {factory.config.charset} COLLATE utf8mb4_unicode_ci"
        )
        conn.commit()
    finally:
        conn.close()


def apply_schema(db_config: Mapping, *, schema_path: str | Path) -> None:
    ensure_database_exists(db_config)
    count = _run_script(_factory(db_config), Path(schema_path))
    logger.info("Applied %s (%d statements)", schema_path, count)


def apply_seed_sql(db_config: Mapping, *, seed_path: str | Path) -> None:
    count = _run_script(_factory(db_config), Path(seed_path))
    logger.info("Applied %s (%d statements)", seed_path, count)


def ensure_demo_student(db_config: Mapping) -> str:
    """Create the demo student (CSE / A1), or reset its password. Returns its user id."""

    conn = _factory(db_config).connect()
    try:
        cur = conn.cursor(dictionary=True)
        password_hash = generate_password_hash(DEMO_PASSWORD)

        cur.execute("SELECT id FROM auth_users WHERE email=%s", (DEMO_EMAIL,))
        row = cur.fetchone()
        if row:
            user_id = str(row["id"])
            cur.execute("UPDATE auth_users SET password_hash=%s WHERE id=%s", (password_hash, user_id))
        else:
            user_id = str(uuid.uuid4())
            cur.execute(
                "INSERT INTO auth_users(id, email, password_hash) VALUES(%s,%s,%s)",
                (user_id, DEMO_EMAIL, password_hash),
            )

        cur.execute(
            """
            INSERT INTO profiles(id, name, email, branch, batch, roll_number)
            VALUES(%s,%s,%s,%s,%s,%s)
            ON DUPLICATE KEY UPDATE name=VALUES(name), branch=VALUES(branch), batch=VALUES(batch)
            """,
            (user_id, "Demo Student", DEMO_EMAIL, "CSE", "A1", "1JS21CS001"),
        )
        cur.execute("INSERT IGNORE INTO user_roles(userid, role) VALUES(%s,%s)", (user_id, Role.STUDENT.value))

        conn.commit()
        logger.info("Demo student ready: %s", DEMO_EMAIL)
        return user_id
    finally:
        conn.close()


def list_tables(db_config: Mapping) -> list[str]:
    conn = _factory(db_config).connect()
    try:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]
    finally:
        conn.close()
