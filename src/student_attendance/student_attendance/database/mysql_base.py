from __future__ import annotations

import logging
from contextlib import contextmanager
from datetime import date, datetime, time, timedelta
from typing import Any, Dict, List, Optional

from ..common.datetime_utils import parse_iso_date
from .connection import DatabaseConnection

logger = logging.getLogger(__name__)

Row = Dict[str, Any]


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    """Yield (connection, cursor); commit on success, roll back on any error."""

    conn = conn_factory.connect()
    try:
        cur = conn.cursor(dictionary=dictionary)
    except Exception:
        conn.close()
        raise

    try:
        yield conn, cur
        conn.commit()
    except Exception:
        logger.debug("Rolling back %s", conn_factory.config.describe())
        conn.rollback()
        raise
    finally:
        cur.close()
        conn.close()


def first_row(cur) -> Optional[Row]:
    return cur.fetchone() or None


def all_rows(cur) -> List[Row]:
    return list(cur.fetchall() or [])


def to_date(value: Any) -> date:
    """DATE columns come back as date; older drivers may hand out datetime or text."""

    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, (bytes, bytearray)):
        value = value.decode()
    if isinstance(value, str):
        return parse_iso_date(value.strip()[:10])
    raise TypeError(f"Unsupported DATE value: {value!r}")


def to_time(value: Any) -> time:
    """TIME columns come back as timedelta from mysql-connector (seconds since midnight)."""

    if isinstance(value, time):
        return value
    if isinstance(value, timedelta):
        seconds = int(value.total_seconds()) % 86400
        return time(seconds // 3600, (seconds % 3600) // 60, seconds % 60)
    if isinstance(value, (bytes, bytearray)):
        value = value.decode()
    if isinstance(value, str):
        hh, _, rest = value.strip().partition(":")
        mm, _, ss = rest.partition(":")
        if not hh or not mm:
            raise ValueError(f"Invalid TIME value: {value!r}")
        return time(int(hh), int(mm), int(ss or 0))
    raise TypeError(f"Unsupported TIME value: {value!r}")


def to_flag(value: Any) -> bool:
    """TINYINT(1) flags (is_batch_wide, is_institution_wide)."""

    if isinstance(value, (bytes, bytearray)):
        value = value.decode()
    if isinstance(value, str):
        return value.strip() not in ("", "0")
    return bool(value)
