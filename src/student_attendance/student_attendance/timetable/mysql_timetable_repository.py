from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import all_rows, db_cursor, to_flag, to_time
from .model import TimetableClass
from .repository import TimetableRepository


class MySQLTimetableRepository(TimetableRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_batch(self, batch: str, *, day: Optional[str] = None) -> Sequence[TimetableClass]:
        clauses = ["(batch=%s OR (is_batch_wide=1 AND %s LIKE CONCAT(batch, '%%')))"]
        params: list[object] = [batch, batch]
        if day is not None:
            clauses.append("day=%s")
            params.append(day)

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT id, subject, start_time, end_time, room, day, batch, is_batch_wide
                FROM timetable
                WHERE {where}
                ORDER BY start_time ASC, id ASC
                """,
                tuple(params),
            )
            return [
                TimetableClass(
                    class_id=int(r["id"]),
                    subject=r["subject"],
                    start_time=to_time(r["start_time"]),
                    end_time=to_time(r["end_time"]),
                    day=r["day"],
                    batch=r["batch"],
                    room=r.get("room"),
                    is_batch_wide=to_flag(r.get("is_batch_wide")),
                )
                for r in all_rows(cur)
            ]
