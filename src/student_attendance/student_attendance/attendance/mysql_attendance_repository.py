from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..core.enums import AttendanceStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import all_rows, db_cursor, to_date
from .model import AttendanceRecord
from .repository import AttendanceRepository


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_user(self, user_id: str, *, on_date: Optional[date] = None) -> Sequence[AttendanceRecord]:
        clauses = ["userid=%s"]
        params: list[object] = [user_id]
        if on_date is not None:
            clauses.append("date=%s")
            params.append(on_date)

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT userid, date, subject, status, swapped_to
                FROM attendance_record
                WHERE {where}
                ORDER BY date DESC, subject ASC
                """,
                tuple(params),
            )
            return [
                AttendanceRecord(
                    user_id=str(r["userid"]),
                    date=to_date(r["date"]),
                    subject=r["subject"],
                    status=AttendanceStatus(r["status"]),
                    swapped_to=r.get("swapped_to"),
                )
                for r in all_rows(cur)
            ]

    def upsert(self, record: AttendanceRecord) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance_record(userid, date, subject, status, swapped_to)
                VALUES(%s,%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE status=VALUES(status), swapped_to=VALUES(swapped_to)
                """,
                (record.user_id, record.date, record.subject, record.status.value, record.swapped_to),
            )

    def insert_many(self, records: Sequence[AttendanceRecord]) -> int:
        if not records:
            return 0
        with db_cursor(self._conn_factory) as (_, cur):
            cur.executemany(
                """
                INSERT INTO attendance_record(userid, date, subject, status, swapped_to)
                VALUES(%s,%s,%s,%s,%s)
                """,
                [(r.user_id, r.date, r.subject, r.status.value, r.swapped_to) for r in records],
            )
            return len(records)

    def delete_for_effective_subject(self, user_id: str, subject: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                DELETE FROM attendance_record
                WHERE userid=%s
                  AND ((subject=%s AND (swapped_to IS NULL OR swapped_to='')) OR swapped_to=%s)
                """,
                (user_id, subject, subject),
            )
            return cur.rowcount

    def delete_for_user(self, user_id: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM attendance_record WHERE userid=%s", (user_id,))
            return cur.rowcount
