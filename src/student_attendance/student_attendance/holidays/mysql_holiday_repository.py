from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import all_rows, db_cursor, to_date, to_flag
from .model import HolidayEntry
from .repository import HolidayRepository


class MySQLHolidayRepository(HolidayRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_user(self, user_id: str, *, on_date: Optional[date] = None) -> Sequence[HolidayEntry]:
        clauses = ["(is_institution_wide=1 OR userid=%s)"]
        params: list[object] = [user_id]
        if on_date is not None:
            clauses.append("date=%s")
            params.append(on_date)

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT id, date, name, type, is_institution_wide, userid
                FROM calendar
                WHERE {where}
                ORDER BY date ASC, id ASC
                """,
                tuple(params),
            )
            return [
                HolidayEntry(
                    holiday_id=int(r["id"]),
                    date=to_date(r["date"]),
                    name=r["name"],
                    type=r.get("type") or "holiday",
                    is_institution_wide=to_flag(r["is_institution_wide"]),
                    user_id=r.get("userid"),
                )
                for r in all_rows(cur)
            ]

    def create(
        self,
        *,
        on_date: date,
        name: str,
        type: str,
        is_institution_wide: bool,
        user_id: Optional[str],
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO calendar(date, name, type, is_institution_wide, userid)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (on_date, name, type, int(is_institution_wide), user_id),
            )
            return int(cur.lastrowid)

    def delete_for_user(self, user_id: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM calendar WHERE userid=%s", (user_id,))
            return cur.rowcount
