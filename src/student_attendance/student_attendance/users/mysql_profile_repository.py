from __future__ import annotations

from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, first_row
from .model import Profile
from .repository import ProfileRepository


class MySQLProfileRepository(ProfileRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, user_id: str) -> Optional[Profile]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, name, email, branch, batch, roll_number
                FROM profiles
                WHERE id=%s
                """,
                (user_id,),
            )
            r = first_row(cur)
            if not r:
                return None
            return Profile(
                user_id=str(r["id"]),
                name=r["name"],
                email=r["email"],
                branch=r["branch"],
                batch=r["batch"],
                roll_number=r["roll_number"],
            )

    def create_profile(self, profile: Profile) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO profiles(id, name, email, branch, batch, roll_number)
                VALUES(%s,%s,%s,%s,%s,%s)
                """,
                (profile.user_id, profile.name, profile.email, profile.branch, profile.batch, profile.roll_number),
            )

    def delete_by_id(self, user_id: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM profiles WHERE id=%s", (user_id,))
            return cur.rowcount
