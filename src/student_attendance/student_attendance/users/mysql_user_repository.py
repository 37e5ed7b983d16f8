from __future__ import annotations

from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, first_row
from .model import AuthUser
from .repository import UserRepository


class MySQLUserRepository(UserRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, user_id: str) -> Optional[AuthUser]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT id, email, password_hash, created_at FROM auth_users WHERE id=%s",
                (user_id,),
            )
            return self._to_user(first_row(cur))

    def get_by_email(self, email: str) -> Optional[AuthUser]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT id, email, password_hash, created_at FROM auth_users WHERE email=%s",
                (email,),
            )
            return self._to_user(first_row(cur))

    def create_user(self, *, user_id: str, email: str, password_hash: str) -> str:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO auth_users(id, email, password_hash) VALUES(%s,%s,%s)",
                (user_id, email, password_hash),
            )
            return user_id

    def delete_by_id(self, user_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM auth_users WHERE id=%s", (user_id,))
            return cur.rowcount > 0

    @staticmethod
    def _to_user(row) -> Optional[AuthUser]:
        if not row:
            return None
        return AuthUser(
            user_id=str(row["id"]),
            email=row["email"],
            password_hash=row["password_hash"],
            created_at=row.get("created_at"),
        )
