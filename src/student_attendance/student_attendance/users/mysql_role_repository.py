from __future__ import annotations

from typing import Sequence

from ..core.enums import Role
from ..database.connection import DatabaseConnection
from ..database.mysql_base import all_rows, db_cursor
from .repository import RoleRepository


class MySQLRoleRepository(RoleRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def add_role(self, *, user_id: str, role: Role) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT IGNORE INTO user_roles(userid, role) VALUES(%s,%s)",
                (user_id, role.value),
            )

    def list_roles(self, user_id: str) -> Sequence[Role]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT role FROM user_roles WHERE userid=%s ORDER BY role", (user_id,))
            return [Role(r["role"]) for r in all_rows(cur)]

    def delete_for_user(self, user_id: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM user_roles WHERE userid=%s", (user_id,))
            return cur.rowcount
