from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def list_for_user(self, user_id: str, *, on_date: Optional[date] = None) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def upsert(self, record: AttendanceRecord) -> None:
        """Insert, or overwrite status/swapped_to for the same (user, date, subject)."""

        raise NotImplementedError

    def insert_many(self, records: Sequence[AttendanceRecord]) -> int:
        raise NotImplementedError

    def delete_for_effective_subject(self, user_id: str, subject: str) -> int:
        """Delete rows counted under `subject`: unswapped rows of it and rows swapped into it."""

        raise NotImplementedError

    def delete_for_user(self, user_id: str) -> int:
        raise NotImplementedError
