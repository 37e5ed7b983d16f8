from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import HolidayEntry


class HolidayRepository(Protocol):
    def list_for_user(self, user_id: str, *, on_date: Optional[date] = None) -> Sequence[HolidayEntry]:
        """Institution-wide entries plus the user's personal ones, ordered by date."""

        raise NotImplementedError

    def create(
        self,
        *,
        on_date: date,
        name: str,
        type: str,
        is_institution_wide: bool,
        user_id: Optional[str],
    ) -> int:
        raise NotImplementedError

    def delete_for_user(self, user_id: str) -> int:
        raise NotImplementedError
