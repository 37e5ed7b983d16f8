from __future__ import annotations

from datetime import date
from typing import Sequence

from ..common.validators import require_non_empty
from ..core.constants import DEFAULT_HOLIDAY_TYPE, UPCOMING_HOLIDAY_LIMIT
from ..core.exceptions import ValidationError
from .model import HolidayEntry
from .repository import HolidayRepository


class HolidayService:
    def __init__(self, holidays: HolidayRepository):
        self._holidays = holidays

    def list_for_user(self, user_id: str) -> Sequence[HolidayEntry]:
        return list(self._holidays.list_for_user(user_id))

    def for_date(self, user_id: str, on_date: date) -> Sequence[HolidayEntry]:
        return list(self._holidays.list_for_user(user_id, on_date=on_date))

    def is_holiday(self, user_id: str, on_date: date) -> bool:
        return len(self.for_date(user_id, on_date)) > 0

    def upcoming(self, user_id: str, *, today: date, limit: int = UPCOMING_HOLIDAY_LIMIT) -> Sequence[HolidayEntry]:
        return [h for h in self.list_for_user(user_id) if h.date >= today][: int(limit)]

    def add_personal(self, *, user_id: str, on_date: date, name: str) -> int:
        if on_date is None:
            raise ValidationError("Pick a date")
        name = require_non_empty(name, "Holiday name")
        return self._holidays.create(
            on_date=on_date,
            name=name,
            type=DEFAULT_HOLIDAY_TYPE,
            is_institution_wide=False,
            user_id=user_id,
        )
