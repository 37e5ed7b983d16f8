from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class HolidayEntry:
    """Row of the calendar table: institution-wide, or personal to one user."""

    holiday_id: int
    date: date
    name: str
    type: str
    is_institution_wide: bool
    user_id: Optional[str] = None

    def applies_to(self, user_id: str) -> bool:
        return self.is_institution_wide or self.user_id == user_id

    def to_dict(self) -> dict:
        return {
            "id": self.holiday_id,
            "date": self.date.strftime("%Y-%m-%d"),
            "name": self.name,
            "type": self.type,
            "is_institution_wide": self.is_institution_wide,
            "scope": "Institution-wide" if self.is_institution_wide else "Personal",
        }
