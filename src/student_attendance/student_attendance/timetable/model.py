from __future__ import annotations

from dataclasses import dataclass
from datetime import time
from typing import Optional


@dataclass(frozen=True)
class TimetableClass:
    """One weekly slot of the timetable (reference data)."""

    class_id: int
    subject: str
    start_time: time
    end_time: time
    day: str
    batch: str
    room: Optional[str] = None
    is_batch_wide: bool = False

    @property
    def dedupe_key(self) -> tuple:
        return (self.day, self.subject, self.start_time, self.end_time)

    def to_dict(self) -> dict:
        return {
            "id": self.class_id,
            "subject": self.subject,
            "start_time": self.start_time.strftime("%H:%M"),
            "end_time": self.end_time.strftime("%H:%M"),
            "room": self.room or "",
            "day": self.day,
            "batch": self.batch,
        }
