from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional

from ..core.enums import AttendanceLevel, AttendanceStatus
from .levels import classify, round_half_up


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one status per (user, date, subject)."""

    user_id: str
    date: date
    subject: str
    status: AttendanceStatus
    swapped_to: Optional[str] = None

    @property
    def key(self) -> tuple:
        return (self.user_id, self.date, self.subject)

    @property
    def effective_subject(self) -> str:
        """Subject actually taught: the swap target when the class was swapped."""
        return self.swapped_to or self.subject

    def to_dict(self) -> dict:
        return {
            "date": self.date.strftime("%Y-%m-%d"),
            "subject": self.subject,
            "status": self.status.value,
            "swapped_to": self.swapped_to,
        }


@dataclass
class SubjectAttendance:
    subject: str
    attended: int = 0
    total: int = 0

    @property
    def percentage(self) -> float:
        return (self.attended / self.total) * 100 if self.total > 0 else 0.0

    @property
    def rounded_percentage(self) -> int:
        return round_half_up(self.percentage)

    @property
    def level(self) -> AttendanceLevel:
        return classify(self.percentage)

    def to_dict(self) -> dict:
        return {
            "subject": self.subject,
            "attended": self.attended,
            "total": self.total,
            "percentage": self.percentage,
            "rounded_percentage": self.rounded_percentage,
            "level": self.level.value,
        }


@dataclass(frozen=True)
class AttendanceSummary:
    """Read-model for the dashboard: per-subject rows plus the overall figure."""

    subjects: List[SubjectAttendance] = field(default_factory=list)
    overall: int = 0
    level: AttendanceLevel = AttendanceLevel.CRITICAL
    below_threshold: bool = True

    def to_dict(self) -> dict:
        return {
            "subjects": [s.to_dict() for s in self.subjects],
            "overall_percentage": self.overall,
            "level": self.level.value,
            "below_threshold": self.below_threshold,
        }
