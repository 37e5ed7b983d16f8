from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from datetime import date
from typing import Callable, List, Optional, TypeVar

from ..attendance.model import AttendanceRecord, AttendanceSummary
from ..attendance.service import AttendanceService
from ..common.datetime_utils import today_local
from ..timetable.model import TimetableClass
from ..timetable.service import TimetableService
from ..users.model import Profile
from ..users.service import ProfileService

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class TodayClass:
    timetable_class: TimetableClass
    record: Optional[AttendanceRecord] = None

    def to_dict(self) -> dict:
        out = self.timetable_class.to_dict()
        out.update(
            {
                "display_subject": (self.record.swapped_to if self.record else None) or self.timetable_class.subject,
                "status": self.record.status.value if self.record else None,
                "swapped_to": self.record.swapped_to if self.record else None,
                "can_swipe": self.record is None,
            }
        )
        return out


@dataclass(frozen=True)
class DashboardData:
    today: date
    profile: Optional[Profile] = None
    classes: List[TodayClass] = field(default_factory=list)
    summary: AttendanceSummary = field(default_factory=AttendanceSummary)

    def to_dict(self) -> dict:
        return {
            "today": self.today.strftime("%Y-%m-%d"),
            "greeting": f"Hello, {self.profile.first_name if self.profile else 'Student'}!",
            "profile": self.profile.to_dict() if self.profile else None,
            "classes": [c.to_dict() for c in self.classes],
            "attendance": self.summary.to_dict(),
        }


class DashboardService:
    """Page load for the home screen.

    The three reads touch disjoint tables, so they run concurrently and are
    joined before the view is built. A failing read is logged and replaced by
    an empty result.
    """

    def __init__(
        self,
        profiles: ProfileService,
        timetable: TimetableService,
        attendance: AttendanceService,
        *,
        max_workers: int = 3,
    ):
        self._profiles = profiles
        self._timetable = timetable
        self._attendance = attendance
        self._max_workers = int(max_workers)

    def load(self, user_id: str, *, today: Optional[date] = None) -> DashboardData:
        today = today or today_local()
        with ThreadPoolExecutor(max_workers=self._max_workers) as pool:
            profile_f = pool.submit(self._degrade, "profile", None, self._profiles.find_profile, user_id)
            classes_f = pool.submit(self._degrade, "today's classes", [], self.today_classes, user_id, today)
            summary_f = pool.submit(
                self._degrade, "attendance summary", AttendanceSummary(), self._attendance.summary, user_id
            )

            return DashboardData(
                today=today,
                profile=profile_f.result(),
                classes=classes_f.result(),
                summary=summary_f.result(),
            )

    def today_classes(self, user_id: str, today: date) -> List[TodayClass]:
        classes = self._timetable.classes_for_date(user_id, today)
        if not classes:
            return []
        statuses = self._attendance.statuses_for_date(user_id, today)
        return [TodayClass(timetable_class=c, record=statuses.get(c.subject)) for c in classes]

    @staticmethod
    def _degrade(label: str, fallback: T, fn: Callable[..., T], *args) -> T:
        try:
            return fn(*args)
        except Exception:
            logger.exception("Failed to load %s", label)
            return fallback
