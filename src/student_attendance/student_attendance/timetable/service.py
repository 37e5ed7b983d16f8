from __future__ import annotations

import logging
from datetime import date
from typing import Dict, Iterable, List

from ..common.datetime_utils import weekday_name
from ..core.constants import TEACHING_DAYS
from ..holidays.service import HolidayService
from ..users.repository import ProfileRepository
from .model import TimetableClass
from .repository import TimetableRepository

logger = logging.getLogger(__name__)


def applies_to_batch(entry: TimetableClass, batch: str) -> bool:
    """Exact batch match, or a batch-wide entry whose batch prefixes the user's batch."""

    if entry.batch == batch:
        return True
    return entry.is_batch_wide and bool(entry.batch) and batch.startswith(entry.batch)


def resolve_classes(entries: Iterable[TimetableClass], *, batch: str, day: str) -> List[TimetableClass]:
    """Filter to the batch and day, drop duplicate slots, order by start time.

    Exact-batch entries win over batch-wide ones for the same
    (day, subject, start_time, end_time) slot.
    """

    candidates = [e for e in entries if e.day == day and applies_to_batch(e, batch)]
    candidates.sort(key=lambda e: (e.start_time, e.is_batch_wide))

    seen: set[tuple] = set()
    out: List[TimetableClass] = []
    for entry in candidates:
        if entry.dedupe_key in seen:
            continue
        seen.add(entry.dedupe_key)
        out.append(entry)
    return out


class TimetableService:
    def __init__(
        self,
        timetable: TimetableRepository,
        profiles: ProfileRepository,
        holidays: HolidayService,
    ):
        self._timetable = timetable
        self._profiles = profiles
        self._holidays = holidays

    def classes_for_date(self, user_id: str, on_date: date) -> List[TimetableClass]:
        profile = self._profiles.get_by_id(user_id)
        if not profile:
            return []

        if self._holidays.is_holiday(user_id, on_date):
            logger.debug("%s is a holiday for %s", on_date, user_id)
            return []

        day = weekday_name(on_date)
        entries = self._timetable.list_for_batch(profile.batch, day=day)
        return resolve_classes(entries, batch=profile.batch, day=day)

    def weekly(self, user_id: str) -> Dict[str, List[TimetableClass]]:
        profile = self._profiles.get_by_id(user_id)
        if not profile:
            return {day: [] for day in TEACHING_DAYS}

        entries = list(self._timetable.list_for_batch(profile.batch))
        return {day: resolve_classes(entries, batch=profile.batch, day=day) for day in TEACHING_DAYS}
