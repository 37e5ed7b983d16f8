from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import Dict, List, Optional, Set

from ..common.datetime_utils import today_local
from ..common.validators import optional_text, require_non_empty, require_non_negative
from ..core.enums import AttendanceStatus, Gesture
from ..core.exceptions import ValidationError
from .aggregation import summarize
from .gestures import GestureOutcome, resolve_gesture
from .model import AttendanceRecord, AttendanceSummary
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


def _parse_status(value) -> AttendanceStatus:
    if isinstance(value, AttendanceStatus):
        return value
    try:
        return AttendanceStatus(str(value).strip().lower())
    except ValueError:
        raise ValidationError("Attendance status must be present, absent or cancelled")


def _free_days_back(today: date, count: int, taken: Set[date]) -> List[date]:
    """`count` dates walking back from today, skipping `taken` ones."""

    available = (today - date.min).days + 1 - sum(1 for d in taken if d <= today)
    if count > available:
        raise ValidationError("Total classes is too large")

    days: List[date] = []
    day = today
    while len(days) < count:
        if day not in taken:
            days.append(day)
        if len(days) < count:
            day -= timedelta(days=1)
    return days


class AttendanceService:
    def __init__(self, attendance: AttendanceRepository):
        self._attendance = attendance

    def mark(
        self,
        user_id: str,
        *,
        subject: str,
        status,
        swapped_to: Optional[str] = None,
        on_date: Optional[date] = None,
    ) -> AttendanceRecord:
        """Upsert the status of one class for the day (same key overwrites)."""

        subject = require_non_empty(subject, "Subject")
        status = _parse_status(status)
        swapped_to = optional_text(swapped_to, "Swapped subject")
        if swapped_to and status == AttendanceStatus.CANCELLED:
            raise ValidationError("Please select subject and attendance")

        record = AttendanceRecord(
            user_id=user_id,
            date=on_date or today_local(),
            subject=subject,
            status=status,
            swapped_to=swapped_to,
        )
        self._attendance.upsert(record)
        logger.info("Marked %s %s on %s for %s", subject, status.value, record.date, user_id)
        return record

    def mark_swapped(
        self,
        user_id: str,
        *,
        subject: str,
        swapped_to: Optional[str],
        status,
        on_date: Optional[date] = None,
    ) -> AttendanceRecord:
        if not swapped_to or not str(swapped_to).strip() or status in (None, ""):
            raise ValidationError("Please select subject and attendance")
        return self.mark(user_id, subject=subject, status=status, swapped_to=swapped_to, on_date=on_date)

    def apply_gesture(
        self,
        user_id: str,
        *,
        subject: str,
        gesture,
        on_date: Optional[date] = None,
    ) -> GestureOutcome:
        subject = require_non_empty(subject, "Subject")
        try:
            gesture = Gesture(gesture)
        except ValueError:
            raise ValidationError("Unknown gesture")

        on_date = on_date or today_local()
        already_marked = subject in self.statuses_for_date(user_id, on_date)
        outcome = resolve_gesture(gesture, already_marked=already_marked)
        if outcome.writes:
            self.mark(user_id, subject=subject, status=outcome.status, on_date=on_date)
        return outcome

    def edit_counts(
        self,
        user_id: str,
        *,
        subject: str,
        attended,
        total,
        today: Optional[date] = None,
    ) -> List[AttendanceRecord]:
        """Replace every record counted under the subject with `total` synthetic daily records.

        Records are dated today, today-1, ... and the first `attended` of them are
        present. Earlier per-date detail for the subject is lost. Rows swapped away
        to another subject keep counting there, so their dates are skipped.
        """

        subject = require_non_empty(subject, "Subject")
        attended = require_non_negative(attended, "Attended")
        total = require_non_negative(total, "Total")
        if attended > total:
            raise ValidationError("Attended classes cannot exceed total classes")

        today = today or today_local()
        taken = {
            r.date
            for r in self._attendance.list_for_user(user_id)
            if r.subject == subject and r.effective_subject != subject
        }
        records = [
            AttendanceRecord(
                user_id=user_id,
                date=day,
                subject=subject,
                status=AttendanceStatus.PRESENT if i < attended else AttendanceStatus.ABSENT,
            )
            for i, day in enumerate(_free_days_back(today, total, taken))
        ]

        deleted = self._attendance.delete_for_effective_subject(user_id, subject)
        self._attendance.insert_many(records)
        logger.info("Rewrote %s for %s: %d removed, %d/%d written", subject, user_id, deleted, attended, total)
        return records

    def records_for_user(self, user_id: str) -> List[AttendanceRecord]:
        return list(self._attendance.list_for_user(user_id))

    def statuses_for_date(self, user_id: str, on_date: date) -> Dict[str, AttendanceRecord]:
        """Today's records keyed by the original (timetabled) subject."""

        out: Dict[str, AttendanceRecord] = {}
        for record in self._attendance.list_for_user(user_id, on_date=on_date):
            out.setdefault(record.subject, record)
        return out

    def summary(self, user_id: str) -> AttendanceSummary:
        return summarize(self._attendance.list_for_user(user_id))
