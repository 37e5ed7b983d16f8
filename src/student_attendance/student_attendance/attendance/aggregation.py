"""Fold raw attendance rows into per-subject and overall figures."""
from __future__ import annotations

from typing import Dict, Iterable

from ..core.enums import AttendanceStatus
from .levels import classify, is_below_threshold, round_half_up
from .model import AttendanceRecord, AttendanceSummary, SubjectAttendance


def aggregate_by_subject(records: Iterable[AttendanceRecord]) -> Dict[str, SubjectAttendance]:
    """Single pass over the records keyed by effective subject.

    Cancelled classes are skipped entirely; every other record counts towards
    total, and present ones towards attended as well.
    """

    out: Dict[str, SubjectAttendance] = {}
    for record in records:
        if record.status == AttendanceStatus.CANCELLED:
            continue

        subject = record.effective_subject
        row = out.get(subject)
        if row is None:
            row = SubjectAttendance(subject=subject)
            out[subject] = row

        row.total += 1
        if record.status == AttendanceStatus.PRESENT:
            row.attended += 1
    return out


def overall_percentage(subjects: Iterable[SubjectAttendance]) -> int:
    total_classes = 0
    total_attended = 0
    for s in subjects:
        total_classes += s.total
        total_attended += s.attended

    if total_classes == 0:
        return 0
    return round_half_up((total_attended / total_classes) * 100)


def summarize(records: Iterable[AttendanceRecord]) -> AttendanceSummary:
    subjects = list(aggregate_by_subject(records).values())
    overall = overall_percentage(subjects)
    return AttendanceSummary(
        subjects=subjects,
        overall=overall,
        level=classify(overall),
        below_threshold=is_below_threshold(overall),
    )
