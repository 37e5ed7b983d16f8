from __future__ import annotations

from datetime import date, timedelta

import pytest

from student_attendance.attendance.service import AttendanceService
from student_attendance.core.enums import AttendanceStatus, Gesture
from student_attendance.core.exceptions import ValidationError

from conftest import InMemoryAttendance

TODAY = date(2026, 3, 2)


@pytest.fixture
def repo():
    return InMemoryAttendance()


@pytest.fixture
def svc(repo):
    return AttendanceService(repo)


def test_marking_same_class_twice_keeps_one_record(svc, repo):
    svc.mark("u-1", subject="Physics", status="present", on_date=TODAY)
    svc.mark("u-1", subject="Physics", status="absent", on_date=TODAY)

    records = repo.list_for_user("u-1")
    assert len(records) == 1
    assert records[0].status == AttendanceStatus.ABSENT


def test_mark_defaults_to_today(svc, frozen_clock):
    record = svc.mark("u-1", subject="Physics", status=AttendanceStatus.PRESENT)
    assert record.date == frozen_clock.date()


def test_mark_rejects_unknown_status(svc, repo):
    with pytest.raises(ValidationError):
        svc.mark("u-1", subject="Physics", status="late", on_date=TODAY)
    assert repo.records == []


def test_mark_swapped_requires_target_and_status(svc):
    with pytest.raises(ValidationError, match="Please select subject and attendance"):
        svc.mark_swapped("u-1", subject="Mathematics", swapped_to="", status="present", on_date=TODAY)
    with pytest.raises(ValidationError, match="Please select subject and attendance"):
        svc.mark_swapped("u-1", subject="Mathematics", swapped_to="Physics", status=None, on_date=TODAY)


def test_swapped_class_is_stored_under_original_subject(svc):
    record = svc.mark_swapped(
        "u-1", subject="Mathematics", swapped_to="Physics", status="present", on_date=TODAY
    )

    assert record.subject == "Mathematics"
    assert record.effective_subject == "Physics"
    assert "Mathematics" in svc.statuses_for_date("u-1", TODAY)

    summary = svc.summary("u-1")
    assert [s.subject for s in summary.subjects] == ["Physics"]


def test_edit_counts_rewrites_subject_history(svc, repo):
    svc.mark("u-1", subject="Physics", status="absent", on_date=date(2026, 1, 5))
    svc.mark("u-1", subject="Chemistry", status="present", on_date=date(2026, 1, 5))

    records = svc.edit_counts("u-1", subject="Physics", attended=7, total=10, today=TODAY)

    assert len(records) == 10
    assert [r.date for r in records] == [TODAY - timedelta(days=i) for i in range(10)]
    assert all(r.status == AttendanceStatus.PRESENT for r in records[:7])
    assert all(r.status == AttendanceStatus.ABSENT for r in records[7:])

    physics = [r for r in repo.records if r.subject == "Physics"]
    assert len(physics) == 10
    assert date(2026, 1, 5) not in {r.date for r in physics}
    # other subjects are untouched
    assert any(r.subject == "Chemistry" for r in repo.records)

    rows = {s.subject: s for s in svc.summary("u-1").subjects}
    assert rows["Physics"].attended == 7
    assert rows["Physics"].total == 10
    assert rows["Physics"].rounded_percentage == 70


def test_edit_counts_keeps_classes_swapped_to_another_subject(svc, repo):
    svc.mark_swapped("u-1", subject="Physics", swapped_to="Chemistry", status="present", on_date=TODAY)

    records = svc.edit_counts("u-1", subject="Physics", attended=1, total=1, today=TODAY)

    # today is still held by the Physics -> Chemistry row
    assert [r.date for r in records] == [TODAY - timedelta(days=1)]
    rows = {s.subject: (s.attended, s.total) for s in svc.summary("u-1").subjects}
    assert rows == {"Chemistry": (1, 1), "Physics": (1, 1)}


def test_edit_counts_replaces_classes_swapped_into_subject(svc, repo):
    svc.mark_swapped("u-1", subject="Mathematics", swapped_to="Physics", status="absent", on_date=TODAY)
    svc.mark("u-1", subject="Physics", status="present", on_date=TODAY - timedelta(days=1))

    svc.edit_counts("u-1", subject="Physics", attended=2, total=3, today=TODAY)

    assert all(r.swapped_to is None for r in repo.records)
    rows = {s.subject: (s.attended, s.total) for s in svc.summary("u-1").subjects}
    assert rows == {"Physics": (2, 3)}


def test_edit_counts_rejects_total_past_calendar_start(svc, repo):
    svc.mark("u-1", subject="Physics", status="present", on_date=TODAY)

    with pytest.raises(ValidationError, match="Total classes is too large"):
        svc.edit_counts("u-1", subject="Physics", attended=0, total=800_000, today=TODAY)

    assert len(repo.records) == 1


def test_edit_counts_to_zero_clears_subject(svc, repo):
    svc.mark("u-1", subject="Physics", status="present", on_date=TODAY)
    assert svc.edit_counts("u-1", subject="Physics", attended=0, total=0, today=TODAY) == []
    assert repo.records == []


@pytest.mark.parametrize(
    "attended, total, message",
    [
        (11, 10, "Attended classes cannot exceed total classes"),
        (-1, 10, "Values cannot be negative"),
        (1, -2, "Values cannot be negative"),
        ("x", 10, "must be a whole number"),
    ],
)
def test_invalid_edit_leaves_records_untouched(svc, repo, attended, total, message):
    svc.mark("u-1", subject="Physics", status="present", on_date=TODAY)

    with pytest.raises(ValidationError, match=message):
        svc.edit_counts("u-1", subject="Physics", attended=attended, total=total, today=TODAY)

    assert len(repo.records) == 1
    assert repo.records[0].status == AttendanceStatus.PRESENT


@pytest.mark.parametrize(
    "kwargs",
    [
        {"subject": 5, "status": "present"},
        {"subject": "Mathematics", "status": "present", "swapped_to": 7},
        {"subject": ["Physics"], "status": "absent"},
    ],
)
def test_mark_rejects_non_text_subjects(svc, repo, kwargs):
    with pytest.raises(ValidationError, match="must be text"):
        svc.mark("u-1", on_date=TODAY, **kwargs)
    assert repo.records == []


def test_edit_counts_rejects_non_text_subject(svc):
    with pytest.raises(ValidationError, match="must be text"):
        svc.edit_counts("u-1", subject=5, attended=1, total=1, today=TODAY)


def test_swipe_right_marks_present(svc):
    outcome = svc.apply_gesture("u-1", subject="Physics", gesture="swipe_right", on_date=TODAY)

    assert outcome.status == AttendanceStatus.PRESENT
    assert svc.statuses_for_date("u-1", TODAY)["Physics"].status == AttendanceStatus.PRESENT


def test_swipe_left_marks_absent(svc):
    outcome = svc.apply_gesture("u-1", subject="Physics", gesture=Gesture.SWIPE_LEFT, on_date=TODAY)
    assert outcome.status == AttendanceStatus.ABSENT


def test_swipe_on_marked_class_is_ignored(svc):
    svc.mark("u-1", subject="Physics", status="absent", on_date=TODAY)

    outcome = svc.apply_gesture("u-1", subject="Physics", gesture="swipe_right", on_date=TODAY)

    assert outcome.writes is False
    assert svc.statuses_for_date("u-1", TODAY)["Physics"].status == AttendanceStatus.ABSENT


def test_tap_opens_options_without_writing(svc, repo):
    outcome = svc.apply_gesture("u-1", subject="Physics", gesture="tap", on_date=TODAY)

    assert outcome.show_options is True
    assert outcome.to_dict()["options"] == ["present", "absent", "swapped", "cancelled"]
    assert repo.records == []


def test_unknown_gesture_rejected(svc):
    with pytest.raises(ValidationError):
        svc.apply_gesture("u-1", subject="Physics", gesture="double_tap", on_date=TODAY)
