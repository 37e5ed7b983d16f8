from __future__ import annotations

from datetime import date

import pytest

from student_attendance.core.exceptions import ValidationError
from student_attendance.holidays.model import HolidayEntry
from student_attendance.holidays.service import HolidayService

from conftest import InMemoryHolidays


def _holiday(holiday_id, on_date, name, *, user_id=None):
    return HolidayEntry(
        holiday_id=holiday_id,
        date=on_date,
        name=name,
        type="holiday",
        is_institution_wide=user_id is None,
        user_id=user_id,
    )


@pytest.fixture
def svc():
    return HolidayService(
        InMemoryHolidays(
            [
                _holiday(1, date(2026, 1, 26), "Republic Day"),
                _holiday(2, date(2026, 3, 4), "Holi"),
                _holiday(3, date(2026, 3, 10), "Family function", user_id="u-1"),
                _holiday(4, date(2026, 3, 11), "Trip", user_id="u-2"),
            ]
        )
    )


def test_user_sees_institution_and_own_holidays_only(svc):
    names = [h.name for h in svc.list_for_user("u-1")]
    assert names == ["Republic Day", "Holi", "Family function"]


def test_is_holiday_respects_ownership(svc):
    assert svc.is_holiday("u-1", date(2026, 3, 10))
    assert not svc.is_holiday("u-1", date(2026, 3, 11))
    assert svc.is_holiday("u-2", date(2026, 3, 11))


def test_upcoming_includes_today_and_is_capped(svc):
    upcoming = svc.upcoming("u-1", today=date(2026, 3, 4), limit=1)
    assert [h.name for h in upcoming] == ["Holi"]

    upcoming = svc.upcoming("u-1", today=date(2026, 3, 5))
    assert [h.name for h in upcoming] == ["Family function"]


def test_add_personal_holiday(svc):
    svc.add_personal(user_id="u-1", on_date=date(2026, 4, 1), name="  Sick leave ")

    added = svc.for_date("u-1", date(2026, 4, 1))
    assert len(added) == 1
    assert added[0].name == "Sick leave"
    assert added[0].is_institution_wide is False
    assert added[0].to_dict()["scope"] == "Personal"
    assert not svc.is_holiday("u-2", date(2026, 4, 1))


def test_add_personal_requires_date_and_name(svc):
    with pytest.raises(ValidationError, match="Pick a date"):
        svc.add_personal(user_id="u-1", on_date=None, name="Trip")
    with pytest.raises(ValidationError, match="Holiday name is required"):
        svc.add_personal(user_id="u-1", on_date=date(2026, 4, 1), name="   ")
