from __future__ import annotations

from datetime import date, datetime, time, timedelta

import pytest

from student_attendance.database.bootstrap import split_statements
from student_attendance.database.mysql_base import to_date, to_flag, to_time


def test_split_statements_drops_comments_and_database_pinning():
    script = """
    -- demo data
    CREATE DATABASE IF NOT EXISTS student_attendance;
    USE student_attendance;
    INSERT INTO calendar(date, name) VALUES('2026-01-26', 'Republic Day; national holiday');
    # trailing note
    DELETE FROM calendar WHERE name = 'it''s -- fine'
    """

    statements = list(split_statements(script))

    assert len(statements) == 2
    assert statements[0].endswith("'Republic Day; national holiday')")
    assert statements[1] == "DELETE FROM calendar WHERE name = 'it''s -- fine'"


@pytest.mark.parametrize(
    "value",
    [time(9, 30), timedelta(hours=9, minutes=30), "09:30:00", b"09:30"],
)
def test_to_time(value):
    assert to_time(value) == time(9, 30)


def test_to_time_rejects_garbage():
    with pytest.raises(ValueError):
        to_time("0930")


@pytest.mark.parametrize(
    "value",
    [date(2026, 3, 2), datetime(2026, 3, 2, 0, 0), "2026-03-02", b"2026-03-02 00:00:00"],
)
def test_to_date(value):
    assert to_date(value) == date(2026, 3, 2)


@pytest.mark.parametrize(
    "value, expected",
    [(1, True), (0, False), (None, False), ("1", True), ("0", False), (True, True)],
)
def test_to_flag(value, expected):
    assert to_flag(value) is expected
