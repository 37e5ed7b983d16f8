from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, time
from types import SimpleNamespace
from typing import Optional

import pytest

from student_attendance.attendance.model import AttendanceRecord
from student_attendance.common import datetime_utils
from student_attendance.container import assemble_container
from student_attendance.core.enums import Role
from student_attendance.holidays.model import HolidayEntry
from student_attendance.timetable.model import TimetableClass
from student_attendance.users.model import AuthUser, Profile

TEST_SECRET = "test-secret-for-signing-bearer-tokens"


@dataclass
class InMemoryUsers:
    users_by_id: dict[str, AuthUser] = field(default_factory=dict)

    def get_by_id(self, user_id: str) -> Optional[AuthUser]:
        return self.users_by_id.get(user_id)

    def get_by_email(self, email: str) -> Optional[AuthUser]:
        for u in self.users_by_id.values():
            if u.email == email:
                return u
        return None

    def create_user(self, *, user_id: str, email: str, password_hash: str) -> str:
        self.users_by_id[user_id] = AuthUser(user_id=user_id, email=email, password_hash=password_hash)
        return user_id

    def delete_by_id(self, user_id: str) -> bool:
        return self.users_by_id.pop(user_id, None) is not None


@dataclass
class InMemoryProfiles:
    profiles: dict[str, Profile] = field(default_factory=dict)

    def get_by_id(self, user_id: str) -> Optional[Profile]:
        return self.profiles.get(user_id)

    def create_profile(self, profile: Profile) -> None:
        self.profiles[profile.user_id] = profile

    def delete_by_id(self, user_id: str) -> int:
        return 1 if self.profiles.pop(user_id, None) else 0


@dataclass
class InMemoryRoles:
    roles: list[tuple[str, Role]] = field(default_factory=list)

    def add_role(self, *, user_id: str, role: Role) -> None:
        if (user_id, role) not in self.roles:
            self.roles.append((user_id, role))

    def list_roles(self, user_id: str):
        return [r for uid, r in self.roles if uid == user_id]

    def delete_for_user(self, user_id: str) -> int:
        before = len(self.roles)
        self.roles = [(uid, r) for uid, r in self.roles if uid != user_id]
        return before - len(self.roles)


@dataclass
class InMemoryTimetable:
    """Returns every entry for the day; batch applicability is left to the service."""

    entries: list[TimetableClass] = field(default_factory=list)

    def list_for_batch(self, batch: str, *, day: Optional[str] = None):
        items = [e for e in self.entries if day is None or e.day == day]
        return sorted(items, key=lambda e: e.start_time)


class InMemoryAttendance:
    def __init__(self):
        self._by_key: dict[tuple, AttendanceRecord] = {}

    @property
    def records(self) -> list[AttendanceRecord]:
        return list(self._by_key.values())

    def list_for_user(self, user_id: str, *, on_date: Optional[date] = None):
        return [
            r
            for r in self._by_key.values()
            if r.user_id == user_id and (on_date is None or r.date == on_date)
        ]

    def upsert(self, record: AttendanceRecord) -> None:
        self._by_key[record.key] = record

    def insert_many(self, records) -> int:
        for r in records:
            if r.key in self._by_key:
                raise ValueError(f"Duplicate entry {r.key}")
            self._by_key[r.key] = r
        return len(records)

    def delete_for_effective_subject(self, user_id: str, subject: str) -> int:
        keys = [k for k, r in self._by_key.items() if r.user_id == user_id and r.effective_subject == subject]
        for k in keys:
            del self._by_key[k]
        return len(keys)

    def delete_for_user(self, user_id: str) -> int:
        keys = [k for k, r in self._by_key.items() if r.user_id == user_id]
        for k in keys:
            del self._by_key[k]
        return len(keys)


class InMemoryHolidays:
    def __init__(self, entries: Optional[list[HolidayEntry]] = None):
        self.entries = list(entries or [])
        self._id = len(self.entries)

    def list_for_user(self, user_id: str, *, on_date: Optional[date] = None):
        items = [
            h
            for h in self.entries
            if h.applies_to(user_id) and (on_date is None or h.date == on_date)
        ]
        return sorted(items, key=lambda h: (h.date, h.holiday_id))

    def create(self, *, on_date, name, type, is_institution_wide, user_id) -> int:
        self._id += 1
        self.entries.append(
            HolidayEntry(
                holiday_id=self._id,
                date=on_date,
                name=name,
                type=type,
                is_institution_wide=is_institution_wide,
                user_id=user_id,
            )
        )
        return self._id

    def delete_for_user(self, user_id: str) -> int:
        before = len(self.entries)
        self.entries = [h for h in self.entries if h.user_id != user_id]
        return before - len(self.entries)


def make_class(
    subject: str,
    start: time,
    end: time,
    *,
    day: str = "Monday",
    batch: str = "A1",
    class_id: int = 0,
    room: str = "LH-101",
    is_batch_wide: bool = False,
) -> TimetableClass:
    return TimetableClass(
        class_id=class_id,
        subject=subject,
        start_time=start,
        end_time=end,
        day=day,
        batch=batch,
        room=room,
        is_batch_wide=is_batch_wide,
    )


@pytest.fixture
def fixed_now() -> datetime:
    # Monday
    return datetime(2026, 3, 2, 9, 30, 0)


@pytest.fixture
def frozen_clock(monkeypatch, fixed_now):
    monkeypatch.setattr(datetime_utils, "now_local", lambda: fixed_now)
    return fixed_now


@pytest.fixture
def student_profile() -> Profile:
    return Profile(
        user_id="u-1",
        name="Asha Rao",
        email="asha@jss.edu",
        branch="CSE",
        batch="A1",
        roll_number="1JS21CS001",
    )


@pytest.fixture
def repos(student_profile):
    return SimpleNamespace(
        users=InMemoryUsers({student_profile.user_id: AuthUser(student_profile.user_id, student_profile.email, "x")}),
        profiles=InMemoryProfiles({student_profile.user_id: student_profile}),
        roles=InMemoryRoles([(student_profile.user_id, Role.STUDENT)]),
        timetable=InMemoryTimetable(
            [
                make_class("Physics", time(10, 0), time(11, 0), class_id=2),
                make_class("Mathematics", time(9, 0), time(10, 0), class_id=1),
                make_class("Chemistry", time(9, 0), time(10, 0), day="Tuesday", class_id=3),
            ]
        ),
        attendance=InMemoryAttendance(),
        holidays=InMemoryHolidays(),
    )


@pytest.fixture
def container(repos):
    return assemble_container(
        users_repo=repos.users,
        profiles_repo=repos.profiles,
        roles_repo=repos.roles,
        timetable_repo=repos.timetable,
        attendance_repo=repos.attendance,
        holidays_repo=repos.holidays,
        secret_key=TEST_SECRET,
        token_ttl_minutes=30,
    )


@pytest.fixture
def app(monkeypatch, container):
    monkeypatch.setenv("APP_ENV", "testing")
    from student_attendance import create_app

    return create_app(container)


@pytest.fixture
def client(app):
    return app.test_client()
