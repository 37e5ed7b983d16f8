from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Role assignments stored in user_roles."""

    STUDENT = "student"


class AttendanceStatus(str, Enum):
    """Attendance status stored per (user, date, subject)."""

    PRESENT = "present"
    ABSENT = "absent"
    CANCELLED = "cancelled"


class AttendanceLevel(str, Enum):
    """Display classification of an attendance percentage."""

    GOOD = "good"
    WARNING = "warning"
    CRITICAL = "critical"


class Gesture(str, Enum):
    TAP = "tap"
    SWIPE_LEFT = "swipe_left"
    SWIPE_RIGHT = "swipe_right"
