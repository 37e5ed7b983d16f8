from __future__ import annotations

import math

from ..core.constants import GOOD_ATTENDANCE_PERCENT, WARNING_ATTENDANCE_PERCENT
from ..core.enums import AttendanceLevel


def round_half_up(value: float) -> int:
    """Round to the nearest integer, .5 going up (Python's round() would go to even)."""
    return int(math.floor(value + 0.5))


def classify(percentage: float) -> AttendanceLevel:
    if percentage >= GOOD_ATTENDANCE_PERCENT:
        return AttendanceLevel.GOOD
    if percentage >= WARNING_ATTENDANCE_PERCENT:
        return AttendanceLevel.WARNING
    return AttendanceLevel.CRITICAL


def is_below_threshold(percentage: float) -> bool:
    return percentage < GOOD_ATTENDANCE_PERCENT
