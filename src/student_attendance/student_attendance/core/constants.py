"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

GOOD_ATTENDANCE_PERCENT = 75
WARNING_ATTENDANCE_PERCENT = 65

UPCOMING_HOLIDAY_LIMIT = 5
DEFAULT_TOKEN_TTL_MINUTES = 60
MIN_PASSWORD_LENGTH = 6

# Weekdays that can carry classes, in display order.
TEACHING_DAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday")

BRANCH_OPTIONS = ("CSE", "CSE-AIML", "IT", "CS-DS")
BATCH_OPTIONS = {
    "CSE": ("A1", "A2", "A3"),
    "CSE-AIML": ("A4", "A5", "A6"),
    "IT": ("B1", "B2", "B3"),
    "CS-DS": ("B4",),
}

DEFAULT_HOLIDAY_TYPE = "holiday"
