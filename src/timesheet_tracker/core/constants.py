"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

MINUTES_PER_HOUR = 60
MINUTES_PER_DAY = 24 * 60

# Work day counted as "full" on the month history badge (9h)
FULL_WORK_DAY_MINUTES = 9 * 60

DEFAULT_TIME_PICKER_INTERVAL = 15

# datetime.weekday(): Friday = 4, Saturday = 5
DEFAULT_WEEKEND_DAYS = (4, 5)

TIME_FORMAT_ERROR = "Invalid time format: {value}. Expected HH:mm"
END_BEFORE_START_ERROR = "End time must be after start time"
TIMES_REQUIRED_ERROR = "Start and end times are required"

# Status values (see core.enums.AttendanceStatus) that leave no room for work on the same date
EXCLUSIVE_STATUSES = ("dayOff", "sickness", "reserves")

# Statuses that are shown as "missing" unless a supporting document exists
DOCUMENT_REQUIRED_STATUSES = ("sickness", "reserves")
