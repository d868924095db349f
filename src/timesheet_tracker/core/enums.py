from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Status of a single daily attendance record."""

    WORK = "work"
    SICKNESS = "sickness"
    RESERVES = "reserves"
    DAY_OFF = "dayOff"
    HALF_DAY_OFF = "halfDayOff"


class ReportingType(str, Enum):
    """How a project expects its time logs to be reported."""

    DURATION = "duration"
    START_END = "startEnd"


class LocationStatus(str, Enum):
    OFFICE = "office"
    CLIENT = "client"
    HOME = "home"


class DayKind(str, Enum):
    """Classification of a calendar date before status priority runs."""

    WEEKEND = "weekend"
    MISSING = "missing"
    REPORTED = "reported"


class BadgeColor(str, Enum):
    GREEN = "green"
    ORANGE = "orange"
    BLUE = "blue"
    RED = "red"
    PURPLE = "purple"
