# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Enumeration types for database models."""

from enum import Enum


class EmploymentType(str, Enum):
    """Employment type enumeration."""

    FULL_TIME = "full_time"
    PART_TIME = "part_time"
    MINI_JOB = "mini_job"


class TargetHoursModel(str, Enum):
    """How a contract expresses its scheduled hours.

    MONTHLY contracts use a flat ``daily_target_hours`` value, WEEKLY
    contracts use a per-weekday ``weekly_schedule``.
    """

    MONTHLY = "monthly"
    WEEKLY = "weekly"


class Weekday(str, Enum):
    """Weekday keys of a weekly schedule.

    Declaration order matches ``datetime.date.weekday()``:
    index 0 is Monday, index 6 is Sunday.
    """

    MON = "mon"
    TUE = "tue"
    WED = "wed"
    THU = "thu"
    FRI = "fri"
    SAT = "sat"
    SUN = "sun"


class AbsenceType(str, Enum):
    """Absence category enumeration."""

    VACATION = "vacation"
    SICK_LEAVE = "sick_leave"
    TIME_OFF = "time_off"


class AbsenceStatus(str, Enum):
    """Approval state of an absence request."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class DayPortion(str, Enum):
    """Portion of a single day covered by a vacation request."""

    FULL = "full"
    AM = "am"
    PM = "pm"


class AdjustmentType(str, Enum):
    """Kind of manual time balance adjustment."""

    CORRECTION = "correction"
    PAYOUT = "payout"


class EntrySource(str, Enum):
    """How a time entry was recorded."""

    STOPWATCH = "stopwatch"
    MANUAL = "manual"
