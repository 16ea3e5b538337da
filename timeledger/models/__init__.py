# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Database models package."""

from timeledger.models.absence_request import AbsenceRequest
from timeledger.models.base import Base, TimestampMixin
from timeledger.models.employee import ContractVersion, Employee, VacationCarryover
from timeledger.models.enums import (
    AbsenceStatus,
    AbsenceType,
    AdjustmentType,
    DayPortion,
    EmploymentType,
    EntrySource,
    TargetHoursModel,
    Weekday,
)
from timeledger.models.time_balance_adjustment import TimeBalanceAdjustment
from timeledger.models.time_entry import TimeEntry

__all__ = [
    "AbsenceRequest",
    "AbsenceStatus",
    "AbsenceType",
    "AdjustmentType",
    "Base",
    "ContractVersion",
    "DayPortion",
    "Employee",
    "EmploymentType",
    "EntrySource",
    "TargetHoursModel",
    "TimeBalanceAdjustment",
    "TimeEntry",
    "TimestampMixin",
    "VacationCarryover",
    "Weekday",
]
