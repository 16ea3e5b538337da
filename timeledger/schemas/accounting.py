# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Derived accounting results (recomputed on demand, never stored)."""

import datetime
import uuid
from enum import Enum

from pydantic import BaseModel, ConfigDict


class DiagnosticCode(str, Enum):
    """Problems the engine recovered from while computing a result."""

    NO_EFFECTIVE_CONTRACT = "NO_EFFECTIVE_CONTRACT"
    MISSING_HOLIDAY_YEAR = "MISSING_HOLIDAY_YEAR"
    NEGATIVE_BREAK_DURATION = "NEGATIVE_BREAK_DURATION"
    OVERLAPPING_ABSENCE = "OVERLAPPING_ABSENCE"


class Diagnostic(BaseModel):
    """A recovered data problem, reported alongside a result."""

    model_config = ConfigDict(frozen=True)

    level: str  # "info", "warning", "error"
    code: DiagnosticCode
    message: str
    date: datetime.date | None = None
    reference: str | None = None


class MonthlyBreakdown(BaseModel):
    """Accounting breakdown of one employee month."""

    model_config = ConfigDict(frozen=True)

    employee_id: uuid.UUID
    year: int
    month: int

    worked_hours: float = 0.0
    vacation_credit_hours: float = 0.0
    sick_leave_credit_hours: float = 0.0
    time_off_credit_hours: float = 0.0
    absence_holiday_credit: float = 0.0
    adjustments: float = 0.0
    total_credited: float = 0.0
    target_hours: float = 0.0
    monthly_balance: float = 0.0
    previous_balance: float = 0.0
    end_of_month_balance: float = 0.0

    # Scheduled hours waived by public holidays (informational)
    holiday_hours: float = 0.0
    vacation_days: float = 0.0
    sick_days: float = 0.0
    time_off_days: float = 0.0

    is_complete: bool = True
    missing_holiday_years: list[int] = []
    diagnostics: list[Diagnostic] = []


class VacationSummary(BaseModel):
    """Vacation entitlement and consumption of one employee year."""

    model_config = ConfigDict(frozen=True)

    employee_id: uuid.UUID
    year: int
    as_of: datetime.date | None = None

    annual_entitlement: float = 0.0
    carryover: float = 0.0
    carryover_frozen: bool = False
    taken: float = 0.0
    planned: float = 0.0
    pending: float = 0.0
    remaining: float = 0.0

    is_complete: bool = True
    missing_holiday_years: list[int] = []
    diagnostics: list[Diagnostic] = []

    @property
    def total_available(self) -> float:
        """Entitlement plus carryover."""
        return self.annual_entitlement + self.carryover
