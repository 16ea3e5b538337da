# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Pydantic schemas: immutable entity snapshots and accounting results."""

from timeledger.schemas.absence import AbsenceRequest
from timeledger.schemas.accounting import (
    Diagnostic,
    DiagnosticCode,
    MonthlyBreakdown,
    VacationSummary,
)
from timeledger.schemas.adjustment import TimeBalanceAdjustment
from timeledger.schemas.employee import ContractVersion, Employee
from timeledger.schemas.holiday import Holiday, HolidaysByYear
from timeledger.schemas.time_entry import TimeEntry

__all__ = [
    "AbsenceRequest",
    "ContractVersion",
    "Diagnostic",
    "DiagnosticCode",
    "Employee",
    "Holiday",
    "HolidaysByYear",
    "MonthlyBreakdown",
    "TimeBalanceAdjustment",
    "TimeEntry",
    "VacationSummary",
]
