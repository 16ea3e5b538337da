# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Pure time and entitlement calculations.

Nothing in this package reads the clock, touches the database or fetches
holidays; every input is passed in explicitly.
"""

from timeledger.engine.absences import AbsenceDays, apportion, apportion_year
from timeledger.engine.collisions import Collision, check_collision
from timeledger.engine.contracts import resolve
from timeledger.engine.ledger import (
    LedgerSession,
    monthly_breakdown,
    required_holiday_years,
)
from timeledger.engine.target_hours import daily_target
from timeledger.engine.vacation import annual_entitlement, vacation_summary
from timeledger.engine.worked_time import apply_automatic_breaks, worked_hours

__all__ = [
    "AbsenceDays",
    "Collision",
    "LedgerSession",
    "annual_entitlement",
    "apply_automatic_breaks",
    "apportion",
    "apportion_year",
    "check_collision",
    "daily_target",
    "monthly_breakdown",
    "required_holiday_years",
    "resolve",
    "vacation_summary",
    "worked_hours",
]
