# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Scheduled (target) hours per calendar day."""

from datetime import date

from timeledger.engine.dates import is_chargeable, weekday_of
from timeledger.models.enums import TargetHoursModel
from timeledger.schemas.employee import ContractVersion


def daily_target(contract: ContractVersion, day: date) -> float:
    """Return the hours a contract schedules for a day.

    Weekly contracts look up ``weekly_schedule`` by weekday (see
    ``engine.dates.WEEKDAYS``); days missing from the schedule are 0.
    All other contracts return ``daily_target_hours`` for every calendar
    day, weekends included; excluding non-working days is up to the caller.

    Args:
        contract: The effective contract version.
        day: The calendar date.

    Returns:
        Scheduled hours (never negative).
    """
    if contract.target_hours_model == TargetHoursModel.WEEKLY:
        schedule = contract.weekly_schedule or {}
        return max(schedule.get(weekday_of(day), 0.0), 0.0)
    return max(contract.daily_target_hours, 0.0)


def chargeable_target(contract: ContractVersion, day: date, holidays: set[date]) -> float:
    """Return the target hours a day adds to a period total.

    Weekends and public holidays contribute nothing.
    """
    if not is_chargeable(day, holidays):
        return 0.0
    return daily_target(contract, day)
