# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Worked-time aggregation and statutory break handling."""

import logging
import uuid
from collections.abc import Iterable
from datetime import date, datetime, time

from timeledger.schemas.accounting import Diagnostic, DiagnosticCode
from timeledger.schemas.employee import Employee
from timeledger.schemas.time_entry import TimeEntry

logger = logging.getLogger(__name__)


def required_break_minutes(gross_hours: float) -> int:
    """Calculate the statutory minimum break for a shift.

    Args:
        gross_hours: Total gross working hours.

    Returns:
        Required break time in minutes.
    """
    if gross_hours > 9.0:
        return 45  # 45min break required after 9h work
    if gross_hours > 6.0:
        return 30  # 30min break required after 6h work
    return 0


def apply_automatic_breaks(entry: TimeEntry, employee: Employee) -> TimeEntry:
    """Raise an entry's break to the statutory minimum if the employee opted in.

    A longer manually entered break is kept.

    Args:
        entry: The time entry.
        employee: The employee owning the entry.

    Returns:
        The entry, or a copy with the adjusted break.
    """
    if not employee.automatic_break_deduction:
        return entry

    required = required_break_minutes(entry.gross_hours)
    if entry.break_minutes >= required:
        return entry
    return entry.model_copy(update={"break_minutes": required})


def entry_net_hours(
    entry: TimeEntry, diagnostics: list[Diagnostic] | None = None
) -> float:
    """Return an entry's worked hours net of breaks, never below zero.

    A break longer than the gross duration is a data-integrity problem; the
    entry counts as 0 hours and the problem is reported.
    """
    net = entry.gross_hours - entry.break_minutes / 60
    if net >= 0:
        return net

    message = (
        f"Break of {entry.break_minutes} min exceeds the "
        f"{entry.gross_hours:.2f}h duration of the entry starting {entry.start}"
    )
    logger.warning(message)
    if diagnostics is not None:
        diagnostics.append(
            Diagnostic(
                level="warning",
                code=DiagnosticCode.NEGATIVE_BREAK_DURATION,
                message=message,
                date=entry.start.date(),
                reference=str(entry.id) if entry.id else None,
            )
        )
    return 0.0


def _wall_clock(value: date | datetime) -> datetime:
    """Return a naive local timestamp; aware values keep their own wall-clock time."""
    if isinstance(value, datetime):
        return value.replace(tzinfo=None)
    return datetime.combine(value, time.min)


def worked_hours(
    entries: Iterable[TimeEntry],
    range_start: date | datetime,
    range_end: date | datetime,
    employee_id: uuid.UUID | None = None,
    diagnostics: list[Diagnostic] | None = None,
) -> float:
    """Sum net worked hours of entries starting within ``[range_start, range_end)``.

    Dates are taken as midnight, so ``range_end`` should be the day after
    the last day to include. Timezone-aware timestamps are compared by
    their local wall-clock time.

    Args:
        entries: Time entries.
        range_start: Inclusive start of the range.
        range_end: Exclusive end of the range.
        employee_id: Optional filter on the entry owner.
        diagnostics: Optional list collecting integrity reports.

    Returns:
        Net worked hours.
    """
    start = _wall_clock(range_start)
    end = _wall_clock(range_end)

    total = 0.0
    for entry in entries:
        if employee_id is not None and entry.employee_id != employee_id:
            continue
        if not start <= _wall_clock(entry.start) < end:
            continue
        total += entry_net_hours(entry, diagnostics)
    return total
