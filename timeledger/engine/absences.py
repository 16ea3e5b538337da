# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Absence apportionment: split absence requests into per-day credited days."""

import logging
import uuid
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date

from timeledger.engine.dates import as_date_set, is_chargeable, iter_days, month_bounds
from timeledger.models.enums import AbsenceStatus, AbsenceType
from timeledger.schemas.absence import AbsenceRequest
from timeledger.schemas.accounting import Diagnostic, DiagnosticCode
from timeledger.schemas.holiday import Holiday

logger = logging.getLogger(__name__)

# Approved requests win over pending ones covering the same day
_STATUS_PRECEDENCE = {AbsenceStatus.APPROVED: 0, AbsenceStatus.PENDING: 1}


@dataclass
class AbsenceDays:
    """Credited absence days per category."""

    vacation_days: float = 0.0
    sick_days: float = 0.0
    time_off_days: float = 0.0

    @property
    def total_days(self) -> float:
        """All credited absence days."""
        return self.vacation_days + self.sick_days + self.time_off_days

    def add(self, absence_type: AbsenceType, days: float) -> None:
        """Accumulate days for a category."""
        if absence_type == AbsenceType.VACATION:
            self.vacation_days += days
        elif absence_type == AbsenceType.SICK_LEAVE:
            self.sick_days += days
        elif absence_type == AbsenceType.TIME_OFF:
            self.time_off_days += days


def credited_requests(
    employee_id: uuid.UUID,
    requests: Iterable[AbsenceRequest],
    start: date | None = None,
    end: date | None = None,
) -> list[AbsenceRequest]:
    """Return the employee's non-rejected requests, optionally limited to a range.

    Args:
        employee_id: The employee whose requests are kept.
        requests: All absence requests.
        start: Optional first day the request must reach.
        end: Optional last day the request must start by.

    Returns:
        Matching requests ordered by precedence, then start date.
    """
    result = [
        r
        for r in requests
        if r.employee_id == employee_id
        and r.status != AbsenceStatus.REJECTED
        and (start is None or r.end_date >= start)
        and (end is None or r.start_date <= end)
    ]
    result.sort(key=lambda r: (_STATUS_PRECEDENCE[r.status], r.start_date))
    return result


def resolve_day_absence(
    day: date,
    requests: list[AbsenceRequest],
    diagnostics: list[Diagnostic] | None = None,
) -> AbsenceRequest | None:
    """Pick the request that accounts for a day.

    ``requests`` must come from :func:`credited_requests` so approved
    requests are checked first. Two approved requests on the same day are a
    data-entry error; the earlier one is used and the overlap is reported.

    Args:
        day: The calendar date.
        requests: Candidate requests in precedence order.
        diagnostics: Optional list collecting overlap reports.

    Returns:
        The winning request, or None if the day is not covered.
    """
    covering = [r for r in requests if r.covers(day)]
    if not covering:
        return None

    winner = covering[0]
    if diagnostics is not None and winner.status == AbsenceStatus.APPROVED:
        approved = [r for r in covering if r.status == AbsenceStatus.APPROVED]
        if len(approved) > 1:
            message = f"{len(approved)} approved absence requests cover {day.isoformat()}"
            logger.warning(message)
            diagnostics.append(
                Diagnostic(
                    level="warning",
                    code=DiagnosticCode.OVERLAPPING_ABSENCE,
                    message=message,
                    date=day,
                    reference=str(winner.id) if winner.id else None,
                )
            )
    return winner


def _apportion_range(
    employee_id: uuid.UUID,
    requests: Iterable[AbsenceRequest],
    start: date,
    end: date,
    holidays: Iterable[Holiday | date],
    status: AbsenceStatus | None,
    diagnostics: list[Diagnostic] | None,
) -> AbsenceDays:
    """Walk the range day by day and credit each chargeable absence day."""
    result = AbsenceDays()
    if end < start:
        return result

    holiday_set = as_date_set(holidays)
    candidates = credited_requests(employee_id, requests, start, end)
    if not candidates:
        return result

    for day in iter_days(start, end):
        # Weekends and holidays are never spent as absence
        if not is_chargeable(day, holiday_set):
            continue
        absence = resolve_day_absence(day, candidates, diagnostics)
        if absence is None:
            continue
        if status is not None and absence.status != status:
            continue
        result.add(absence.type, absence.day_fraction)

    return result


def apportion(
    employee_id: uuid.UUID,
    requests: Iterable[AbsenceRequest],
    year: int,
    month: int,
    holidays: Iterable[Holiday | date],
    status: AbsenceStatus | None = None,
    up_to: date | None = None,
    from_date: date | None = None,
    diagnostics: list[Diagnostic] | None = None,
) -> AbsenceDays:
    """Count credited absence days per category within a month.

    Each chargeable day covered by a non-rejected request counts 1.0, or 0.5
    for a single-day half-day vacation. When pending and approved requests
    cover the same day the approved one decides the category and status.

    Args:
        employee_id: The employee.
        requests: Absence requests (other employees' are ignored).
        year: The year.
        month: The month (1-12).
        holidays: Holidays of ``year``.
        status: Only count days whose winning request has this status.
        up_to: Optional last day to count.
        from_date: Optional first day to count.
        diagnostics: Optional list collecting overlap reports.

    Returns:
        AbsenceDays for the month.
    """
    start, end = month_bounds(year, month)
    if from_date and from_date > start:
        start = from_date
    if up_to and up_to < end:
        end = up_to
    return _apportion_range(
        employee_id, requests, start, end, holidays, status, diagnostics
    )


def apportion_year(
    employee_id: uuid.UUID,
    requests: Iterable[AbsenceRequest],
    year: int,
    holidays: Iterable[Holiday | date],
    status: AbsenceStatus | None = None,
    up_to: date | None = None,
    from_date: date | None = None,
    diagnostics: list[Diagnostic] | None = None,
) -> AbsenceDays:
    """Count credited absence days per category within a whole year.

    Same rules as :func:`apportion`.
    """
    start, end = date(year, 1, 1), date(year, 12, 31)
    if from_date and from_date > start:
        start = from_date
    if up_to and up_to < end:
        end = up_to
    return _apportion_range(
        employee_id, requests, start, end, holidays, status, diagnostics
    )
