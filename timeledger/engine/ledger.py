# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Monthly balance ledger.

Each month's end-of-month balance is the previous month's balance plus the
month's own balance (credited minus target). The chain starts in the
employee's first work month with the opening balance and is evaluated as an
iterative fold; results are cached per month within a session.
"""

import logging
from collections import defaultdict
from collections.abc import Iterable
from datetime import timedelta

from timeledger.engine.absences import apportion, credited_requests, resolve_day_absence
from timeledger.engine.contracts import resolve
from timeledger.engine.dates import (
    holiday_dates,
    is_weekend,
    iter_days,
    iter_months,
    month_bounds,
    next_month,
    previous_month,
)
from timeledger.engine.target_hours import daily_target
from timeledger.engine.worked_time import apply_automatic_breaks, worked_hours
from timeledger.exceptions import NoEffectiveContractError
from timeledger.models.enums import AbsenceStatus, AbsenceType
from timeledger.schemas.absence import AbsenceRequest
from timeledger.schemas.accounting import Diagnostic, DiagnosticCode, MonthlyBreakdown
from timeledger.schemas.adjustment import TimeBalanceAdjustment
from timeledger.schemas.employee import Employee
from timeledger.schemas.holiday import HolidaysByYear
from timeledger.schemas.time_entry import TimeEntry

logger = logging.getLogger(__name__)

YearMonth = tuple[int, int]


def first_work_month(employee: Employee) -> YearMonth:
    """Return the (year, month) of the employee's first work day."""
    return employee.first_work_day.year, employee.first_work_day.month


def required_holiday_years(employee: Employee, year: int, month: int) -> set[int]:
    """Return the years whose holidays a breakdown of (year, month) needs.

    The balance chain walks every month from the first work month, so every
    year from the first work year up to ``year`` is required.
    """
    start_year, start_month = first_work_month(employee)
    if (year, month) < (start_year, start_month):
        return set()
    return set(range(start_year, year + 1))


class LedgerSession:
    """Evaluates monthly breakdowns of one employee over fixed inputs.

    Inputs are treated as immutable snapshots; breakdowns computed once are
    reused for later queries in the same session.
    """

    def __init__(
        self,
        employee: Employee,
        time_entries: Iterable[TimeEntry],
        absence_requests: Iterable[AbsenceRequest],
        adjustments: Iterable[TimeBalanceAdjustment],
        holidays_by_year: HolidaysByYear,
        time_off_credits_hours: bool = False,
    ) -> None:
        """Initialize the session.

        Args:
            employee: The employee snapshot.
            time_entries: Time entries (other employees' are ignored). The
                statutory break is applied when the employee opted in.
            absence_requests: Absence requests (other employees' are ignored).
            adjustments: Balance adjustments (other employees' are ignored).
            holidays_by_year: Pre-fetched holidays per year.
            time_off_credits_hours: Whether approved time off credits hours.
        """
        self.employee = employee
        self.holidays_by_year = holidays_by_year
        self.time_off_credits_hours = time_off_credits_hours

        self._entries: dict[YearMonth, list[TimeEntry]] = defaultdict(list)
        for entry in time_entries:
            if entry.employee_id == employee.id:
                entry = apply_automatic_breaks(entry, employee)
                self._entries[(entry.start.year, entry.start.month)].append(entry)

        self._adjustments: dict[YearMonth, float] = defaultdict(float)
        for adjustment in adjustments:
            if adjustment.employee_id == employee.id:
                key = (adjustment.date.year, adjustment.date.month)
                self._adjustments[key] += adjustment.hours

        self._absences = credited_requests(employee.id, absence_requests)
        self._holiday_sets: dict[int, set] = {}
        self._cache: dict[YearMonth, MonthlyBreakdown] = {}

    def breakdown(self, year: int, month: int) -> MonthlyBreakdown:
        """Return the breakdown of a month, folding forward from the last known month.

        Args:
            year: The year.
            month: The month (1-12).

        Returns:
            The month's breakdown. Months before the first work month are
            zeroed; a missing holiday year yields a zeroed, incomplete result.
        """
        target = (year, month)
        if target in self._cache:
            return self._cache[target]

        start = first_work_month(self.employee)
        if target < start:
            return MonthlyBreakdown(employee_id=self.employee.id, year=year, month=month)

        missing = sorted(
            y
            for y in required_holiday_years(self.employee, year, month)
            if y not in self.holidays_by_year
        )
        if missing:
            return self._incomplete(year, month, missing)

        # Resume from the latest cached month before the target
        resume = start
        previous_balance = self.employee.starting_balance_hours
        cached_before = [key for key in self._cache if start <= key < target]
        if cached_before:
            latest = max(cached_before)
            previous_balance = self._cache[latest].end_of_month_balance
            resume = next_month(*latest)

        result = None
        for key in iter_months(resume, target):
            result = self._compute_month(key[0], key[1], previous_balance)
            self._cache[key] = result
            previous_balance = result.end_of_month_balance
            logger.debug(
                f"Employee {self.employee.id} {key[0]}-{key[1]:02d}: "
                f"balance {result.end_of_month_balance:.2f}h"
            )
        return result

    def year_breakdowns(self, year: int) -> list[MonthlyBreakdown]:
        """Return the breakdowns of every employed month of a year."""
        start = first_work_month(self.employee)
        months = [m for m in range(1, 13) if (year, m) >= start]
        if not months:
            return []
        # One fold up to December fills the cache for the whole year
        self.breakdown(year, months[-1])
        return [self.breakdown(year, m) for m in months]

    def previous_balance(self, year: int, month: int) -> float:
        """Return the balance carried into a month."""
        if (year, month) <= first_work_month(self.employee):
            return self.employee.starting_balance_hours
        return self.breakdown(*previous_month(year, month)).end_of_month_balance

    def _holidays(self, year: int) -> set:
        if year not in self._holiday_sets:
            self._holiday_sets[year] = holiday_dates(self.holidays_by_year, year) or set()
        return self._holiday_sets[year]

    def _incomplete(self, year: int, month: int, missing: list[int]) -> MonthlyBreakdown:
        message = (
            f"Holiday data missing for year(s) {', '.join(map(str, missing))}; "
            f"balance of {year}-{month:02d} not computed"
        )
        logger.warning(message)
        return MonthlyBreakdown(
            employee_id=self.employee.id,
            year=year,
            month=month,
            is_complete=False,
            missing_holiday_years=missing,
            diagnostics=[
                Diagnostic(
                    level="error",
                    code=DiagnosticCode.MISSING_HOLIDAY_YEAR,
                    message=message,
                )
            ],
        )

    def _compute_month(
        self, year: int, month: int, previous_balance: float
    ) -> MonthlyBreakdown:
        """Compute a single month given the balance carried into it."""
        diagnostics: list[Diagnostic] = []
        holidays = self._holidays(year)
        month_start, month_end = month_bounds(year, month)

        target_hours = 0.0
        holiday_hours = 0.0
        credits = dict.fromkeys(AbsenceType, 0.0)

        for day in iter_days(month_start, month_end):
            if day < self.employee.first_work_day or is_weekend(day):
                continue
            try:
                contract = resolve(self.employee, day)
            except NoEffectiveContractError as e:
                logger.warning(str(e))
                diagnostics.append(
                    Diagnostic(
                        level="error",
                        code=DiagnosticCode.NO_EFFECTIVE_CONTRACT,
                        message=str(e),
                        date=day,
                    )
                )
                continue

            scheduled = daily_target(contract, day)
            if day in holidays:
                holiday_hours += scheduled
                continue
            target_hours += scheduled

            absence = resolve_day_absence(day, self._absences, diagnostics)
            if absence is None or absence.status != AbsenceStatus.APPROVED:
                continue
            if absence.type == AbsenceType.TIME_OFF and not self.time_off_credits_hours:
                continue
            credits[absence.type] += scheduled * absence.day_fraction

        worked = worked_hours(
            self._entries.get((year, month), []),
            month_start,
            month_end + timedelta(days=1),
            diagnostics=diagnostics,
        )
        days = apportion(
            self.employee.id,
            self._absences,
            year,
            month,
            holidays,
            status=AbsenceStatus.APPROVED,
            from_date=self.employee.first_work_day,
        )

        absence_holiday_credit = sum(credits.values())
        adjustments = self._adjustments.get((year, month), 0.0)
        total_credited = worked + absence_holiday_credit + adjustments
        monthly_balance = total_credited - target_hours

        return MonthlyBreakdown(
            employee_id=self.employee.id,
            year=year,
            month=month,
            worked_hours=worked,
            vacation_credit_hours=credits[AbsenceType.VACATION],
            sick_leave_credit_hours=credits[AbsenceType.SICK_LEAVE],
            time_off_credit_hours=credits[AbsenceType.TIME_OFF],
            absence_holiday_credit=absence_holiday_credit,
            adjustments=adjustments,
            total_credited=total_credited,
            target_hours=target_hours,
            monthly_balance=monthly_balance,
            previous_balance=previous_balance,
            end_of_month_balance=previous_balance + monthly_balance,
            holiday_hours=holiday_hours,
            vacation_days=days.vacation_days,
            sick_days=days.sick_days,
            time_off_days=days.time_off_days,
            diagnostics=diagnostics,
        )


def monthly_breakdown(
    employee: Employee,
    year: int,
    month: int,
    time_entries: Iterable[TimeEntry],
    absence_requests: Iterable[AbsenceRequest],
    adjustments: Iterable[TimeBalanceAdjustment],
    holidays_by_year: HolidaysByYear,
    time_off_credits_hours: bool = False,
) -> MonthlyBreakdown:
    """Compute one month's accounting breakdown.

    Convenience wrapper around :class:`LedgerSession` for a single query;
    use a session directly when several months are needed.
    """
    session = LedgerSession(
        employee,
        time_entries,
        absence_requests,
        adjustments,
        holidays_by_year,
        time_off_credits_hours=time_off_credits_hours,
    )
    return session.breakdown(year, month)
