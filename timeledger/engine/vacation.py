# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Annual vacation entitlement tracking and year-end carryover."""

import logging
import uuid
from collections.abc import Callable, Iterable
from datetime import date, timedelta

from timeledger.engine.absences import apportion_year
from timeledger.engine.contracts import resolve
from timeledger.engine.dates import holiday_dates
from timeledger.exceptions import NoEffectiveContractError
from timeledger.models.enums import AbsenceStatus
from timeledger.schemas.absence import AbsenceRequest
from timeledger.schemas.accounting import Diagnostic, DiagnosticCode, VacationSummary
from timeledger.schemas.employee import Employee
from timeledger.schemas.holiday import HolidaysByYear

logger = logging.getLogger(__name__)

# Persists a computed carryover (employee id, year, days) and returns the
# value that ends up stored; an already frozen value is never replaced.
CarryoverFreezer = Callable[[uuid.UUID, int, float], float]

DEFAULT_REFERENCE = (7, 1)


def annual_entitlement(
    employee: Employee,
    year: int,
    reference: tuple[int, int] = DEFAULT_REFERENCE,
) -> float:
    """Return the vacation days of a year.

    One representative contract is used for the whole year: the one
    effective on the reference date (July 1 by default), even if the
    contract changed during the year. An employee hired after the
    reference date gets the entitlement of their first contract.

    Args:
        employee: The employee snapshot.
        year: The year.
        reference: (month, day) of the reference date.

    Returns:
        Annual entitlement in days.

    Raises:
        NoEffectiveContractError: If no contract starts in or before ``year``.
    """
    reference_date = date(year, *reference)
    try:
        return resolve(employee, reference_date).vacation_days
    except NoEffectiveContractError:
        versions = employee.contract_versions
        if versions and versions[0].valid_from.year == year:
            return versions[0].vacation_days
        raise


def required_holiday_years(employee: Employee, year: int) -> set[int]:
    """Return the years whose holidays a summary of ``year`` needs.

    The prior year is only needed while its carryover is not frozen yet.
    """
    years = {year}
    prior_year = year - 1
    if (
        employee.frozen_carryover(prior_year) is None
        and employee.first_work_day.year <= prior_year
    ):
        years.add(prior_year)
    return years


def compute_carryover(
    employee: Employee,
    year: int,
    absence_requests: Iterable[AbsenceRequest],
    holidays: set[date],
    reference: tuple[int, int] = DEFAULT_REFERENCE,
) -> float:
    """Return the unused vacation of ``year``: entitlement minus approved days taken.

    The entitlement is the one :func:`annual_entitlement` reports for the
    year, so a contract change after the reference date does not alter it.
    """
    taken = apportion_year(
        employee.id,
        absence_requests,
        year,
        holidays,
        status=AbsenceStatus.APPROVED,
    ).vacation_days
    return annual_entitlement(employee, year, reference) - taken


def vacation_summary(
    employee: Employee,
    year: int,
    absence_requests: Iterable[AbsenceRequest],
    holidays_by_year: HolidaysByYear,
    as_of: date | None = None,
    freeze_carryover: CarryoverFreezer | None = None,
    reference: tuple[int, int] = DEFAULT_REFERENCE,
) -> VacationSummary:
    """Summarize vacation entitlement and consumption of a year.

    The carryover from ``year - 1`` is used verbatim once frozen. Otherwise
    it is computed from the prior year's entitlement and approved vacation,
    and handed to ``freeze_carryover`` when not negative. Without a freezer
    the computed value is reported but not persisted.

    Args:
        employee: The employee snapshot.
        year: The year to summarize.
        absence_requests: Absence requests (other employees' are ignored).
        holidays_by_year: Pre-fetched holidays per year.
        as_of: Count approved vacation up to this date as taken; later
            approved vacation is reported as planned. The whole year when None.
        freeze_carryover: Callback persisting a computed carryover.
        reference: (month, day) picking the representative contract.

    Returns:
        The vacation summary.
    """
    requests = [r for r in absence_requests if r.employee_id == employee.id]
    diagnostics: list[Diagnostic] = []
    missing: list[int] = []

    try:
        entitlement = annual_entitlement(employee, year, reference)
    except NoEffectiveContractError as e:
        logger.warning(str(e))
        diagnostics.append(
            Diagnostic(level="error", code=DiagnosticCode.NO_EFFECTIVE_CONTRACT, message=str(e))
        )
        entitlement = 0.0

    carryover, carryover_frozen = _resolve_carryover(
        employee,
        year - 1,
        requests,
        holidays_by_year,
        freeze_carryover,
        reference,
        diagnostics,
        missing,
    )

    holidays = holiday_dates(holidays_by_year, year)
    if holidays is None:
        missing.append(year)
        diagnostics.append(_missing_year(year))
        return VacationSummary(
            employee_id=employee.id,
            year=year,
            as_of=as_of,
            annual_entitlement=entitlement,
            carryover=carryover,
            carryover_frozen=carryover_frozen,
            is_complete=False,
            missing_holiday_years=sorted(missing),
            diagnostics=diagnostics,
        )

    taken = apportion_year(
        employee.id,
        requests,
        year,
        holidays,
        status=AbsenceStatus.APPROVED,
        up_to=as_of,
        diagnostics=diagnostics,
    ).vacation_days
    planned = 0.0
    if as_of is not None:
        planned = apportion_year(
            employee.id,
            requests,
            year,
            holidays,
            status=AbsenceStatus.APPROVED,
            from_date=as_of + timedelta(days=1),
        ).vacation_days
    pending = apportion_year(
        employee.id, requests, year, holidays, status=AbsenceStatus.PENDING
    ).vacation_days

    return VacationSummary(
        employee_id=employee.id,
        year=year,
        as_of=as_of,
        annual_entitlement=entitlement,
        carryover=carryover,
        carryover_frozen=carryover_frozen,
        taken=taken,
        planned=planned,
        pending=pending,
        remaining=entitlement + carryover - taken,
        is_complete=not missing,
        missing_holiday_years=sorted(missing),
        diagnostics=diagnostics,
    )


def _resolve_carryover(
    employee: Employee,
    prior_year: int,
    requests: list[AbsenceRequest],
    holidays_by_year: HolidaysByYear,
    freeze_carryover: CarryoverFreezer | None,
    reference: tuple[int, int],
    diagnostics: list[Diagnostic],
    missing: list[int],
) -> tuple[float, bool]:
    """Return (carryover days, whether the value is frozen)."""
    frozen = employee.frozen_carryover(prior_year)
    if frozen is not None:
        return frozen, True

    if employee.first_work_day.year > prior_year:
        return 0.0, False

    holidays = holiday_dates(holidays_by_year, prior_year)
    if holidays is None:
        missing.append(prior_year)
        diagnostics.append(_missing_year(prior_year))
        return 0.0, False

    try:
        remaining = compute_carryover(employee, prior_year, requests, holidays, reference)
    except NoEffectiveContractError as e:
        logger.warning(str(e))
        diagnostics.append(
            Diagnostic(level="error", code=DiagnosticCode.NO_EFFECTIVE_CONTRACT, message=str(e))
        )
        return 0.0, False

    if remaining < 0:
        logger.info(
            f"Employee {employee.id} overdrew {prior_year} vacation by "
            f"{-remaining:g} days; no carryover frozen"
        )
        return 0.0, False

    if freeze_carryover is None:
        return remaining, False

    stored = freeze_carryover(employee.id, prior_year, remaining)
    logger.info(f"Froze {prior_year} carryover of {stored:g} days for employee {employee.id}")
    return stored, True


def _missing_year(year: int) -> Diagnostic:
    message = f"Holiday data for {year} has not been supplied"
    logger.warning(message)
    return Diagnostic(level="error", code=DiagnosticCode.MISSING_HOLIDAY_YEAR, message=message)
