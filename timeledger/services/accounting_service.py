# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Accounting service: loads snapshots, fetches holidays and runs the engine."""

import logging
import uuid
from datetime import date

from sqlalchemy.orm import Session

from timeledger.config import settings
from timeledger.engine import ledger, vacation
from timeledger.engine.dates import month_bounds
from timeledger.schemas.accounting import MonthlyBreakdown, VacationSummary
from timeledger.services import entity_store
from timeledger.services.holiday_service import HolidayService

logger = logging.getLogger(__name__)


def _entitlement_reference() -> tuple[int, int]:
    return settings.entitlement_reference_month, settings.entitlement_reference_day


def build_ledger_session(
    db: Session,
    employee_id: uuid.UUID,
    year: int,
    month: int,
    holiday_service: HolidayService | None = None,
) -> ledger.LedgerSession:
    """Prepare a ledger session holding everything up to the end of (year, month).

    Raises:
        EmployeeNotFoundError: If the employee does not exist.
        MissingHolidayYearError: If the holiday provider cannot supply a year.
    """
    holiday_service = holiday_service or HolidayService()
    employee = entity_store.load_employee(db, employee_id)
    _, last_day = month_bounds(year, month)

    years = ledger.required_holiday_years(employee, year, month)
    holidays_by_year = holiday_service.holidays_by_year(years)

    return ledger.LedgerSession(
        employee,
        entity_store.load_time_entries(db, employee_id, end=last_day),
        entity_store.load_absence_requests(db, employee_id),
        entity_store.load_adjustments(db, employee_id, end=last_day),
        holidays_by_year,
        time_off_credits_hours=settings.time_off_credits_hours,
    )


def get_monthly_breakdown(
    db: Session,
    employee_id: uuid.UUID,
    year: int,
    month: int,
    holiday_service: HolidayService | None = None,
) -> MonthlyBreakdown:
    """Get the accounting breakdown of one month."""
    session = build_ledger_session(db, employee_id, year, month, holiday_service)
    return session.breakdown(year, month)


def get_year_breakdowns(
    db: Session,
    employee_id: uuid.UUID,
    year: int,
    holiday_service: HolidayService | None = None,
) -> list[MonthlyBreakdown]:
    """Get the breakdowns of every employed month of a year."""
    session = build_ledger_session(db, employee_id, year, 12, holiday_service)
    return session.year_breakdowns(year)


def get_vacation_summary(
    db: Session,
    employee_id: uuid.UUID,
    year: int,
    as_of: date | None = None,
    holiday_service: HolidayService | None = None,
) -> VacationSummary:
    """Get the vacation summary of a year, freezing the prior year's carryover if due.

    Raises:
        EmployeeNotFoundError: If the employee does not exist.
        MissingHolidayYearError: If the holiday provider cannot supply a year.
    """
    holiday_service = holiday_service or HolidayService()
    employee = entity_store.load_employee(db, employee_id)
    years = vacation.required_holiday_years(employee, year)
    holidays_by_year = holiday_service.holidays_by_year(years)

    summary = vacation.vacation_summary(
        employee,
        year,
        entity_store.load_absence_requests(db, employee_id),
        holidays_by_year,
        as_of=as_of,
        freeze_carryover=entity_store.carryover_freezer(db),
        reference=_entitlement_reference(),
    )
    if not summary.is_complete:
        logger.warning(
            f"Vacation summary {year} for employee {employee_id} is incomplete: "
            f"missing holidays for {summary.missing_holiday_years}"
        )
    return summary
