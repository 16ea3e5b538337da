# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Read-only accounting endpoints: monthly balances and vacation summaries."""

import uuid
from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Path, Query, status
from sqlalchemy.orm import Session

from timeledger.api.deps import get_db, get_holiday_service
from timeledger.exceptions import EmployeeNotFoundError, MissingHolidayYearError
from timeledger.schemas.accounting import MonthlyBreakdown, VacationSummary
from timeledger.services import accounting_service
from timeledger.services.holiday_service import HolidayService

router = APIRouter()


def _not_found(e: EmployeeNotFoundError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


def _unprocessable(e: MissingHolidayYearError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))


@router.get(
    "/{employee_id}/balance/{year}/{month}",
    response_model=MonthlyBreakdown,
)
def get_monthly_balance(
    employee_id: uuid.UUID,
    year: int = Path(..., ge=1900, le=2999),
    month: int = Path(..., ge=1, le=12),
    db: Session = Depends(get_db),
    holiday_service: HolidayService = Depends(get_holiday_service),
) -> MonthlyBreakdown:
    """Get the accounting breakdown of one month."""
    try:
        return accounting_service.get_monthly_breakdown(
            db, employee_id, year, month, holiday_service
        )
    except EmployeeNotFoundError as e:
        raise _not_found(e) from e
    except MissingHolidayYearError as e:
        raise _unprocessable(e) from e


@router.get(
    "/{employee_id}/balance/{year}",
    response_model=list[MonthlyBreakdown],
)
def get_yearly_balance(
    employee_id: uuid.UUID,
    year: int = Path(..., ge=1900, le=2999),
    db: Session = Depends(get_db),
    holiday_service: HolidayService = Depends(get_holiday_service),
) -> list[MonthlyBreakdown]:
    """Get the breakdowns of every employed month of a year."""
    try:
        return accounting_service.get_year_breakdowns(
            db, employee_id, year, holiday_service
        )
    except EmployeeNotFoundError as e:
        raise _not_found(e) from e
    except MissingHolidayYearError as e:
        raise _unprocessable(e) from e


@router.get(
    "/{employee_id}/vacation/{year}",
    response_model=VacationSummary,
)
def get_vacation(
    employee_id: uuid.UUID,
    year: int = Path(..., ge=1900, le=2999),
    as_of: date | None = Query(None, description="Count vacation up to this date"),
    db: Session = Depends(get_db),
    holiday_service: HolidayService = Depends(get_holiday_service),
) -> VacationSummary:
    """Get the vacation summary of a year."""
    try:
        return accounting_service.get_vacation_summary(
            db, employee_id, year, as_of, holiday_service
        )
    except EmployeeNotFoundError as e:
        raise _not_found(e) from e
    except MissingHolidayYearError as e:
        raise _unprocessable(e) from e
