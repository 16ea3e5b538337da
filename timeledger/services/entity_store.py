# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Entity store: immutable snapshots of stored records and the carryover freeze."""

import logging
import uuid
from datetime import date, datetime, time, timedelta
from functools import partial

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from timeledger import models, schemas
from timeledger.engine.vacation import CarryoverFreezer
from timeledger.exceptions import EmployeeNotFoundError

logger = logging.getLogger(__name__)


def get_employee_record(db: Session, employee_id: uuid.UUID) -> models.Employee | None:
    """Get a stored employee by ID."""
    return db.query(models.Employee).filter(models.Employee.id == employee_id).first()


def load_employee(db: Session, employee_id: uuid.UUID) -> schemas.Employee:
    """Load an employee snapshot with contract history and frozen carryovers.

    Raises:
        EmployeeNotFoundError: If no such employee exists.
    """
    record = get_employee_record(db, employee_id)
    if record is None:
        raise EmployeeNotFoundError(employee_id)

    return schemas.Employee(
        id=record.id,
        first_name=record.first_name,
        last_name=record.last_name,
        first_work_day=record.first_work_day,
        contract_versions=tuple(
            schemas.ContractVersion.model_validate(c) for c in record.contract_versions
        ),
        vacation_carryover={c.year: c.days for c in record.vacation_carryovers},
        starting_balance_hours=record.starting_balance_hours,
        automatic_break_deduction=record.automatic_break_deduction,
    )


def load_time_entries(
    db: Session,
    employee_id: uuid.UUID,
    start: date | None = None,
    end: date | None = None,
) -> list[schemas.TimeEntry]:
    """Load an employee's time entries starting between ``start`` and ``end`` inclusive."""
    query = db.query(models.TimeEntry).filter(models.TimeEntry.employee_id == employee_id)
    if start is not None:
        query = query.filter(models.TimeEntry.start >= datetime.combine(start, time.min))
    if end is not None:
        query = query.filter(
            models.TimeEntry.start < datetime.combine(end + timedelta(days=1), time.min)
        )
    rows = query.order_by(models.TimeEntry.start).all()
    return [schemas.TimeEntry.model_validate(r) for r in rows]


def load_absence_requests(
    db: Session, employee_id: uuid.UUID
) -> list[schemas.AbsenceRequest]:
    """Load all absence requests of an employee, rejected ones included."""
    rows = (
        db.query(models.AbsenceRequest)
        .filter(models.AbsenceRequest.employee_id == employee_id)
        .order_by(models.AbsenceRequest.start_date)
        .all()
    )
    return [schemas.AbsenceRequest.model_validate(r) for r in rows]


def load_adjustments(
    db: Session, employee_id: uuid.UUID, end: date | None = None
) -> list[schemas.TimeBalanceAdjustment]:
    """Load an employee's balance adjustments dated up to ``end``."""
    query = db.query(models.TimeBalanceAdjustment).filter(
        models.TimeBalanceAdjustment.employee_id == employee_id
    )
    if end is not None:
        query = query.filter(models.TimeBalanceAdjustment.date <= end)
    rows = query.order_by(models.TimeBalanceAdjustment.date).all()
    return [schemas.TimeBalanceAdjustment.model_validate(r) for r in rows]


def append_contract_version(
    db: Session, employee_id: uuid.UUID, contract: schemas.ContractVersion
) -> models.ContractVersion:
    """Append a new contract version to an employee's history.

    Past versions are never changed; a new version must start after the
    latest existing one.

    Raises:
        EmployeeNotFoundError: If no such employee exists.
        ValueError: If the version does not start after the latest one.
    """
    record = get_employee_record(db, employee_id)
    if record is None:
        raise EmployeeNotFoundError(employee_id)

    if record.contract_versions:
        latest = record.contract_versions[-1].valid_from
        if contract.valid_from <= latest:
            raise ValueError(
                f"New contract must start after {latest.isoformat()}, "
                f"got {contract.valid_from.isoformat()}"
            )

    schedule = None
    if contract.weekly_schedule is not None:
        schedule = {day.value: hours for day, hours in contract.weekly_schedule.items()}

    version = models.ContractVersion(
        employee_id=employee_id,
        **contract.model_dump(exclude={"weekly_schedule"}),
        weekly_schedule=schedule,
    )
    db.add(version)
    db.commit()
    db.refresh(version)
    return version


def get_frozen_carryover(
    db: Session, employee_id: uuid.UUID, year: int
) -> models.VacationCarryover | None:
    """Get the frozen carryover of a year, if any."""
    return (
        db.query(models.VacationCarryover)
        .filter(
            models.VacationCarryover.employee_id == employee_id,
            models.VacationCarryover.year == year,
        )
        .first()
    )


def freeze_carryover(
    db: Session, employee_id: uuid.UUID, year: int, days: float
) -> float:
    """Persist a year's carryover unless one is already frozen.

    Writing is write-once: an existing value is kept and returned, also
    when a concurrent writer wins the insert race.

    Args:
        db: Database session.
        employee_id: The employee ID.
        year: The year whose unused vacation is carried over.
        days: The computed carryover.

    Returns:
        The carryover that is stored for the year.
    """
    existing = get_frozen_carryover(db, employee_id, year)
    if existing is not None:
        return existing.days

    db.add(models.VacationCarryover(employee_id=employee_id, year=year, days=days))
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        existing = get_frozen_carryover(db, employee_id, year)
        if existing is None:
            raise
        logger.info(
            f"Carryover {year} for employee {employee_id} was frozen concurrently; "
            f"keeping {existing.days:g} days"
        )
        return existing.days

    return days


def carryover_freezer(db: Session) -> CarryoverFreezer:
    """Bind :func:`freeze_carryover` to a session for the vacation tracker."""
    return partial(freeze_carryover, db)
