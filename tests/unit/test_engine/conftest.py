# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Snapshot builders for engine tests."""

import uuid
from datetime import date, datetime, timedelta

import pytest

from timeledger.models.enums import AbsenceStatus, AbsenceType, TargetHoursModel
from timeledger.schemas import (
    AbsenceRequest,
    ContractVersion,
    Employee,
    TimeBalanceAdjustment,
    TimeEntry,
)

EMPLOYEE_ID = uuid.UUID("00000000-0000-0000-0000-000000000001")


def _flat_contract(
    valid_from: date, daily: float = 8.0, vacation_days: float = 30.0
) -> ContractVersion:
    return ContractVersion(
        valid_from=valid_from,
        target_hours_model=TargetHoursModel.MONTHLY,
        daily_target_hours=daily,
        vacation_days=vacation_days,
    )


def _weekly_contract(
    valid_from: date, schedule: dict, vacation_days: float = 30.0
) -> ContractVersion:
    return ContractVersion(
        valid_from=valid_from,
        target_hours_model=TargetHoursModel.WEEKLY,
        weekly_schedule=schedule,
        vacation_days=vacation_days,
    )


@pytest.fixture
def make_contract():
    """Build a contract version: flat daily hours, or weekly when a schedule is given."""

    def _make(
        valid_from: date,
        daily: float = 8.0,
        schedule: dict | None = None,
        vacation_days: float = 30.0,
    ) -> ContractVersion:
        if schedule is not None:
            return _weekly_contract(valid_from, schedule, vacation_days)
        return _flat_contract(valid_from, daily, vacation_days)

    return _make


@pytest.fixture
def make_employee():
    """Build an employee snapshot; defaults to 8h/day from the first work day."""

    def _make(
        first_work_day: date = date(2025, 1, 1),
        contracts: list[ContractVersion] | None = None,
        **kwargs,
    ) -> Employee:
        if contracts is None:
            contracts = [_flat_contract(first_work_day)]
        return Employee(
            id=EMPLOYEE_ID,
            first_work_day=first_work_day,
            contract_versions=tuple(contracts),
            **kwargs,
        )

    return _make


@pytest.fixture
def make_absence():
    """Build an absence request for the test employee."""

    def _make(
        start: date,
        end: date | None = None,
        type: AbsenceType = AbsenceType.VACATION,
        status: AbsenceStatus = AbsenceStatus.APPROVED,
        **kwargs,
    ) -> AbsenceRequest:
        return AbsenceRequest(
            id=uuid.uuid4(),
            employee_id=kwargs.pop("employee_id", EMPLOYEE_ID),
            type=type,
            status=status,
            start_date=start,
            end_date=end or start,
            **kwargs,
        )

    return _make


@pytest.fixture
def make_entry():
    """Build a time entry starting at ``start`` and lasting ``hours``."""

    def _make(start: datetime, hours: float, break_minutes: int = 0, **kwargs) -> TimeEntry:
        return TimeEntry(
            id=uuid.uuid4(),
            employee_id=kwargs.pop("employee_id", EMPLOYEE_ID),
            start=start,
            end=start + timedelta(hours=hours),
            break_minutes=break_minutes,
            **kwargs,
        )

    return _make


@pytest.fixture
def make_adjustment():
    """Build a balance adjustment for the test employee."""

    def _make(on: date, hours: float) -> TimeBalanceAdjustment:
        return TimeBalanceAdjustment(employee_id=EMPLOYEE_ID, date=on, hours=hours)

    return _make


@pytest.fixture
def workday_entries(make_entry):
    """8 net hours (08:00-16:30, 30 min break) on every weekday of a month."""

    def _make(year: int, month: int, skip: set[date] | None = None) -> list[TimeEntry]:
        skip = skip or set()
        entries = []
        day = date(year, month, 1)
        while day.month == month:
            if day.weekday() < 5 and day not in skip:
                entries.append(
                    make_entry(datetime(day.year, day.month, day.day, 8, 0), 8.5, 30)
                )
            day += timedelta(days=1)
        return entries

    return _make


@pytest.fixture
def employee_id() -> uuid.UUID:
    """ID shared by every snapshot the builders create."""
    return EMPLOYEE_ID
