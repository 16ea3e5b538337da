# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Employee and contract snapshots consumed by the accounting engine."""

import datetime
import uuid

from pydantic import BaseModel, ConfigDict, Field, field_validator

from timeledger.models.enums import EmploymentType, TargetHoursModel, Weekday


class ContractVersion(BaseModel):
    """One version of an employee's working-hours agreement.

    Effective from ``valid_from`` (inclusive) until the next version starts.
    """

    model_config = ConfigDict(from_attributes=True, frozen=True)

    valid_from: datetime.date
    employment_type: EmploymentType = EmploymentType.FULL_TIME
    target_hours_model: TargetHoursModel = TargetHoursModel.MONTHLY
    monthly_target_hours: float = 0.0
    daily_target_hours: float = Field(default=0.0, ge=0)
    weekly_schedule: dict[Weekday, float] | None = None
    vacation_days: float = Field(default=0.0, ge=0)

    street: str | None = None
    house_number: str | None = None
    postal_code: str | None = None
    city: str | None = None

    @field_validator("weekly_schedule")
    @classmethod
    def validate_schedule_hours(
        cls, v: dict[Weekday, float] | None
    ) -> dict[Weekday, float] | None:
        """Reject negative scheduled hours."""
        if v is None:
            return v
        for day, hours in v.items():
            if hours < 0:
                raise ValueError(f"Scheduled hours for {day.value} must not be negative")
        return v


class Employee(BaseModel):
    """Employee snapshot with its full contract history."""

    model_config = ConfigDict(frozen=True)

    id: uuid.UUID
    first_name: str = ""
    last_name: str = ""
    first_work_day: datetime.date
    contract_versions: tuple[ContractVersion, ...] = ()
    # year -> frozen carryover days; entries are written once
    vacation_carryover: dict[int, float] = Field(default_factory=dict)
    starting_balance_hours: float = 0.0
    automatic_break_deduction: bool = False

    @field_validator("contract_versions")
    @classmethod
    def sort_contract_versions(
        cls, v: tuple[ContractVersion, ...]
    ) -> tuple[ContractVersion, ...]:
        """Keep versions ordered ascending by ``valid_from``."""
        return tuple(sorted(v, key=lambda c: c.valid_from))

    def frozen_carryover(self, year: int) -> float | None:
        """Return the frozen carryover of ``year``, or None if not frozen yet."""
        return self.vacation_carryover.get(year)

    def with_frozen_carryover(self, year: int, days: float) -> "Employee":
        """Return a copy with the carryover of ``year`` frozen.

        A carryover that is already frozen is never replaced; the same
        instance is returned in that case.
        """
        if year in self.vacation_carryover:
            return self
        carryover = {**self.vacation_carryover, year: days}
        return self.model_copy(update={"vacation_carryover": carryover})
