# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Absence request snapshot."""

import datetime
import uuid

from pydantic import BaseModel, ConfigDict, model_validator

from timeledger.models.enums import AbsenceStatus, AbsenceType, DayPortion


class AbsenceRequest(BaseModel):
    """Vacation, sick leave or time off over an inclusive date range."""

    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: uuid.UUID | None = None
    employee_id: uuid.UUID
    type: AbsenceType
    status: AbsenceStatus = AbsenceStatus.PENDING
    start_date: datetime.date
    end_date: datetime.date
    day_portion: DayPortion | None = None
    admin_comment: str | None = None

    @model_validator(mode="after")
    def validate_range(self) -> "AbsenceRequest":
        """Ensure the range is not reversed."""
        if self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self

    @property
    def is_half_day(self) -> bool:
        """Single-day vacation covering only the morning or afternoon."""
        return (
            self.type == AbsenceType.VACATION
            and self.start_date == self.end_date
            and self.day_portion is not None
            and self.day_portion != DayPortion.FULL
        )

    @property
    def day_fraction(self) -> float:
        """Share of a day this request consumes on each covered day."""
        return 0.5 if self.is_half_day else 1.0

    def covers(self, day: datetime.date) -> bool:
        """Check whether ``day`` lies within the request's range."""
        return self.start_date <= day <= self.end_date
