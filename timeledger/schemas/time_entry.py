# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Time entry snapshot."""

import datetime
import uuid

from pydantic import BaseModel, ConfigDict, Field

from timeledger.models.enums import EntrySource


class TimeEntry(BaseModel):
    """A logged work period.

    ``end`` lies after ``start`` on the same or the following calendar day.
    """

    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: uuid.UUID | None = None
    employee_id: uuid.UUID
    start: datetime.datetime
    end: datetime.datetime
    break_minutes: int = Field(default=0, ge=0)
    source: EntrySource = EntrySource.MANUAL
    customer_id: str | None = None
    activity_id: str | None = None
    comment: str | None = None

    @property
    def gross_hours(self) -> float:
        """Hours between start and end, breaks included."""
        return (self.end - self.start).total_seconds() / 3600
