# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Time balance adjustment snapshot."""

import datetime
import uuid

from pydantic import BaseModel, ConfigDict

from timeledger.models.enums import AdjustmentType


class TimeBalanceAdjustment(BaseModel):
    """Signed manual correction or payout, booked in the month of ``date``."""

    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: uuid.UUID | None = None
    employee_id: uuid.UUID
    date: datetime.date
    hours: float
    type: AdjustmentType = AdjustmentType.CORRECTION
    reason: str | None = None
