# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Manual time balance adjustment model."""

import uuid as uuid_lib
from datetime import date

from sqlalchemy import Date, Enum, Float, ForeignKey, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from timeledger.models.base import Base, TimestampMixin
from timeledger.models.enums import AdjustmentType


class TimeBalanceAdjustment(Base, TimestampMixin):
    """Signed hour correction or payout booked on a date."""

    __tablename__ = "time_balance_adjustments"

    id: Mapped[uuid_lib.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid_lib.uuid4,
    )
    employee_id: Mapped[uuid_lib.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("employees.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    date: Mapped[date] = mapped_column(Date, nullable=False)
    type: Mapped[AdjustmentType] = mapped_column(
        Enum(AdjustmentType),
        default=AdjustmentType.CORRECTION,
        nullable=False,
    )
    hours: Mapped[float] = mapped_column(Float, nullable=False)
    reason: Mapped[str | None] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        """Return string representation."""
        return f"<TimeBalanceAdjustment(id={self.id}, date={self.date}, hours={self.hours})>"
