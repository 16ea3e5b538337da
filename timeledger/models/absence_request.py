# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Absence request model."""

import uuid as uuid_lib
from datetime import date

from sqlalchemy import Date, Enum, ForeignKey, Index, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from timeledger.models.base import Base, TimestampMixin
from timeledger.models.enums import AbsenceStatus, AbsenceType, DayPortion


class AbsenceRequest(Base, TimestampMixin):
    """Vacation, sick leave or time off over an inclusive date range."""

    __tablename__ = "absence_requests"

    id: Mapped[uuid_lib.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid_lib.uuid4,
    )
    employee_id: Mapped[uuid_lib.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("employees.id", ondelete="CASCADE"),
        nullable=False,
    )
    type: Mapped[AbsenceType] = mapped_column(Enum(AbsenceType), nullable=False)
    status: Mapped[AbsenceStatus] = mapped_column(
        Enum(AbsenceStatus),
        default=AbsenceStatus.PENDING,
        nullable=False,
    )
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    end_date: Mapped[date] = mapped_column(Date, nullable=False)
    day_portion: Mapped[DayPortion | None] = mapped_column(
        Enum(DayPortion), nullable=True
    )
    admin_comment: Mapped[str | None] = mapped_column(Text, nullable=True)

    __table_args__ = (
        Index("idx_absence_employee_range", "employee_id", "start_date", "end_date"),
    )

    def __repr__(self) -> str:
        """Return string representation."""
        return (
            f"<AbsenceRequest(id={self.id}, type={self.type}, "
            f"{self.start_date} to {self.end_date}, status={self.status})>"
        )
