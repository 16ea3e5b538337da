# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Time entry model."""

import uuid as uuid_lib
from datetime import datetime

from sqlalchemy import DateTime, Enum, ForeignKey, Index, Integer, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from timeledger.models.base import Base, TimestampMixin
from timeledger.models.enums import EntrySource


class TimeEntry(Base, TimestampMixin):
    """A single logged work period."""

    __tablename__ = "time_entries"

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
    start: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    end: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    break_minutes: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    source: Mapped[EntrySource] = mapped_column(
        Enum(EntrySource),
        default=EntrySource.MANUAL,
        nullable=False,
    )

    # Category tags (not used for accounting)
    customer_id: Mapped[str | None] = mapped_column(String(100), nullable=True)
    activity_id: Mapped[str | None] = mapped_column(String(100), nullable=True)
    comment: Mapped[str | None] = mapped_column(Text, nullable=True)

    __table_args__ = (Index("idx_time_entry_employee_start", "employee_id", "start"),)

    def __repr__(self) -> str:
        """Return string representation."""
        return f"<TimeEntry(id={self.id}, start={self.start}, end={self.end})>"
