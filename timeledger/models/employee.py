# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Employee, contract history and frozen vacation carryover models."""

import uuid as uuid_lib
from datetime import date

from sqlalchemy import (
    JSON,
    Boolean,
    Date,
    Enum,
    Float,
    ForeignKey,
    Integer,
    String,
    UniqueConstraint,
    Uuid,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from timeledger.models.base import Base, TimestampMixin
from timeledger.models.enums import EmploymentType, TargetHoursModel


class Employee(Base, TimestampMixin):
    """An employee whose time is accounted."""

    __tablename__ = "employees"

    id: Mapped[uuid_lib.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid_lib.uuid4,
    )
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    first_work_day: Mapped[date] = mapped_column(Date, nullable=False)
    starting_balance_hours: Mapped[float] = mapped_column(
        Float, default=0.0, nullable=False
    )
    automatic_break_deduction: Mapped[bool] = mapped_column(
        Boolean, default=False, nullable=False
    )

    # Relationships
    contract_versions: Mapped[list["ContractVersion"]] = relationship(
        "ContractVersion",
        back_populates="employee",
        cascade="all, delete-orphan",
        order_by="ContractVersion.valid_from",
    )
    vacation_carryovers: Mapped[list["VacationCarryover"]] = relationship(
        "VacationCarryover",
        back_populates="employee",
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        """Return string representation."""
        return f"<Employee(id={self.id}, name={self.first_name} {self.last_name})>"


class ContractVersion(Base, TimestampMixin):
    """A contract snapshot, effective from ``valid_from`` until superseded."""

    __tablename__ = "contract_versions"

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
    valid_from: Mapped[date] = mapped_column(Date, nullable=False)
    employment_type: Mapped[EmploymentType] = mapped_column(
        Enum(EmploymentType),
        default=EmploymentType.FULL_TIME,
        nullable=False,
    )
    target_hours_model: Mapped[TargetHoursModel] = mapped_column(
        Enum(TargetHoursModel),
        default=TargetHoursModel.MONTHLY,
        nullable=False,
    )
    monthly_target_hours: Mapped[float] = mapped_column(
        Float, default=0.0, nullable=False
    )
    daily_target_hours: Mapped[float] = mapped_column(
        Float, default=0.0, nullable=False
    )
    # {"mon": 8.0, "tue": 8.0, ...}; only read for weekly contracts
    weekly_schedule: Mapped[dict | None] = mapped_column(JSON, nullable=True)
    vacation_days: Mapped[float] = mapped_column(Float, default=0.0, nullable=False)

    # Address (not used for accounting)
    street: Mapped[str | None] = mapped_column(String(200), nullable=True)
    house_number: Mapped[str | None] = mapped_column(String(20), nullable=True)
    postal_code: Mapped[str | None] = mapped_column(String(20), nullable=True)
    city: Mapped[str | None] = mapped_column(String(100), nullable=True)

    employee: Mapped["Employee"] = relationship(
        "Employee", back_populates="contract_versions"
    )

    __table_args__ = (
        UniqueConstraint("employee_id", "valid_from", name="uq_contract_valid_from"),
    )

    def __repr__(self) -> str:
        """Return string representation."""
        return (
            f"<ContractVersion(employee_id={self.employee_id}, "
            f"valid_from={self.valid_from})>"
        )


class VacationCarryover(Base, TimestampMixin):
    """Unused vacation of a year, frozen once and never recomputed."""

    __tablename__ = "vacation_carryovers"

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
    year: Mapped[int] = mapped_column(Integer, nullable=False)
    days: Mapped[float] = mapped_column(Float, nullable=False)

    employee: Mapped["Employee"] = relationship(
        "Employee", back_populates="vacation_carryovers"
    )

    __table_args__ = (
        UniqueConstraint("employee_id", "year", name="uq_carryover_employee_year"),
    )

    def __repr__(self) -> str:
        """Return string representation."""
        return f"<VacationCarryover(employee_id={self.employee_id}, year={self.year})>"
