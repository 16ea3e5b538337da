# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Exceptions raised by the accounting engine and its services."""

import uuid
from datetime import date


class TimeLedgerError(Exception):
    """Base class for all accounting errors."""


class NoEffectiveContractError(TimeLedgerError):
    """A date precedes every contract version of an employee."""

    def __init__(self, employee_id: uuid.UUID, on_date: date) -> None:
        self.employee_id = employee_id
        self.on_date = on_date
        super().__init__(
            f"Employee {employee_id} has no contract effective on {on_date.isoformat()}"
        )


class MissingHolidayYearError(TimeLedgerError):
    """Holiday data for a required year has not been supplied."""

    def __init__(self, years: set[int] | list[int], detail: str | None = None) -> None:
        self.years = sorted(set(years))
        message = f"Holiday data missing for year(s): {', '.join(map(str, self.years))}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class EmployeeNotFoundError(TimeLedgerError):
    """The entity store has no employee with the requested id."""

    def __init__(self, employee_id: uuid.UUID) -> None:
        self.employee_id = employee_id
        super().__init__(f"Employee {employee_id} not found")
