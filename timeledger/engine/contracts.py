# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Contract timeline resolution."""

from bisect import bisect_right
from datetime import date

from timeledger.exceptions import NoEffectiveContractError
from timeledger.schemas.employee import ContractVersion, Employee


def resolve(employee: Employee, on_date: date) -> ContractVersion:
    """Return the contract version effective on a date.

    The effective version is the one with the greatest ``valid_from`` not
    after ``on_date``. Versions are kept sorted by the Employee snapshot.

    Args:
        employee: The employee snapshot.
        on_date: The calendar date.

    Returns:
        The effective contract version.

    Raises:
        NoEffectiveContractError: If the date precedes every version.
    """
    versions = employee.contract_versions
    index = bisect_right([v.valid_from for v in versions], on_date)
    if index == 0:
        raise NoEffectiveContractError(employee.id, on_date)
    return versions[index - 1]
