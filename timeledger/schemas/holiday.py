# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Public holiday snapshot."""

import datetime
from collections.abc import Iterable, Mapping

from pydantic import BaseModel, ConfigDict


class Holiday(BaseModel):
    """A public holiday of a region."""

    model_config = ConfigDict(frozen=True)

    date: datetime.date
    name: str
    region: str | None = None


# Holidays pre-fetched per calendar year. A missing key means the year has
# not been fetched; an empty collection means the year has no holidays.
HolidaysByYear = Mapping[int, Iterable[Holiday]]
