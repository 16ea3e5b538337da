# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Holiday provider backed by the ``holidays`` package."""

import logging
from collections.abc import Iterable

import holidays

from timeledger.config import settings
from timeledger.exceptions import MissingHolidayYearError
from timeledger.schemas.holiday import Holiday

logger = logging.getLogger(__name__)


class HolidayService:
    """Supplies public holidays per year for one country and subdivision."""

    def __init__(
        self,
        country_code: str | None = None,
        subdivision: str | None = None,
    ) -> None:
        """Initialize the service.

        Args:
            country_code: ISO country code; defaults to the configured one.
            subdivision: Optional state/region code (e.g. "BY" for Bavaria).
        """
        self.country_code = (country_code or settings.holiday_country).upper()
        self.subdivision = subdivision if subdivision is not None else settings.holiday_subdivision
        self._cache: dict[int, list[Holiday]] = {}

    @property
    def region(self) -> str:
        """Region label attached to every holiday."""
        if self.subdivision:
            return f"{self.country_code}-{self.subdivision}"
        return self.country_code

    def get_public_holidays(self, year: int) -> list[Holiday]:
        """Get public holidays for a year.

        Args:
            year: The year.

        Returns:
            Holidays ordered by date.

        Raises:
            MissingHolidayYearError: If no calendar exists for the region.
        """
        if year in self._cache:
            return self._cache[year]

        try:
            calendar = holidays.country_holidays(
                self.country_code, subdiv=self.subdivision, years=year
            )
        except NotImplementedError as e:
            logger.error(f"No holiday calendar for {self.region}: {e}")
            raise MissingHolidayYearError([year], detail=str(e)) from e

        result = [
            Holiday(date=day, name=name, region=self.region)
            for day, name in sorted(calendar.items())
        ]
        self._cache[year] = result
        logger.debug(f"Loaded {len(result)} holidays for {self.region} {year}")
        return result

    def holidays_by_year(self, years: Iterable[int]) -> dict[int, list[Holiday]]:
        """Fetch every requested year.

        Args:
            years: Years the engine needs.

        Returns:
            Mapping of year to holidays.
        """
        return {year: self.get_public_holidays(year) for year in sorted(set(years))}
