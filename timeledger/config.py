# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Application settings loaded from the environment."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration.

    Every field can be overridden with a ``TIMELEDGER_`` prefixed
    environment variable, e.g. ``TIMELEDGER_HOLIDAY_COUNTRY=AT``.
    """

    model_config = SettingsConfigDict(env_prefix="TIMELEDGER_", env_file=".env")

    database_url: str = "sqlite:///./timeledger.db"
    log_level: str = "INFO"

    # Holiday calendar used by the holiday provider
    holiday_country: str = Field(default="DE", min_length=2, max_length=2)
    holiday_subdivision: str | None = None

    # Reference date picking the representative contract of a year
    entitlement_reference_month: int = Field(default=7, ge=1, le=12)
    entitlement_reference_day: int = Field(default=1, ge=1, le=28)

    # Compensatory time off consumes the balance unless enabled
    time_off_credits_hours: bool = False


settings = Settings()
