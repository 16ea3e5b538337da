# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""API dependencies for dependency injection."""

from collections.abc import Generator
from functools import lru_cache

from sqlalchemy.orm import Session

from timeledger.database import SessionLocal
from timeledger.services.holiday_service import HolidayService


def get_db() -> Generator[Session, None, None]:
    """Get database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@lru_cache
def get_holiday_service() -> HolidayService:
    """Get the shared holiday provider (caches holidays per year)."""
    return HolidayService()
