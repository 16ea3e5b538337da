# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
import os
import uuid
from datetime import date

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

# Set test environment before importing app
os.environ["TIMELEDGER_DATABASE_URL"] = "sqlite:///./test.db"
os.environ["TIMELEDGER_HOLIDAY_COUNTRY"] = "DE"

from timeledger.api.deps import get_db, get_holiday_service
from timeledger.main import app
from timeledger.models import ContractVersion, Employee, TargetHoursModel
from timeledger.models.base import Base
from timeledger.services.holiday_service import HolidayService

# Test database setup
TEST_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def db_session():
    """Create a fresh database for each test."""
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def holiday_service() -> HolidayService:
    """German national holidays."""
    return HolidayService(country_code="DE")


@pytest.fixture(scope="function")
def client(db_session, holiday_service):
    """Create a test client with database override."""

    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_holiday_service] = lambda: holiday_service
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def stored_employee(db_session) -> Employee:
    """Create a full-time employee with an 8h/day, 30 vacation day contract."""
    employee = Employee(
        id=uuid.uuid4(),
        first_name="Erika",
        last_name="Mustermann",
        first_work_day=date(2025, 1, 1),
    )
    employee.contract_versions.append(
        ContractVersion(
            valid_from=date(2025, 1, 1),
            target_hours_model=TargetHoursModel.MONTHLY,
            monthly_target_hours=168.0,
            daily_target_hours=8.0,
            vacation_days=30.0,
        )
    )
    db_session.add(employee)
    db_session.commit()
    db_session.refresh(employee)
    return employee
