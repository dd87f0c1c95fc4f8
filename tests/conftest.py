"""Pytest fixtures for testing"""

import os

# Point the app at SQLite before its engine is created on import
os.environ.setdefault("DATABASE_URL", "sqlite:///./test.db")

import pytest
from typing import Generator
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from finserv_calculators.api.main import create_app
from finserv_calculators.infrastructure.database.models import Base
from finserv_calculators.infrastructure.database.session import get_db
from finserv_calculators.domain.models import EligibilityInput, EmploymentType


# Test database
TEST_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db() -> Generator[Session, None, None]:
    """Create test database and session"""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db: Session) -> TestClient:
    """Create FastAPI test client with test database"""
    app = create_app()

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    return TestClient(app)


@pytest.fixture
def salaried_applicant() -> EligibilityInput:
    """30-year-old salaried applicant earning 80k with a 15k existing EMI"""
    return EligibilityInput(
        monthly_income=80_000,
        existing_monthly_emi=15_000,
        age=30,
        employment_type=EmploymentType.SALARIED,
        annual_rate_percent=9.5,
        desired_tenure_years=20,
    )


@pytest.fixture
def submission_payload() -> dict:
    """Lead form body as posted by the eligibility page"""
    return {
        "name": "Asha Verma",
        "phone": "9876543210",
        "email": "asha@example.com",
        "monthly_income": "80000",
        "existing_monthly_emi": "15000",
        "age": "30",
        "employment_type": "salaried",
        "annual_rate_percent": "9.5",
        "desired_tenure_years": "20",
    }
