"""SQLAlchemy ORM models for persisted eligibility leads"""

import uuid
from datetime import datetime, timezone
from sqlalchemy import Column, String, Float, DateTime, Integer, Text, Uuid
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func

Base = declarative_base()


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


SUBMISSION_STATUSES = ("pending", "reviewed", "contacted")


class EligibilitySubmission(Base):
    """Eligibility calculation submitted by a site visitor for admin follow-up"""

    __tablename__ = "eligibility_submissions"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(String(100), nullable=False)
    phone = Column(String(20), nullable=False, index=True)
    email = Column(String(100), nullable=False)

    # Applicant inputs
    monthly_salary = Column(Float, nullable=False)
    existing_emi = Column(Float, nullable=False, default=0)
    age = Column(Integer, nullable=False)
    employment_type = Column(String(50), nullable=False)
    interest_rate = Column(Float, nullable=False)
    desired_tenure_years = Column(Integer, nullable=False)

    # Engine outputs, recomputed server-side
    eligible_loan_amount = Column(Float, nullable=False)
    affordable_emi = Column(Float, nullable=False)
    approved_tenure_years = Column(Integer, nullable=False)
    error_reason = Column(Text, nullable=True)

    status = Column(String(20), nullable=False, default="pending")
    # Set in the app for microsecond resolution; newest-first listing relies on it
    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())
