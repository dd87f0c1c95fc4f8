"""Data access layer for eligibility submissions"""

import uuid
from typing import List, Optional
from sqlalchemy.orm import Session
from finserv_calculators.infrastructure.database.models import EligibilitySubmission
from finserv_calculators.domain.exceptions import SubmissionNotFoundError
from finserv_calculators.domain.models import EligibilityInput, EligibilityResult, EmploymentType


class SubmissionRepository:
    """Repository for eligibility leads"""

    def __init__(self, db: Session):
        self.db = db

    def create_submission(
        self,
        name: str,
        phone: str,
        email: str,
        data: EligibilityInput,
        result: EligibilityResult,
    ) -> EligibilitySubmission:
        """Persist applicant inputs alongside the computed eligibility"""
        submission = EligibilitySubmission(
            name=name,
            phone=phone,
            email=email,
            monthly_salary=data.monthly_income,
            existing_emi=data.existing_monthly_emi,
            age=data.age,
            employment_type=EmploymentType(data.employment_type).value,
            interest_rate=data.annual_rate_percent,
            desired_tenure_years=data.desired_tenure_years,
            eligible_loan_amount=round(result.eligible_loan_amount, 2),
            affordable_emi=round(result.affordable_emi, 2),
            approved_tenure_years=result.approved_tenure_years,
            error_reason=result.error_reason.value if result.error_reason else None,
            status="pending",
        )
        self.db.add(submission)
        self.db.flush()  # Get ID without committing
        return submission

    def list_submissions(self, limit: int = 100) -> List[EligibilitySubmission]:
        """Fetch most recent submissions first"""
        return (
            self.db.query(EligibilitySubmission)
            .order_by(EligibilitySubmission.created_at.desc())
            .limit(limit)
            .all()
        )

    def get_submission(self, submission_id: uuid.UUID) -> Optional[EligibilitySubmission]:
        return (
            self.db.query(EligibilitySubmission)
            .filter(EligibilitySubmission.id == submission_id)
            .first()
        )

    def update_status(self, submission_id: uuid.UUID, status: str) -> EligibilitySubmission:
        """Move a submission through the admin review workflow"""
        submission = self.get_submission(submission_id)
        if submission is None:
            raise SubmissionNotFoundError(f"Submission {submission_id} not found")

        submission.status = status
        self.db.flush()
        return submission
