"""POST /v1/eligibility and the eligibility submission (lead) endpoints"""

import time
import uuid
import logging
from fastapi import APIRouter, Depends, HTTPException, Query, Request
from sqlalchemy.orm import Session

from finserv_calculators.api.v1.schemas import (
    EligibilityRequest,
    EligibilityResponse,
    EligibilitySubmissionRequest,
    SubmissionListResponse,
    SubmissionResponse,
    SubmissionStatusUpdate,
)
from finserv_calculators.api.dependencies import get_request_id
from finserv_calculators.config import settings
from finserv_calculators.domain.eligibility import compute_eligibility
from finserv_calculators.domain.exceptions import InvalidInputError, SubmissionNotFoundError
from finserv_calculators.domain.models import EligibilityInput, EligibilityResult, EmploymentType
from finserv_calculators.infrastructure.database.models import EligibilitySubmission
from finserv_calculators.infrastructure.database.repositories import SubmissionRepository
from finserv_calculators.infrastructure.database.session import get_db
from finserv_calculators.infrastructure.observability.logging import log_eligibility
from finserv_calculators.infrastructure.observability.metrics import (
    record_calculation,
    record_eligibility,
    record_invalid_input,
    record_submission,
)
from finserv_calculators.utils.currency import format_inr

router = APIRouter()


def to_eligibility_input(request_body: EligibilityRequest) -> EligibilityInput:
    return EligibilityInput(
        monthly_income=request_body.monthly_income,
        existing_monthly_emi=request_body.existing_monthly_emi,
        age=request_body.age,
        employment_type=request_body.employment_type,
        annual_rate_percent=request_body.annual_rate_percent,
        desired_tenure_years=request_body.desired_tenure_years,
    )


def run_eligibility(data: EligibilityInput, request_id: str) -> EligibilityResult:
    """Compute eligibility and record metrics/logs; invalid input becomes a 422"""
    start_time = time.time()

    try:
        result = compute_eligibility(data)
    except InvalidInputError as e:
        record_invalid_input("eligibility", e.field)
        logging.warning(f"Invalid input: {e}", extra={"request_id": request_id, "calculator": "eligibility"})
        raise HTTPException(status_code=422, detail={"field": e.field, "message": e.message})

    error_reason = result.error_reason.value if result.error_reason else None
    duration_ms = (time.time() - start_time) * 1000
    record_calculation("eligibility")
    record_eligibility(error_reason, result.eligible_loan_amount)
    employment_type = EmploymentType(data.employment_type).value
    log_eligibility(request_id, employment_type, result.eligible_loan_amount, error_reason, duration_ms)

    return result


def to_eligibility_response(result: EligibilityResult) -> EligibilityResponse:
    return EligibilityResponse(
        eligible=result.eligible,
        affordable_emi=round(result.affordable_emi, 2),
        eligible_loan_amount=round(result.eligible_loan_amount, 2),
        post_debt_to_income_ratio_percent=round(result.post_debt_to_income_ratio_percent, 2),
        approved_tenure_years=result.approved_tenure_years,
        max_tenure_years=result.max_tenure_years,
        error_reason=result.error_reason,
        eligible_loan_display=format_inr(result.eligible_loan_amount),
    )


def to_submission_response(submission: EligibilitySubmission) -> SubmissionResponse:
    return SubmissionResponse(
        submission_id=str(submission.id),
        name=submission.name,
        phone=submission.phone,
        email=submission.email,
        monthly_salary=submission.monthly_salary,
        existing_emi=submission.existing_emi,
        age=submission.age,
        employment_type=submission.employment_type,
        interest_rate=submission.interest_rate,
        desired_tenure_years=submission.desired_tenure_years,
        eligible_loan_amount=submission.eligible_loan_amount,
        affordable_emi=submission.affordable_emi,
        approved_tenure_years=submission.approved_tenure_years,
        error_reason=submission.error_reason,
        status=submission.status,
        created_at=submission.created_at.isoformat(),
    )


def parse_submission_id(submission_id: str) -> uuid.UUID:
    try:
        return uuid.UUID(submission_id)
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid submission ID format")


@router.post("/eligibility", response_model=EligibilityResponse)
def eligibility(request_body: EligibilityRequest, request: Request):
    """
    Maximum loan the applicant is eligible for.

    Infeasible profiles (tenure past retirement, no FOIR headroom) are a normal
    200 response with eligible=false and error_reason set.
    """
    result = run_eligibility(to_eligibility_input(request_body), get_request_id(request))
    return to_eligibility_response(result)


@router.post("/eligibility/submissions", response_model=SubmissionResponse, status_code=201)
def create_submission(
    request_body: EligibilitySubmissionRequest,
    request: Request,
    db: Session = Depends(get_db),
):
    """
    Record an eligibility lead for admin follow-up.

    Flow:
    1. Recompute eligibility server-side (client figures are never trusted)
    2. Persist contact details, inputs and results with status=pending
    3. Return the stored submission
    """
    request_id = get_request_id(request)
    data = to_eligibility_input(request_body)
    result = run_eligibility(data, request_id)

    try:
        repo = SubmissionRepository(db)
        submission = repo.create_submission(
            name=request_body.name.strip(),
            phone=request_body.phone,
            email=request_body.email,
            data=data,
            result=result,
        )
        db.commit()
        db.refresh(submission)

    except Exception as e:
        db.rollback()
        logging.error(f"Failed to store eligibility submission: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Failed to submit eligibility calculation")

    record_submission("pending")
    logging.info(
        "Eligibility submission stored",
        extra={"request_id": request_id, "submission_id": str(submission.id), "step": "submission_created"},
    )

    return to_submission_response(submission)


@router.get("/eligibility/submissions", response_model=SubmissionListResponse)
def list_submissions(
    limit: int = Query(settings.submission_history_limit, ge=1, le=1000, description="Maximum rows to return"),
    db: Session = Depends(get_db),
):
    """Most recent eligibility submissions first"""
    repo = SubmissionRepository(db)
    submissions = repo.list_submissions(limit=limit)

    return SubmissionListResponse(submissions=[to_submission_response(s) for s in submissions])


@router.patch("/eligibility/submissions/{submission_id}", response_model=SubmissionResponse)
def update_submission_status(
    submission_id: str,
    request_body: SubmissionStatusUpdate,
    request: Request,
    db: Session = Depends(get_db),
):
    """Move a submission to pending, reviewed or contacted"""
    submission_uuid = parse_submission_id(submission_id)
    request_id = get_request_id(request)

    repo = SubmissionRepository(db)
    try:
        submission = repo.update_status(submission_uuid, request_body.status)
        db.commit()
        db.refresh(submission)

    except SubmissionNotFoundError as e:
        db.rollback()
        logging.warning(f"Submission not found: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=404, detail="Submission not found")

    except Exception as e:
        db.rollback()
        logging.error(f"Failed to update eligibility submission: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Failed to update eligibility status")

    record_submission(request_body.status)
    return to_submission_response(submission)
