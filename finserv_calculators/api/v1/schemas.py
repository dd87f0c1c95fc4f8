"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, Field
from typing import List, Optional

from finserv_calculators.domain.models import EmploymentType, IneligibilityReason

# Contact rules carried over from the public site's lead forms
NAME_PATTERN = r"^[a-zA-Z\s.'-]{2,60}$"
MOBILE_PATTERN = r"^[6-9]\d{9}$"
EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class EMIRequest(BaseModel):
    """Request body for POST /v1/emi"""

    principal: float = Field(..., gt=0, description="Loan amount in rupees")
    annual_rate_percent: float = Field(..., ge=0, le=100, description="Annual interest rate, percent")
    tenure_months: int = Field(..., ge=1, le=600, description="Repayment tenure in months")


class EMIResponse(BaseModel):
    emi: int
    total_payable: int
    total_interest: int
    emi_display: str
    total_payable_display: str
    total_interest_display: str


class MoratoriumRequest(EMIRequest):
    """Request body for POST /v1/emi/moratorium"""

    moratorium_months: int = Field(..., ge=0, le=600, description="Months with no payments")


class MoratoriumResponse(BaseModel):
    regular_emi: int
    moratorium_emi: int
    extra_cost: int
    compounded_principal: float
    remaining_tenure_months: int
    policy: str


class TermInsuranceRequest(BaseModel):
    """Request body for POST /v1/term-insurance"""

    age: int = Field(..., gt=0, le=120)
    cover_amount: float = Field(..., gt=0, description="Sum assured in rupees")
    term_years: int = Field(..., gt=0, le=100)


class TermInsuranceResponse(BaseModel):
    annual_premium: int
    monthly_premium: int
    total_premium: int
    disclaimer: str = "Indicative estimate from simplified bands, not an insurer quote"


class AmortizationRequest(EMIRequest):
    """Request body for POST /v1/amortization"""

    pass


class AmortizationRowSchema(BaseModel):
    month: int
    payment: float
    interest: float
    principal: float
    closing_balance: float


class AmortizationResponse(BaseModel):
    emi: int
    total_interest: float
    schedule: List[AmortizationRowSchema]


class EligibilityRequest(BaseModel):
    """Request body for POST /v1/eligibility"""

    monthly_income: float = Field(..., gt=0, description="Net monthly income in rupees")
    existing_monthly_emi: float = Field(0, ge=0, description="EMIs already being paid")
    age: int = Field(..., gt=0, le=120)
    employment_type: EmploymentType = EmploymentType.SALARIED
    annual_rate_percent: float = Field(9.5, ge=0, le=100)
    desired_tenure_years: int = Field(..., gt=0, le=100)


class EligibilityResponse(BaseModel):
    """Response for POST /v1/eligibility"""

    eligible: bool
    affordable_emi: float
    eligible_loan_amount: float
    post_debt_to_income_ratio_percent: float
    approved_tenure_years: int
    max_tenure_years: int
    error_reason: Optional[IneligibilityReason] = None
    eligible_loan_display: str


class EligibilitySubmissionRequest(EligibilityRequest):
    """Request body for POST /v1/eligibility/submissions"""

    name: str = Field(..., pattern=NAME_PATTERN)
    phone: str = Field(..., pattern=MOBILE_PATTERN, description="10-digit Indian mobile number")
    email: str = Field(..., max_length=100, pattern=EMAIL_PATTERN)


class SubmissionResponse(BaseModel):
    """Single eligibility submission as seen by admins"""

    submission_id: str
    name: str
    phone: str
    email: str
    monthly_salary: float
    existing_emi: float
    age: int
    employment_type: str
    interest_rate: float
    desired_tenure_years: int
    eligible_loan_amount: float
    affordable_emi: float
    approved_tenure_years: int
    error_reason: Optional[str] = None
    status: str
    created_at: str


class SubmissionListResponse(BaseModel):
    """Response for GET /v1/eligibility/submissions"""

    submissions: List[SubmissionResponse]


class SubmissionStatusUpdate(BaseModel):
    """Request body for PATCH /v1/eligibility/submissions/{submission_id}"""

    status: str = Field(..., pattern=r"^(pending|reviewed|contacted)$")
