"""Loan eligibility engine - sizes the maximum loan an applicant can service"""

from typing import Dict

from finserv_calculators.domain.emi import growth_factor, monthly_rate
from finserv_calculators.domain.exceptions import InvalidInputError
from finserv_calculators.domain.models import (
    EligibilityInput,
    EligibilityResult,
    EmploymentType,
    IneligibilityReason,
)
from finserv_calculators.domain.validation import require_non_negative, require_positive, require_whole

RETIREMENT_AGE: Dict[EmploymentType, int] = {
    EmploymentType.SALARIED: 60,
    EmploymentType.SELF_EMPLOYED: 65,
}

# Fixed Obligation to Income Ratio: share of income allowed toward all EMIs
FOIR: Dict[EmploymentType, float] = {
    EmploymentType.SALARIED: 0.55,
    EmploymentType.SELF_EMPLOYED: 0.50,
}

MAX_TENURE_YEARS = 30


def validate_eligibility_input(data: EligibilityInput) -> EmploymentType:
    """Fail fast on degenerate applicant data; returns the parsed employment type"""
    require_positive("monthly_income", data.monthly_income)
    require_non_negative("existing_monthly_emi", data.existing_monthly_emi)
    require_whole("age", data.age)
    require_positive("age", data.age)
    require_non_negative("annual_rate_percent", data.annual_rate_percent)
    require_whole("desired_tenure_years", data.desired_tenure_years)
    require_positive("desired_tenure_years", data.desired_tenure_years)

    try:
        return EmploymentType(data.employment_type)
    except ValueError:
        raise InvalidInputError(
            "employment_type",
            f"must be one of {[e.value for e in EmploymentType]}, got {data.employment_type!r}",
        )


def max_tenure_years(age: int, employment_type: EmploymentType) -> int:
    """Years until retirement, clamped to [0, 30]"""
    return min(MAX_TENURE_YEARS, max(0, RETIREMENT_AGE[employment_type] - age))


def affordable_emi(monthly_income: float, existing_monthly_emi: float, employment_type: EmploymentType) -> float:
    """Monthly EMI headroom left under the FOIR ceiling (never negative)"""
    return max(0.0, monthly_income * FOIR[employment_type] - existing_monthly_emi)


def present_value_factor(annual_rate_percent: float, months: int) -> float:
    """
    Loan principal serviced by an EMI of 1 over the given months.

    Inverse of the EMI formula: ((1+r)^n - 1) / (r * (1+r)^n), or n when r == 0.
    """
    rate = monthly_rate(annual_rate_percent)
    if rate == 0:
        return float(months)

    growth = growth_factor(rate, months)
    return (growth - 1) / (rate * growth)


def compute_eligibility(data: EligibilityInput) -> EligibilityResult:
    """
    Maximum eligible loan for an applicant.

    Steps:
    1. Cap tenure at years to retirement (60 salaried, 65 self-employed), max 30
    2. Affordable EMI = income * FOIR (0.55 salaried, 0.50 self-employed) - existing EMIs
    3. Eligible loan = affordable EMI * present value factor over the used tenure

    Running out of tenure or EMI headroom is an expected outcome, reported via
    error_reason with zero eligibility rather than raised.

    Raises:
        InvalidInputError: non-positive income/age/tenure, negative EMI or rate
    """
    employment_type = validate_eligibility_input(data)

    max_years = max_tenure_years(data.age, employment_type)
    used_years = min(data.desired_tenure_years, max_years)
    headroom = affordable_emi(data.monthly_income, data.existing_monthly_emi, employment_type)

    error_reason = None
    if used_years <= 0:
        error_reason = IneligibilityReason.TENURE_EXCEEDS_RETIREMENT
    elif headroom <= 0:
        error_reason = IneligibilityReason.NO_AFFORDABILITY_HEADROOM

    if error_reason is not None:
        return EligibilityResult(
            affordable_emi=0.0,
            eligible_loan_amount=0.0,
            post_debt_to_income_ratio_percent=debt_to_income_percent(
                data.existing_monthly_emi, 0.0, data.monthly_income
            ),
            approved_tenure_years=used_years,
            max_tenure_years=max_years,
            error_reason=error_reason,
        )

    eligible_amount = headroom * present_value_factor(data.annual_rate_percent, used_years * 12)

    return EligibilityResult(
        affordable_emi=headroom,
        eligible_loan_amount=eligible_amount,
        post_debt_to_income_ratio_percent=debt_to_income_percent(
            data.existing_monthly_emi, headroom, data.monthly_income
        ),
        approved_tenure_years=used_years,
        max_tenure_years=max_years,
    )


def debt_to_income_percent(existing_monthly_emi: float, new_emi: float, monthly_income: float) -> float:
    """Share of income consumed by all EMIs after the new loan (0 for no income)"""
    if monthly_income <= 0:
        return 0.0
    return (existing_monthly_emi + new_emi) / monthly_income * 100
