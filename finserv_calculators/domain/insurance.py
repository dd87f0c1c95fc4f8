"""
Term insurance premium estimator.

The banded multipliers below are simplified placeholders used to give site
visitors a ballpark figure. They are NOT actuarial or regulatory-grade pricing
tables and must not be used to quote a real policy.
"""

from finserv_calculators.domain.models import TermInsuranceParameters, TermPremiumResult
from finserv_calculators.domain.validation import require_positive, require_whole
from finserv_calculators.utils.currency import round_half_up

# 1.5 per 1000 of cover per year
BASE_RATE = 0.0015


def age_multiplier(age: int) -> float:
    """
    Age bands (lower bound inclusive):
    - under 35: 1.0
    - 35 - 44:  1.5
    - 45+:      2.0
    """
    if age < 35:
        return 1.0
    elif age < 45:
        return 1.5
    else:
        return 2.0


def term_multiplier(term_years: int) -> float:
    """
    Term bands (upper bound inclusive):
    - up to 10 years: 1.0
    - 11 - 20 years:  1.2
    - over 20 years:  1.5
    """
    if term_years <= 10:
        return 1.0
    elif term_years <= 20:
        return 1.2
    else:
        return 1.5


def compute_term_premium(age: int, cover_amount: float, term_years: int) -> int:
    """Estimated annual premium in whole rupees"""
    require_whole("age", age)
    require_positive("age", age)
    require_positive("cover_amount", cover_amount)
    require_whole("term_years", term_years)
    require_positive("term_years", term_years)

    return round_half_up(cover_amount * BASE_RATE * age_multiplier(age) * term_multiplier(term_years))


def calculate_term_premium(params: TermInsuranceParameters) -> TermPremiumResult:
    annual = compute_term_premium(params.age, params.cover_amount, params.term_years)

    return TermPremiumResult(
        annual_premium=annual,
        monthly_premium=round_half_up(annual / 12),
        total_premium=annual * params.term_years,
    )
