"""Reducing-balance EMI calculator"""

import math

from finserv_calculators.domain.exceptions import InvalidInputError
from finserv_calculators.domain.models import EMIResult, LoanParameters
from finserv_calculators.domain.validation import require_non_negative, require_positive, require_whole
from finserv_calculators.utils.currency import round_half_up


def monthly_rate(annual_rate_percent: float) -> float:
    """Convert an annual percentage rate to a monthly fractional rate"""
    return annual_rate_percent / 1200


def validate_loan(principal: float, annual_rate_percent: float, tenure_months: int) -> None:
    require_positive("principal", principal)
    require_non_negative("annual_rate_percent", annual_rate_percent)
    require_whole("tenure_months", tenure_months)
    require_positive("tenure_months", tenure_months)


def growth_factor(rate: float, periods: int) -> float:
    """(1+r)^n, rejecting rate/tenure combinations too large to represent"""
    try:
        growth = (1 + rate) ** periods
    except OverflowError:
        growth = math.inf

    if not math.isfinite(growth):
        raise InvalidInputError(
            "annual_rate_percent",
            f"rate compounded over {periods} months is too large to calculate",
        )
    return growth


def require_finite_amount(value: float) -> float:
    if not math.isfinite(value):
        raise InvalidInputError("annual_rate_percent", "resulting amount is too large to calculate")
    return value


def amortizing_payment(principal: float, rate: float, periods: int) -> float:
    """
    Unrounded payment that fully amortizes principal over periods.

    EMI = P * r * (1+r)^n / ((1+r)^n - 1), or P / n when r == 0.
    Callers validate inputs; this is the shared formula only.
    """
    if rate == 0:
        return principal / periods

    growth = growth_factor(rate, periods)
    return require_finite_amount(principal * rate * growth / (growth - 1))


def compute_emi(principal: float, annual_rate_percent: float, tenure_months: int) -> int:
    """
    Equated monthly installment in whole rupees.

    Raises:
        InvalidInputError: principal <= 0, tenure_months <= 0, negative rate, or a
            rate so large the compounded figures overflow

    Example:
        compute_emi(1_000_000, 9.5, 240) -> 9321
    """
    validate_loan(principal, annual_rate_percent, tenure_months)
    return round_half_up(amortizing_payment(principal, monthly_rate(annual_rate_percent), tenure_months))


def calculate_emi(params: LoanParameters) -> EMIResult:
    """EMI plus total payable and total interest over the full tenure"""
    emi = compute_emi(params.principal, params.annual_rate_percent, params.tenure_months)
    total_payable = emi * params.tenure_months

    return EMIResult(
        emi=emi,
        total_payable=total_payable,
        total_interest=round_half_up(total_payable - params.principal),
    )
