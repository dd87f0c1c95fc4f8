"""EMI after a moratorium during which unpaid interest compounds monthly"""

from finserv_calculators.domain.emi import (
    amortizing_payment,
    compute_emi,
    growth_factor,
    monthly_rate,
    require_finite_amount,
    validate_loan,
)
from finserv_calculators.domain.exceptions import InvalidInputError
from finserv_calculators.domain.models import MoratoriumParameters, MoratoriumPolicy, MoratoriumResult
from finserv_calculators.domain.validation import require_non_negative, require_whole
from finserv_calculators.utils.currency import round_half_up


def remaining_tenure(
    tenure_months: int,
    moratorium_months: int,
    policy: MoratoriumPolicy = MoratoriumPolicy.CLAMP,
) -> int:
    """
    Months left to amortize once the moratorium ends.

    Policies when the moratorium consumes the whole tenure:
    - CLAMP:  remaining tenure is forced to 1 month (the whole compounded
              balance falls due in a single installment)
    - STRICT: rejected with InvalidInputError
    """
    if policy == MoratoriumPolicy.STRICT and moratorium_months >= tenure_months:
        raise InvalidInputError(
            "moratorium_months",
            f"must be shorter than the tenure ({tenure_months} months), got {moratorium_months}",
        )
    return max(1, tenure_months - moratorium_months)


def compounded_principal(principal: float, annual_rate_percent: float, moratorium_months: int) -> float:
    """Outstanding balance at the end of the moratorium"""
    return require_finite_amount(principal * growth_factor(monthly_rate(annual_rate_percent), moratorium_months))


def compute_moratorium_emi(
    principal: float,
    annual_rate_percent: float,
    tenure_months: int,
    moratorium_months: int,
    policy: MoratoriumPolicy = MoratoriumPolicy.CLAMP,
) -> int:
    """
    EMI payable after the moratorium, in whole rupees.

    The compounded balance is amortized over the remaining tenure with the
    same reducing-balance formula as the regular EMI.
    """
    validate_loan(principal, annual_rate_percent, tenure_months)
    require_whole("moratorium_months", moratorium_months)
    require_non_negative("moratorium_months", moratorium_months)

    periods = remaining_tenure(tenure_months, moratorium_months, MoratoriumPolicy(policy))
    balance = compounded_principal(principal, annual_rate_percent, moratorium_months)

    return round_half_up(amortizing_payment(balance, monthly_rate(annual_rate_percent), periods))


def compute_regular_emi(
    principal: float,
    annual_rate_percent: float,
    tenure_months: int,
) -> int:
    """EMI for the same loan without any moratorium, for comparison"""
    return compute_emi(principal, annual_rate_percent, tenure_months)


def calculate_moratorium(
    params: MoratoriumParameters,
    policy: MoratoriumPolicy = MoratoriumPolicy.CLAMP,
) -> MoratoriumResult:
    """Regular vs post-moratorium EMI and the extra monthly cost of deferring"""
    policy = MoratoriumPolicy(policy)
    moratorium_emi = compute_moratorium_emi(
        params.principal,
        params.annual_rate_percent,
        params.tenure_months,
        params.moratorium_months,
        policy,
    )
    regular_emi = compute_regular_emi(params.principal, params.annual_rate_percent, params.tenure_months)

    return MoratoriumResult(
        regular_emi=regular_emi,
        moratorium_emi=moratorium_emi,
        extra_cost=moratorium_emi - regular_emi,
        compounded_principal=round(
            compounded_principal(params.principal, params.annual_rate_percent, params.moratorium_months), 2
        ),
        remaining_tenure_months=remaining_tenure(params.tenure_months, params.moratorium_months, policy),
    )
