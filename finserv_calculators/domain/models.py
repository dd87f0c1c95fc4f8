"""Domain models - immutable dataclasses for calculator inputs and outputs"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class EmploymentType(str, Enum):
    """Applicant employment category; drives retirement age and FOIR"""

    SALARIED = "salaried"
    SELF_EMPLOYED = "self-employed"


class IneligibilityReason(str, Enum):
    """Expected business outcomes that yield zero eligibility"""

    TENURE_EXCEEDS_RETIREMENT = "tenure_exceeds_retirement"
    NO_AFFORDABILITY_HEADROOM = "no_affordability_headroom"


class MoratoriumPolicy(str, Enum):
    """How a moratorium that consumes the whole tenure is treated"""

    CLAMP = "clamp"  # remaining tenure forced to 1 month
    STRICT = "strict"  # rejected as invalid input


@dataclass(frozen=True)
class LoanParameters:
    """Principal, annual rate (percent) and tenure in months"""

    principal: float
    annual_rate_percent: float
    tenure_months: int


@dataclass(frozen=True)
class MoratoriumParameters:
    """Loan parameters plus a grace period during which interest compounds"""

    principal: float
    annual_rate_percent: float
    tenure_months: int
    moratorium_months: int


@dataclass(frozen=True)
class TermInsuranceParameters:
    age: int
    cover_amount: float
    term_years: int


@dataclass(frozen=True)
class EligibilityInput:
    """Applicant profile used to size the maximum affordable loan"""

    monthly_income: float
    existing_monthly_emi: float
    age: int
    employment_type: EmploymentType
    annual_rate_percent: float
    desired_tenure_years: int


@dataclass(frozen=True)
class EMIResult:
    """Output of the reducing-balance EMI calculator"""

    emi: int
    total_payable: int
    total_interest: int


@dataclass(frozen=True)
class MoratoriumResult:
    """EMI with and without a moratorium, plus the extra monthly cost"""

    regular_emi: int
    moratorium_emi: int
    extra_cost: int
    compounded_principal: float
    remaining_tenure_months: int


@dataclass(frozen=True)
class TermPremiumResult:
    annual_premium: int
    monthly_premium: int
    total_premium: int


@dataclass(frozen=True)
class EligibilityResult:
    """Output of the eligibility calculator; error_reason set when infeasible"""

    affordable_emi: float
    eligible_loan_amount: float
    post_debt_to_income_ratio_percent: float
    approved_tenure_years: int
    max_tenure_years: int
    error_reason: Optional[IneligibilityReason] = None

    @property
    def eligible(self) -> bool:
        return self.error_reason is None


@dataclass(frozen=True)
class AmortizationRow:
    """Single month in an amortization schedule"""

    month: int
    payment: float
    interest: float
    principal: float
    closing_balance: float
