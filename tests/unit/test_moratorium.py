"""Unit tests for moratorium EMI and the tenure policy"""

import pytest
from finserv_calculators.domain.exceptions import InvalidInputError
from finserv_calculators.domain.models import MoratoriumParameters, MoratoriumPolicy
from finserv_calculators.domain.moratorium import (
    calculate_moratorium,
    compute_moratorium_emi,
    compute_regular_emi,
    remaining_tenure,
)


def test_calculate_moratorium_six_month_deferral():
    """Six months of compounding raises the EMI over the remaining 234 months"""
    result = calculate_moratorium(
        MoratoriumParameters(principal=1_000_000, annual_rate_percent=9.5, tenure_months=240, moratorium_months=6)
    )

    assert result.regular_emi == 9321
    assert result.moratorium_emi > result.regular_emi
    assert result.extra_cost == result.moratorium_emi - result.regular_emi
    assert result.remaining_tenure_months == 234
    assert result.compounded_principal == pytest.approx(1_000_000 * (1 + 9.5 / 1200) ** 6, abs=0.01)


def test_zero_moratorium_matches_regular_emi():
    assert compute_moratorium_emi(1_000_000, 9.5, 240, 0) == compute_regular_emi(1_000_000, 9.5, 240)


def test_moratorium_emi_non_decreasing_in_deferral():
    """More deferral never lowers the EMI"""
    emis = [compute_moratorium_emi(1_000_000, 9.5, 240, months) for months in range(0, 240)]

    assert all(later >= earlier for earlier, later in zip(emis, emis[1:]))


def test_moratorium_zero_rate_spreads_principal_over_remaining_months():
    """No interest: nothing compounds, principal is simply spread over fewer months"""
    assert compute_moratorium_emi(120_000, 0, 24, 12) == 10_000


def test_clamp_policy_forces_single_remaining_month():
    """Moratorium equal to tenure: whole compounded balance due in one installment"""
    # 100000 * 1.01^12 compounded, then one month of interest: 100000 * 1.01^13
    assert compute_moratorium_emi(100_000, 12, 12, 12) == 113_809
    assert remaining_tenure(12, 12) == 1
    assert remaining_tenure(12, 15) == 1


def test_strict_policy_rejects_moratorium_covering_tenure():
    with pytest.raises(InvalidInputError) as exc_info:
        compute_moratorium_emi(100_000, 12, 12, 12, MoratoriumPolicy.STRICT)

    assert exc_info.value.field == "moratorium_months"


def test_policies_are_distinguishable_only_at_the_boundary():
    """Below the tenure both policies agree; at the tenure only clamp answers"""
    assert compute_moratorium_emi(1_000_000, 9.5, 240, 12, MoratoriumPolicy.STRICT) == compute_moratorium_emi(
        1_000_000, 9.5, 240, 12, MoratoriumPolicy.CLAMP
    )

    assert compute_moratorium_emi(100_000, 12, 12, 12, MoratoriumPolicy.CLAMP) > 0
    with pytest.raises(InvalidInputError):
        compute_moratorium_emi(100_000, 12, 12, 12, MoratoriumPolicy.STRICT)


def test_policy_accepts_configured_string():
    """Policy may arrive as a plain string from settings"""
    with pytest.raises(InvalidInputError):
        compute_moratorium_emi(100_000, 12, 12, 20, "strict")


def test_calculate_moratorium_strict_rejects_boundary():
    params = MoratoriumParameters(principal=100_000, annual_rate_percent=12, tenure_months=12, moratorium_months=12)

    assert calculate_moratorium(params).remaining_tenure_months == 1
    with pytest.raises(InvalidInputError):
        calculate_moratorium(params, MoratoriumPolicy.STRICT)


@pytest.mark.parametrize(
    "principal,rate,tenure,moratorium,field",
    [
        (0, 9.5, 240, 6, "principal"),
        (1_000_000, -0.5, 240, 6, "annual_rate_percent"),
        (1_000_000, 9.5, 0, 6, "tenure_months"),
        (1_000_000, 9.5, 240, -1, "moratorium_months"),
    ],
)
def test_compute_moratorium_emi_rejects_invalid_input(principal, rate, tenure, moratorium, field):
    with pytest.raises(InvalidInputError) as exc_info:
        compute_moratorium_emi(principal, rate, tenure, moratorium)

    assert exc_info.value.field == field


def test_compute_moratorium_emi_rejects_rate_too_large_to_compound():
    with pytest.raises(InvalidInputError) as exc_info:
        compute_moratorium_emi(100_000, 100_000, 1200, 600)

    assert exc_info.value.field == "annual_rate_percent"
