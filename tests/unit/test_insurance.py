"""Unit tests for the banded term insurance estimator"""

import pytest
from finserv_calculators.domain.exceptions import InvalidInputError
from finserv_calculators.domain.insurance import (
    age_multiplier,
    calculate_term_premium,
    compute_term_premium,
    term_multiplier,
)
from finserv_calculators.domain.models import TermInsuranceParameters


def test_age_band_steps_up_at_35():
    """First band is strictly under 35"""
    assert compute_term_premium(34, 5_000_000, 10) == 7_500
    assert compute_term_premium(35, 5_000_000, 10) == 11_250


def test_age_band_steps_up_at_45():
    assert compute_term_premium(44, 5_000_000, 10) == 11_250
    assert compute_term_premium(45, 5_000_000, 10) == 15_000


@pytest.mark.parametrize("term,expected", [(5, 7_500), (10, 7_500), (11, 9_000), (20, 9_000), (21, 11_250), (30, 11_250)])
def test_term_bands_inclusive_upper_bound(term, expected):
    assert compute_term_premium(30, 5_000_000, term) == expected


def test_multiplier_tables():
    assert [age_multiplier(a) for a in (18, 34, 35, 44, 45, 65)] == [1.0, 1.0, 1.5, 1.5, 2.0, 2.0]
    assert [term_multiplier(t) for t in (1, 10, 11, 20, 21)] == [1.0, 1.0, 1.2, 1.2, 1.5]


def test_calculate_term_premium_derived_figures():
    """50 lakh cover, age 30, 20 years"""
    result = calculate_term_premium(TermInsuranceParameters(age=30, cover_amount=5_000_000, term_years=20))

    assert result.annual_premium == 9_000
    assert result.monthly_premium == 750
    assert result.total_premium == 180_000


def test_monthly_premium_rounds_half_up():
    # 1_000_000 * 0.0015 = 1500 annual -> 125 monthly exactly; 1_100_000 -> 1650 -> 137.5 -> 138
    result = calculate_term_premium(TermInsuranceParameters(age=30, cover_amount=1_100_000, term_years=10))

    assert result.annual_premium == 1_650
    assert result.monthly_premium == 138


@pytest.mark.parametrize(
    "age,cover,term,field",
    [(0, 5_000_000, 10, "age"), (30, 0, 10, "cover_amount"), (30, 5_000_000, 0, "term_years"), (-5, 5_000_000, 10, "age")],
)
def test_compute_term_premium_rejects_invalid_input(age, cover, term, field):
    with pytest.raises(InvalidInputError) as exc_info:
        compute_term_premium(age, cover, term)

    assert exc_info.value.field == field
