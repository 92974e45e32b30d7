# Test type: Unit
# Validation: EMI closed form, schedule shape and totals, zero-rate straight line, invalid inputs.
# Command: uv run pytest test/test_amortization.py -v

import math

import pytest

from fincalc.amortization import ZERO_EMI, calculate_emi


def test_known_emi_ten_lakh_nine_percent_ten_years():
    result = calculate_emi(1_000_000, 9, 120)
    assert 12667 <= round(result.emi) <= 12668
    assert result.total_payment > 1_000_000


def test_schedule_totals_and_final_balance():
    result = calculate_emi(500_000, 10.5, 60)
    assert len(result.schedule) == 60
    assert [p.month for p in result.schedule] == list(range(1, 61))
    assert result.total_interest >= 0
    assert result.total_payment == pytest.approx(500_000 + result.total_interest)
    assert abs(result.schedule[-1].balance) < 1e-6
    assert sum(p.principal for p in result.schedule) == pytest.approx(500_000)
    assert sum(p.interest for p in result.schedule) == pytest.approx(result.total_interest)


def test_each_installment_is_the_emi():
    result = calculate_emi(250_000, 12, 24)
    for point in result.schedule[:-1]:
        assert point.principal + point.interest == pytest.approx(result.emi)


def test_zero_rate_is_straight_line():
    result = calculate_emi(1200, 0, 12)
    assert result.emi == 100
    assert result.total_interest == 0
    assert result.total_payment == 1200
    assert result.schedule[-1].balance == 0


def test_fractional_months_are_floored():
    assert len(calculate_emi(100_000, 8, 12.9).schedule) == 12


@pytest.mark.parametrize(
    "principal, rate, months",
    [
        (0, 10, 12),
        (-5000, 10, 12),
        (100_000, 10, 0),
        (100_000, 10, -3),
        (math.nan, 10, 12),
        (math.inf, 10, 12),
        (100_000, 10, math.inf),
    ],
)
def test_invalid_inputs_give_zero_result(principal, rate, months):
    assert calculate_emi(principal, rate, months) == ZERO_EMI


def test_negative_and_nan_rates_are_clamped_to_zero():
    assert calculate_emi(1200, -5, 12).emi == 100
    assert calculate_emi(1200, math.nan, 12).emi == 100


def test_rate_too_small_to_register_is_straight_line():
    result = calculate_emi(100_000, 1e-14, 12)
    assert result.emi == pytest.approx(100_000 / 12)
    assert len(result.schedule) == 12
    assert abs(result.schedule[-1].balance) < 1e-6


def test_huge_rate_and_term_do_not_overflow():
    result = calculate_emi(100_000, 5000, 1200)
    assert result.emi == pytest.approx(100_000 * 5000 / 1200)
    assert math.isfinite(result.total_interest)
    assert len(result.schedule) == 1200
