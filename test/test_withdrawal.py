# Test type: Unit
# Validation: SWP depletion, early termination, growth offsetting withdrawals, zero result.
# Command: uv run pytest test/test_withdrawal.py -v

import math

import pytest

from fincalc.withdrawal import ZERO_SWP, calculate_swp


def test_corpus_runs_out_early():
    result = calculate_swp(100_000, 10_000, 0, 5)
    assert result.months_survived == 10
    assert result.ending_balance == 0
    assert result.total_withdrawn == 100_000
    assert result.total_interest == 0
    assert len(result.series) == 10


def test_last_withdrawal_is_capped_at_balance():
    result = calculate_swp(25_000, 10_000, 0, 1)
    assert result.months_survived == 3
    assert [p.withdrawal for p in result.series] == [10_000, 10_000, 5_000]
    assert result.ending_balance == 0


def test_interest_covers_withdrawal():
    result = calculate_swp(1_000_000, 5_000, 6, 10)
    assert result.months_survived == 120
    assert result.ending_balance == pytest.approx(1_000_000)
    assert result.total_interest == pytest.approx(600_000)


def test_termination_invariants():
    for corpus, wd, rate, years in [(500_000, 8_000, 8, 10), (2_000_000, 12_000, 10, 25), (50_000, 1, 0, 3)]:
        result = calculate_swp(corpus, wd, rate, years)
        assert result.months_survived <= years * 12
        assert result.ending_balance >= 0
        if result.months_survived < years * 12:
            assert result.ending_balance < wd


def test_interest_accrues_before_withdrawal():
    result = calculate_swp(100_000, 1_000, 12, 1)
    first = result.series[0]
    assert first.interest == pytest.approx(1_000)
    assert first.balance == pytest.approx(100_000)


def test_zero_result():
    assert calculate_swp(0, 1000, 8, 10) == ZERO_SWP
    assert calculate_swp(-10, 1000, 8, 10) == ZERO_SWP
    assert calculate_swp(100_000, 1000, 8, 0) == ZERO_SWP


def test_negative_withdrawal_treated_as_zero():
    result = calculate_swp(1000, -50, 0, 1)
    assert result.months_survived == 12
    assert result.total_withdrawn == 0
    assert result.ending_balance == 1000


@pytest.mark.parametrize("corpus", [math.nan, math.inf, -math.inf])
def test_non_finite_corpus_gives_zero_result(corpus):
    assert calculate_swp(corpus, 1000, 8, 10) == ZERO_SWP
