# Test type: Unit
# Validation: Goal inflation, required SIP / lumpsum inverse properties, required-corpus series.
# Command: uv run pytest test/test_goal.py -v

import math

import pytest

from fincalc.compounding import calculate_sip
from fincalc.goal import ZERO_GOAL, calculate_goal


def test_inflated_goal():
    result = calculate_goal(1_000_000, 10, 6, 12)
    assert abs(result.inflated_goal - 1_790_847.70) < 0.01


def test_required_sip_reaches_goal():
    result = calculate_goal(1_000_000, 10, 6, 12)
    sip = calculate_sip(result.required_sip, 12, 10)
    assert sip.maturity == pytest.approx(result.inflated_goal)
    assert sip.series[-1].value == pytest.approx(result.inflated_goal)


def test_required_lumpsum_reaches_goal():
    result = calculate_goal(500_000, 7, 5, 9)
    assert result.required_lumpsum * (1 + 0.09 / 12) ** 84 == pytest.approx(result.inflated_goal)


def test_required_corpus_series():
    result = calculate_goal(200_000, 2, 4, 8)
    assert len(result.series) == 24
    assert result.series[-1].required_corpus == pytest.approx(result.inflated_goal)
    assert result.series[0].required_corpus == pytest.approx(result.required_lumpsum * (1 + 0.08 / 12))
    corpus = [p.required_corpus for p in result.series]
    assert corpus == sorted(corpus)


def test_zero_return():
    result = calculate_goal(120_000, 1, 0, 0)
    assert result.inflated_goal == 120_000
    assert result.required_sip == 10_000
    assert result.required_lumpsum == 120_000


def test_zero_result():
    assert calculate_goal(0, 10, 6, 12) == ZERO_GOAL
    assert calculate_goal(100_000, 0, 6, 12) == ZERO_GOAL
    assert calculate_goal(100_000, -2, 6, 12) == ZERO_GOAL


def test_return_too_small_to_register():
    result = calculate_goal(1000, 1, 0, 1e-14)
    assert result.required_sip == pytest.approx(1000 / 12)
    assert result.required_lumpsum == pytest.approx(1000)


def test_overflowing_growth_does_not_raise():
    result = calculate_goal(1000, 100, 0, 5000)
    assert result.required_sip == 0
    assert result.required_lumpsum == 0
    assert result.series[-1].required_corpus == pytest.approx(1000)


@pytest.mark.parametrize("goal", [math.nan, math.inf, -math.inf])
def test_non_finite_goal_gives_zero_result(goal):
    assert calculate_goal(goal, 10, 6, 12) == ZERO_GOAL
