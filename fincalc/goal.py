"""Goal planner: what it takes today to reach an inflation-adjusted target."""

import math
from dataclasses import dataclass

from fincalc.compounding import sip_future_value
from fincalc.rates import (
    growth_factor,
    is_positive_amount,
    monthly_rate,
    period_count,
    periodic_rate,
)


@dataclass(frozen=True)
class GoalPoint:
    month: int
    required_corpus: float


@dataclass(frozen=True)
class GoalResult:
    inflated_goal: float
    required_sip: float
    required_lumpsum: float
    series: tuple[GoalPoint, ...]


ZERO_GOAL = GoalResult(inflated_goal=0.0, required_sip=0.0, required_lumpsum=0.0, series=())


def calculate_goal(
    goal_today: float,
    years: float,
    inflation_pct: float,
    annual_return_pct: float,
) -> GoalResult:
    """
    Solve for the monthly SIP and the one-time lumpsum that reach *goal_today*
    (in today's money) after *years*.

    1. Inflate the goal annually: ``goal_today * (1 + inflation)^years``.
    2. Invert the SIP annuity-due formula for the monthly contribution.
    3. Discount the inflated goal over all months for the lumpsum.
    4. ``series[m].required_corpus`` is the amount that must already be held
       at month ``m`` to reach the goal with no further contributions.
    """
    y = max(0.0, years) if math.isfinite(years) else 0.0
    inflation = periodic_rate(inflation_pct, 1)
    i = monthly_rate(annual_return_pct)
    n = period_count(y)
    if not is_positive_amount(goal_today) or n == 0:
        return ZERO_GOAL

    inflated_goal = goal_today * growth_factor(inflation, y)
    required_sip = inflated_goal / sip_future_value(1.0, i, n)
    required_lumpsum = inflated_goal / growth_factor(i, n)

    series = tuple(
        GoalPoint(month=m, required_corpus=inflated_goal / growth_factor(i, n - m))
        for m in range(1, n + 1)
    )
    return GoalResult(
        inflated_goal=inflated_goal,
        required_sip=required_sip,
        required_lumpsum=required_lumpsum,
        series=series,
    )
