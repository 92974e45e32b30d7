"""Rate and period helpers shared by the calculators.

Every calculator clamps its inputs the same way: negative or non-finite
rates become 0, durations are floored to whole periods and never negative.
"""

import math


def is_positive_amount(value: float) -> bool:
    """True for finite amounts strictly above zero."""
    return math.isfinite(value) and value > 0


def periodic_rate(annual_pct: float, periods_per_year: int = 12) -> float:
    """Annual percentage -> decimal rate per period (r = pct / periods / 100)."""
    if not math.isfinite(annual_pct):
        return 0.0
    return max(0.0, annual_pct) / periods_per_year / 100


def monthly_rate(annual_pct: float) -> float:
    return periodic_rate(annual_pct, 12)


def period_count(years: float, periods_per_year: int = 12) -> int:
    """Whole periods in *years*; 0 for negative, non-finite or overflowing input."""
    if not math.isfinite(years):
        return 0
    total = years * periods_per_year
    if not math.isfinite(total):
        return 0
    return max(0, math.floor(total))


def whole_months(months: float) -> int:
    """Floor a month count to an int, 0 when negative or non-finite."""
    if not math.isfinite(months):
        return 0
    return max(0, math.floor(months))


def growth_factor(rate: float, periods: float) -> float:
    """(1 + rate)^periods, or inf once the float overflows."""
    try:
        return (1 + rate) ** periods
    except OverflowError:
        return math.inf


def annuity_factor(rate: float, periods: int) -> float:
    """
    ((1 + rate)^periods - 1) / rate, the future value of 1 paid each period.

    Computed with expm1/log1p so a rate too small to move ``1 + rate`` still
    gives ``periods`` instead of 0. Overflow gives inf.
    """
    if rate == 0:
        return float(periods)
    try:
        return math.expm1(periods * math.log1p(rate)) / rate
    except OverflowError:
        return math.inf
