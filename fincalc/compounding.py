"""
Compound-growth calculators: Lumpsum, FD, SIP, RD, PPF, Step-up SIP and NPS.

All of them apply a periodic rate to a running balance and differ only in
how money goes in:

* Lumpsum / FD      - one upfront principal, ``value(t) = P * (1 + i)^t``
* RD / PPF / NPS    - fixed contribution each month,
                      ``value_t = value_{t-1} * (1 + i) + C``
* SIP               - fixed contribution at the start of each month, so the
                      contribution compounds in the month it is made
                      (annuity due); the series ends exactly on the closed-form
                      ``C * ((1 + i)^n - 1) / i * (1 + i)``
* Step-up SIP       - contribution grows by ``s`` once every 12 months

Invalid input (non-positive or non-finite amount, zero periods) returns the
zero result for the calculator: every scalar 0 and an empty series.
"""

import math
from dataclasses import dataclass
from typing import Callable

from fincalc.rates import (
    annuity_factor,
    growth_factor,
    is_positive_amount,
    monthly_rate,
    period_count,
    periodic_rate,
)


# --- Result types ---


@dataclass(frozen=True)
class LumpsumPoint:
    month: int
    invested: float
    value: float


@dataclass(frozen=True)
class LumpsumResult:
    future_value: float
    gains: float
    series: tuple[LumpsumPoint, ...]


@dataclass(frozen=True)
class FdPoint:
    year: int
    invested: float
    value: float


@dataclass(frozen=True)
class FdResult:
    maturity: float
    interest_earned: float
    series: tuple[FdPoint, ...]


@dataclass(frozen=True)
class ContributionPoint:
    """One month of a contribution plan: cumulative invested and running value."""

    month: int
    invested: float
    value: float


SipPoint = RdPoint = PpfPoint = NpsPoint = ContributionPoint


@dataclass(frozen=True)
class SipResult:
    maturity: float
    total_invested: float
    gains: float
    series: tuple[SipPoint, ...]


@dataclass(frozen=True)
class RdResult:
    maturity: float
    total_invested: float
    interest_earned: float
    series: tuple[RdPoint, ...]


@dataclass(frozen=True)
class PpfResult:
    maturity: float
    total_invested: float
    gains: float
    series: tuple[PpfPoint, ...]


@dataclass(frozen=True)
class StepUpSipPoint:
    month: int
    invested: float
    contribution: float
    value: float


@dataclass(frozen=True)
class StepUpSipResult:
    maturity: float
    total_invested: float
    gains: float
    series: tuple[StepUpSipPoint, ...]


@dataclass(frozen=True)
class NpsResult:
    corpus: float
    total_invested: float
    estimated_pension: float
    series: tuple[NpsPoint, ...]


# --- Shared recurrence ---


def _accumulate(
    contribution: Callable[[int], float],
    i: float,
    n: int,
    due: bool = False,
) -> list[tuple[int, float, float, float]]:
    """
    Run the monthly contribution recurrence for *n* months.

    Returns ``(month, contribution, invested_to_date, value)`` rows. With
    ``due=True`` the contribution is added before the month's growth.
    """
    rows = []
    value = 0.0
    invested = 0.0
    for month in range(1, n + 1):
        c = contribution(month)
        if due:
            value = (value + c) * (1 + i)
        else:
            value = value * (1 + i) + c
        invested += c
        rows.append((month, c, invested, value))
    return rows


def sip_future_value(monthly_investment: float, i: float, n: int) -> float:
    """Closed-form annuity-due value of *n* monthly contributions at rate *i*."""
    return monthly_investment * annuity_factor(i, n) * (1 + i)


# --- Single deposit ---


def calculate_lumpsum(principal: float, annual_return_pct: float, years: float) -> LumpsumResult:
    """Future value of a one-time investment with monthly compounding."""
    i = monthly_rate(annual_return_pct)
    n = period_count(years)
    if not is_positive_amount(principal) or n == 0:
        return LumpsumResult(future_value=0.0, gains=0.0, series=())

    series = []
    value = principal
    for month in range(1, n + 1):
        value = value * (1 + i)
        series.append(LumpsumPoint(month=month, invested=principal, value=value))

    future_value = principal * growth_factor(i, n)
    return LumpsumResult(future_value=future_value, gains=future_value - principal, series=tuple(series))


def calculate_fd(
    principal: float,
    annual_rate_pct: float,
    years: float,
    compounding_per_year: float = 4,
) -> FdResult:
    """
    Fixed deposit maturity with compounding *compounding_per_year* times a year
    (quarterly by default).

    The series is sampled once per year, ``ceil(years)`` points, each valued
    at the whole compounding periods elapsed by then (capped at the term).
    """
    freq = max(1, math.floor(compounding_per_year)) if math.isfinite(compounding_per_year) else 1
    i = periodic_rate(annual_rate_pct, freq)
    n = period_count(years, freq)
    if not is_positive_amount(principal) or n == 0:
        return FdResult(maturity=0.0, interest_earned=0.0, series=())

    maturity = principal * growth_factor(i, n)

    series = []
    for year in range(1, math.ceil(years) + 1):
        steps = min(n, year * freq)
        value = principal * growth_factor(i, steps)
        series.append(FdPoint(year=year, invested=principal, value=value))

    return FdResult(maturity=maturity, interest_earned=maturity - principal, series=tuple(series))


# --- Monthly contributions ---


def calculate_sip(monthly_investment: float, annual_return_pct: float, years: float) -> SipResult:
    """Monthly SIP with monthly compounding."""
    i = monthly_rate(annual_return_pct)
    n = period_count(years)
    if not is_positive_amount(monthly_investment) or n == 0:
        return SipResult(maturity=0.0, total_invested=0.0, gains=0.0, series=())

    rows = _accumulate(lambda _: monthly_investment, i, n, due=True)
    series = tuple(
        SipPoint(month=m, invested=monthly_investment * m, value=value) for m, _, _, value in rows
    )

    # closed form for the headline figure, the series is kept for charting;
    # a rate that cannot move 1 + i leaves the plain sum in the series
    maturity = sip_future_value(monthly_investment, i, n) if 1 + i != 1 else rows[-1][3]
    total_invested = monthly_investment * n
    return SipResult(
        maturity=maturity,
        total_invested=total_invested,
        gains=maturity - total_invested,
        series=series,
    )


def _fixed_contribution_series(monthly: float, i: float, n: int) -> tuple[ContributionPoint, ...]:
    return tuple(
        ContributionPoint(month=m, invested=monthly * m, value=value)
        for m, _, _, value in _accumulate(lambda _: monthly, i, n)
    )


def calculate_rd(monthly_deposit: float, annual_rate_pct: float, years: float) -> RdResult:
    """Recurring deposit: fixed monthly deposit, monthly compounding."""
    i = monthly_rate(annual_rate_pct)
    n = period_count(years)
    if not is_positive_amount(monthly_deposit) or n == 0:
        return RdResult(maturity=0.0, total_invested=0.0, interest_earned=0.0, series=())

    series = _fixed_contribution_series(monthly_deposit, i, n)
    maturity = series[-1].value
    total_invested = monthly_deposit * n
    return RdResult(
        maturity=maturity,
        total_invested=total_invested,
        interest_earned=maturity - total_invested,
        series=series,
    )


def calculate_ppf(monthly_contribution: float, annual_rate_pct: float, years: float) -> PpfResult:
    """
    Public Provident Fund projection.

    PPF interest is declared annually; it is approximated here as monthly
    accrual at R/12 on monthly contributions so the chart is smooth.
    """
    i = monthly_rate(annual_rate_pct)
    n = period_count(years)
    if not is_positive_amount(monthly_contribution) or n == 0:
        return PpfResult(maturity=0.0, total_invested=0.0, gains=0.0, series=())

    series = _fixed_contribution_series(monthly_contribution, i, n)
    maturity = series[-1].value
    total_invested = monthly_contribution * n
    return PpfResult(
        maturity=maturity,
        total_invested=total_invested,
        gains=maturity - total_invested,
        series=series,
    )


def calculate_step_up_sip(
    base_monthly: float,
    annual_return_pct: float,
    years: float,
    step_up_pct_per_year: float,
) -> StepUpSipResult:
    """SIP whose monthly amount rises by *step_up_pct_per_year* every 12 months."""
    i = monthly_rate(annual_return_pct)
    n = period_count(years)
    s = periodic_rate(step_up_pct_per_year, 1)
    if not is_positive_amount(base_monthly) or n == 0:
        return StepUpSipResult(maturity=0.0, total_invested=0.0, gains=0.0, series=())

    rows = _accumulate(lambda m: base_monthly * growth_factor(s, (m - 1) // 12), i, n)
    series = tuple(
        StepUpSipPoint(month=m, invested=invested, contribution=c, value=value)
        for m, c, invested, value in rows
    )
    maturity = series[-1].value
    total_invested = series[-1].invested
    return StepUpSipResult(
        maturity=maturity,
        total_invested=total_invested,
        gains=maturity - total_invested,
        series=series,
    )


def calculate_nps(
    monthly_contribution: float,
    years: float,
    pre_ret_annual_return_pct: float,
    post_ret_annuity_annual_pct: float,
) -> NpsResult:
    """
    NPS corpus at retirement and an estimated monthly pension.

    The pension is a flat monthly yield on the whole corpus at the annuity
    rate, not an annuity pricing model.
    """
    i = monthly_rate(pre_ret_annual_return_pct)
    n = period_count(years)
    if not is_positive_amount(monthly_contribution) or n == 0:
        return NpsResult(corpus=0.0, total_invested=0.0, estimated_pension=0.0, series=())

    series = _fixed_contribution_series(monthly_contribution, i, n)
    corpus = series[-1].value
    return NpsResult(
        corpus=corpus,
        total_invested=monthly_contribution * n,
        estimated_pension=corpus * monthly_rate(post_ret_annuity_annual_pct),
        series=series,
    )
