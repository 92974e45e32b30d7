"""Systematic Withdrawal Plan: a corpus drawn down monthly while it keeps growing."""

import math
from dataclasses import dataclass

from fincalc.rates import is_positive_amount, monthly_rate, period_count


@dataclass(frozen=True)
class SwpPoint:
    month: int
    withdrawal: float
    interest: float
    balance: float


@dataclass(frozen=True)
class SwpResult:
    months_survived: int
    total_withdrawn: float
    total_interest: float
    ending_balance: float
    series: tuple[SwpPoint, ...]


ZERO_SWP = SwpResult(
    months_survived=0, total_withdrawn=0.0, total_interest=0.0, ending_balance=0.0, series=()
)


def calculate_swp(
    initial_corpus: float,
    monthly_withdrawal: float,
    annual_return_pct: float,
    years: float,
) -> SwpResult:
    """
    Project monthly withdrawals from *initial_corpus* for up to *years*.

    Each month interest accrues on the balance first, then the withdrawal is
    taken, capped at what is left. The projection stops early once the
    balance hits 0, so ``months_survived`` can be shorter than the requested
    term. A negative withdrawal is treated as 0.
    """
    i = monthly_rate(annual_return_pct)
    n_max = period_count(years)
    if not is_positive_amount(initial_corpus) or not math.isfinite(monthly_withdrawal):
        return ZERO_SWP
    withdrawal = max(0.0, monthly_withdrawal)

    balance = initial_corpus
    total_withdrawn = 0.0
    total_interest = 0.0
    series = []
    month = 0
    while month < n_max and balance > 0:
        month += 1
        interest = balance * i
        balance += interest
        taken = min(withdrawal, balance)
        balance -= taken
        total_withdrawn += taken
        total_interest += interest
        series.append(SwpPoint(month=month, withdrawal=taken, interest=interest, balance=balance))

    if not series:
        return ZERO_SWP

    return SwpResult(
        months_survived=month,
        total_withdrawn=total_withdrawn,
        total_interest=total_interest,
        ending_balance=balance,
        series=tuple(series),
    )
