"""XIRR: annualized return of irregularly dated cash flows (Newton-Raphson)."""

import math
from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Optional, Sequence

import structlog

logger = structlog.get_logger(__name__)

MAX_ITER = 100
TOLERANCE = 1e-7
DAYS_PER_YEAR = 365


@dataclass(frozen=True)
class CashFlow:
    """Investments are negative, redemptions positive."""

    date: date
    amount: float


@dataclass(frozen=True)
class XirrResult:
    rate_pct: float
    iterations: int
    converged: bool


def _as_datetime(when: date) -> datetime:
    """Plain dates count from midnight so they sort and subtract alongside datetimes."""
    if isinstance(when, datetime):
        return when
    return datetime.combine(when, time())


def _year_fraction(when: datetime, anchor: datetime) -> float:
    return (when - anchor).total_seconds() / 86_400 / DAYS_PER_YEAR


def _npv_and_derivative(rate: float, flows: list[tuple[float, float]]) -> tuple[float, float]:
    """f(rate) = sum(a / (1 + rate)^t) and its derivative."""
    f = 0.0
    df = 0.0
    for t, amount in flows:
        v = math.pow(1 + rate, t)
        f += amount / v
        df += -t * amount / (v * (1 + rate))
    return f, df


def solve_xirr(cashflows: Sequence[CashFlow], guess_pct: float = 10.0) -> XirrResult:
    """
    Solve for the rate that brings the NPV of *cashflows* to zero.

    Flows are sorted by date and timed in years (days / 365) from the
    earliest one. Newton-Raphson runs for at most 100 iterations and stops
    once a step is below 1e-7. When a step cannot be computed (zero
    derivative, negative base raised to a fractional power, overflow) the
    last finite rate is returned with ``converged=False``. ``iterations``
    counts the Newton updates that were actually applied.

    Fewer than two flows give a rate of 0.
    """
    if len(cashflows) < 2:
        return XirrResult(rate_pct=0.0, iterations=0, converged=False)

    ordered = sorted((_as_datetime(c.date), c.amount) for c in cashflows)
    anchor = ordered[0][0]
    flows = [(_year_fraction(when, anchor), amount) for when, amount in ordered]

    rate = guess_pct / 100
    for iteration in range(1, MAX_ITER + 1):
        try:
            f, df = _npv_and_derivative(rate, flows)
            new_rate = rate - f / df
        except (ValueError, ZeroDivisionError, OverflowError) as exc:
            logger.debug("xirr_step_failed", iteration=iteration, rate=rate, error=str(exc))
            return XirrResult(rate_pct=rate * 100, iterations=iteration - 1, converged=False)
        if not math.isfinite(new_rate):
            logger.debug("xirr_step_not_finite", iteration=iteration, rate=rate)
            return XirrResult(rate_pct=rate * 100, iterations=iteration - 1, converged=False)
        if abs(new_rate - rate) <= TOLERANCE:
            return XirrResult(rate_pct=new_rate * 100, iterations=iteration, converged=True)
        rate = new_rate

    logger.debug("xirr_max_iterations", rate=rate)
    return XirrResult(rate_pct=rate * 100, iterations=MAX_ITER, converged=False)


def xirr(cashflows: Sequence[CashFlow], guess_pct: float = 10.0) -> float:
    """Annualized XIRR in percent. See :func:`solve_xirr`."""
    return solve_xirr(cashflows, guess_pct).rate_pct


def parse_cashflows(raw: Optional[str]) -> list[CashFlow]:
    """
    Parse share-link cash flows, e.g. ``"2024-01-01:-100000|2024-12-31:112000"``.

    Parts without a valid ISO date or a finite amount are skipped.
    """
    if not raw:
        return []
    flows = []
    for part in raw.split("|"):
        day, _, amount_str = part.strip().rpartition(":")
        if not day or not amount_str:
            continue
        try:
            when = date.fromisoformat(day)
            amount = float(amount_str)
        except ValueError:
            continue
        if not math.isfinite(amount):
            continue
        flows.append(CashFlow(date=when, amount=amount))
    return flows
