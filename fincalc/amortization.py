"""Loan amortization: level EMI and the month-by-month repayment schedule."""

import math
from dataclasses import dataclass

from fincalc.rates import is_positive_amount, monthly_rate, whole_months


@dataclass(frozen=True)
class EmiPoint:
    month: int
    principal: float
    interest: float
    balance: float


@dataclass(frozen=True)
class EmiResult:
    emi: float
    total_interest: float
    total_payment: float
    schedule: tuple[EmiPoint, ...]


ZERO_EMI = EmiResult(emi=0.0, total_interest=0.0, total_payment=0.0, schedule=())


def emi_amount(principal: float, r: float, n: int) -> float:
    """
    EMI = P * r * (1 + r)^n / ((1 + r)^n - 1); straight-line P / n when r == 0.

    Evaluated as ``P * r / (1 - (1 + r)^-n)`` through expm1/log1p: the
    denominator stays in (0, 1], so tiny rates tend to P / n and huge
    rates or terms tend to the interest-only P * r instead of failing.
    """
    if r == 0:
        return principal / n
    return principal * r / -math.expm1(-n * math.log1p(r))


def calculate_emi(principal: float, annual_rate_pct: float, months: float) -> EmiResult:
    """
    Equated monthly installment for a loan of *principal* over *months*.

    The schedule is built forward from the opening balance. The principal
    component of each payment is capped at the outstanding balance so the
    last installment never overpays, and the balance is floored at 0.
    """
    n = whole_months(months)
    r = monthly_rate(annual_rate_pct)
    if not is_positive_amount(principal) or n == 0:
        return ZERO_EMI

    emi = emi_amount(principal, r, n)

    balance = principal
    total_interest = 0.0
    schedule = []
    for month in range(1, n + 1):
        interest = balance * r
        principal_part = min(emi - interest, balance)
        balance = max(0.0, balance - principal_part)
        total_interest += interest
        schedule.append(
            EmiPoint(month=month, principal=principal_part, interest=interest, balance=balance)
        )

    return EmiResult(
        emi=emi,
        total_interest=total_interest,
        total_payment=principal + total_interest,
        schedule=tuple(schedule),
    )
