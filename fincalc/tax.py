"""GST breakup and income tax under the new regime (FY 2024-25, illustrative)."""

import math
from dataclasses import dataclass
from typing import Literal

GstMode = Literal["exclusive", "inclusive"]

# (upper_bound, rate %) applied to the slice above the previous bound
TAX_SLABS = [
    (300_000, 0),
    (700_000, 5),
    (1_000_000, 10),
    (1_200_000, 15),
    (1_500_000, 20),
    (math.inf, 30),
]
CESS_RATE = 0.04  # health and education cess


@dataclass(frozen=True)
class GstBreakup:
    base: float
    tax: float
    cgst: float
    sgst: float
    gross: float


@dataclass(frozen=True)
class TaxBreakupRow:
    slab: str
    tax: float


@dataclass(frozen=True)
class TaxResult:
    taxable_income: float
    tax_payable: float
    cess: float
    total_tax: float
    breakup: tuple[TaxBreakupRow, ...]


def _non_negative(value: float) -> float:
    return max(0.0, value) if math.isfinite(value) else 0.0


def calculate_gst(amount: float, rate_pct: float, mode: GstMode) -> GstBreakup:
    """
    Split an amount into base, GST and gross.

    * exclusive: *amount* is the base, ``tax = base * r``
    * inclusive: *amount* is the gross, ``base = gross / (1 + r)``

    Tax is halved into CGST and SGST (intra-state supply).
    """
    r = _non_negative(rate_pct) / 100
    if mode == "exclusive":
        base = _non_negative(amount)
        tax = base * r
        gross = base + tax
    else:
        gross = _non_negative(amount)
        base = gross / (1 + r)
        tax = gross - base
    return GstBreakup(base=base, tax=tax, cgst=tax / 2, sgst=tax / 2, gross=gross)


def _slab_label(lower: float, upper: float, rate: int) -> str:
    top = "∞" if math.isinf(upper) else str(int(upper))
    return f"{int(lower) + 1}-{top} @ {rate}%"


def calculate_income_tax(gross_income: float, deductions: float = 0.0) -> TaxResult:
    """
    Slab tax on ``max(0, gross_income - deductions)`` plus 4% cess.

    A breakup row is emitted for every slab the income reaches, lowest first,
    so the rows always sum to ``tax_payable``.
    """
    income = max(0.0, _non_negative(gross_income) - _non_negative(deductions))

    tax = 0.0
    prev_bound = 0
    breakup = []
    for bound, rate in TAX_SLABS:
        span = max(0.0, min(income, bound) - prev_bound)
        if span <= 0:
            break
        part = span * rate / 100
        tax += part
        breakup.append(TaxBreakupRow(slab=_slab_label(prev_bound, bound, rate), tax=part))
        prev_bound = bound

    cess = tax * CESS_RATE
    return TaxResult(
        taxable_income=income,
        tax_payable=tax,
        cess=cess,
        total_tax=tax + cess,
        breakup=tuple(breakup),
    )
