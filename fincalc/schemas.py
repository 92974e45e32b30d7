"""Pydantic request/response models for the calculators API.

Fields are snake_case in Python and camelCase on the wire; both spellings
are accepted on input. Request bounds mirror the calculator form limits.
"""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from fincalc.tax import GstMode

MAX_AMOUNT = 1e12
MAX_RATE_PCT = 100
MAX_YEARS = 100


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# --- EMI ---


class EmiRequest(CamelModel):
    principal: float = Field(..., ge=0, le=MAX_AMOUNT)
    annual_rate_pct: float = Field(..., ge=0, le=MAX_RATE_PCT)
    months: int = Field(..., ge=0, le=MAX_YEARS * 12)


class EmiPointOut(CamelModel):
    month: int
    principal: float
    interest: float
    balance: float


class EmiResponse(CamelModel):
    emi: float
    total_interest: float
    total_payment: float
    schedule: list[EmiPointOut]


# --- Lumpsum / FD ---


class LumpsumRequest(CamelModel):
    principal: float = Field(..., ge=0, le=MAX_AMOUNT)
    annual_return_pct: float = Field(..., ge=0, le=MAX_RATE_PCT)
    years: float = Field(..., ge=0, le=MAX_YEARS)


class LumpsumPointOut(CamelModel):
    month: int
    invested: float
    value: float


class LumpsumResponse(CamelModel):
    future_value: float
    gains: float
    series: list[LumpsumPointOut]


class FdRequest(CamelModel):
    principal: float = Field(..., ge=0, le=MAX_AMOUNT)
    annual_rate_pct: float = Field(..., ge=0, le=MAX_RATE_PCT)
    years: float = Field(..., ge=0, le=MAX_YEARS)
    compounding_per_year: int = Field(4, ge=1, le=365)


class FdPointOut(CamelModel):
    year: int
    invested: float
    value: float


class FdResponse(CamelModel):
    maturity: float
    interest_earned: float
    series: list[FdPointOut]


# --- Monthly contribution plans ---


class ContributionPointOut(CamelModel):
    month: int
    invested: float
    value: float


class SipRequest(CamelModel):
    monthly_investment: float = Field(..., ge=0, le=MAX_AMOUNT)
    annual_return_pct: float = Field(..., ge=0, le=MAX_RATE_PCT)
    years: float = Field(..., ge=0, le=MAX_YEARS)


class SipResponse(CamelModel):
    maturity: float
    total_invested: float
    gains: float
    series: list[ContributionPointOut]


class RdRequest(CamelModel):
    monthly_deposit: float = Field(..., ge=0, le=MAX_AMOUNT)
    annual_rate_pct: float = Field(..., ge=0, le=MAX_RATE_PCT)
    years: float = Field(..., ge=0, le=MAX_YEARS)


class RdResponse(CamelModel):
    maturity: float
    total_invested: float
    interest_earned: float
    series: list[ContributionPointOut]


class PpfRequest(CamelModel):
    monthly_contribution: float = Field(..., ge=0, le=MAX_AMOUNT)
    annual_rate_pct: float = Field(..., ge=0, le=MAX_RATE_PCT)
    years: float = Field(..., ge=0, le=MAX_YEARS)


class PpfResponse(CamelModel):
    maturity: float
    total_invested: float
    gains: float
    series: list[ContributionPointOut]


class StepUpSipRequest(CamelModel):
    base_monthly: float = Field(..., ge=0, le=MAX_AMOUNT)
    annual_return_pct: float = Field(..., ge=0, le=MAX_RATE_PCT)
    years: float = Field(..., ge=0, le=MAX_YEARS)
    step_up_percent_per_year: float = Field(0, ge=0, le=MAX_RATE_PCT)


class StepUpSipPointOut(CamelModel):
    month: int
    invested: float
    contribution: float
    value: float


class StepUpSipResponse(CamelModel):
    maturity: float
    total_invested: float
    gains: float
    series: list[StepUpSipPointOut]


class NpsRequest(CamelModel):
    monthly_contribution: float = Field(..., ge=0, le=MAX_AMOUNT)
    years: float = Field(..., ge=0, le=MAX_YEARS)
    pre_ret_annual_return_pct: float = Field(..., ge=0, le=MAX_RATE_PCT)
    post_ret_annuity_annual_pct: float = Field(..., ge=0, le=MAX_RATE_PCT)


class NpsResponse(CamelModel):
    corpus: float
    total_invested: float
    estimated_pension: float
    series: list[ContributionPointOut]


# --- SWP ---


class SwpRequest(CamelModel):
    initial_corpus: float = Field(..., ge=0, le=MAX_AMOUNT)
    monthly_withdrawal: float = Field(..., ge=0, le=MAX_AMOUNT)
    annual_return_pct: float = Field(..., ge=0, le=MAX_RATE_PCT)
    years: float = Field(..., ge=0, le=MAX_YEARS)


class SwpPointOut(CamelModel):
    month: int
    withdrawal: float
    interest: float
    balance: float


class SwpResponse(CamelModel):
    months_survived: int
    total_withdrawn: float
    total_interest: float
    ending_balance: float
    series: list[SwpPointOut]


# --- Goal planner ---


class GoalRequest(CamelModel):
    goal_today: float = Field(..., ge=0, le=MAX_AMOUNT)
    years: float = Field(..., ge=0, le=MAX_YEARS)
    inflation_pct: float = Field(..., ge=0, le=MAX_RATE_PCT)
    annual_return_pct: float = Field(..., ge=0, le=MAX_RATE_PCT)


class GoalPointOut(CamelModel):
    month: int
    required_corpus: float


class GoalResponse(CamelModel):
    inflated_goal: float
    required_sip: float
    required_lumpsum: float
    series: list[GoalPointOut]


# --- Tax ---


class GstRequest(CamelModel):
    amount: float = Field(..., ge=0, le=MAX_AMOUNT)
    rate_pct: float = Field(..., ge=0, le=MAX_RATE_PCT)
    mode: GstMode = "exclusive"


class GstResponse(CamelModel):
    base: float
    tax: float
    cgst: float
    sgst: float
    gross: float


class IncomeTaxRequest(CamelModel):
    gross_income: float = Field(..., ge=0, le=MAX_AMOUNT)
    deductions: float = Field(0, ge=0, le=MAX_AMOUNT)


class TaxBreakupOut(CamelModel):
    slab: str
    tax: float


class IncomeTaxResponse(CamelModel):
    taxable_income: float
    tax_payable: float
    cess: float
    total_tax: float
    breakup: list[TaxBreakupOut]


# --- XIRR ---


class CashFlowIn(CamelModel):
    """One dated flow: negative for money invested, positive for money received."""

    date: date
    amount: float = Field(..., ge=-MAX_AMOUNT, le=MAX_AMOUNT)


class XirrRequest(CamelModel):
    cashflows: list[CashFlowIn] = Field(..., min_length=2)
    guess_pct: float = Field(10.0, gt=-100, le=1000)


class XirrResponse(CamelModel):
    xirr: float
    iterations: int
    converged: bool


# --- Diagnostics ---


class EndpointTimingOut(CamelModel):
    method: str
    path: str
    count: int
    avg_ms: float
    max_ms: float


class PerformanceResponse(CamelModel):
    memory_mb: float
    threads: int
    endpoints: list[EndpointTimingOut]
