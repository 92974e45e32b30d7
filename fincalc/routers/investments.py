"""Investment endpoints: lumpsum, FD, SIP, RD, PPF, step-up SIP, NPS, SWP, goal planner, XIRR."""

from dataclasses import asdict
from typing import Optional

import structlog
from fastapi import APIRouter, HTTPException, Query

from fincalc import compounding
from fincalc.goal import calculate_goal
from fincalc.schemas import (
    FdRequest,
    FdResponse,
    GoalRequest,
    GoalResponse,
    LumpsumRequest,
    LumpsumResponse,
    NpsRequest,
    NpsResponse,
    PpfRequest,
    PpfResponse,
    RdRequest,
    RdResponse,
    SipRequest,
    SipResponse,
    StepUpSipRequest,
    StepUpSipResponse,
    SwpRequest,
    SwpResponse,
    XirrRequest,
    XirrResponse,
)
from fincalc.withdrawal import calculate_swp
from fincalc.xirr import CashFlow, XirrResult, parse_cashflows, solve_xirr

logger = structlog.get_logger(__name__)

router = APIRouter()


@router.post("/calculators:lumpsum", response_model=LumpsumResponse)
def lumpsum(body: LumpsumRequest) -> LumpsumResponse:
    result = compounding.calculate_lumpsum(body.principal, body.annual_return_pct, body.years)
    return LumpsumResponse.model_validate(asdict(result))


@router.post("/calculators:fd", response_model=FdResponse)
def fd(body: FdRequest) -> FdResponse:
    """Fixed deposit maturity with a yearly series."""
    result = compounding.calculate_fd(
        body.principal, body.annual_rate_pct, body.years, body.compounding_per_year
    )
    return FdResponse.model_validate(asdict(result))


@router.post("/calculators:sip", response_model=SipResponse)
def sip(body: SipRequest) -> SipResponse:
    result = compounding.calculate_sip(body.monthly_investment, body.annual_return_pct, body.years)
    return SipResponse.model_validate(asdict(result))


@router.post("/calculators:rd", response_model=RdResponse)
def rd(body: RdRequest) -> RdResponse:
    result = compounding.calculate_rd(body.monthly_deposit, body.annual_rate_pct, body.years)
    return RdResponse.model_validate(asdict(result))


@router.post("/calculators:ppf", response_model=PpfResponse)
def ppf(body: PpfRequest) -> PpfResponse:
    result = compounding.calculate_ppf(body.monthly_contribution, body.annual_rate_pct, body.years)
    return PpfResponse.model_validate(asdict(result))


@router.post("/calculators:step-up-sip", response_model=StepUpSipResponse)
def step_up_sip(body: StepUpSipRequest) -> StepUpSipResponse:
    """SIP whose monthly amount steps up once a year."""
    result = compounding.calculate_step_up_sip(
        body.base_monthly, body.annual_return_pct, body.years, body.step_up_percent_per_year
    )
    return StepUpSipResponse.model_validate(asdict(result))


@router.post("/calculators:nps", response_model=NpsResponse)
def nps(body: NpsRequest) -> NpsResponse:
    """NPS corpus at retirement and estimated monthly pension."""
    result = compounding.calculate_nps(
        body.monthly_contribution,
        body.years,
        body.pre_ret_annual_return_pct,
        body.post_ret_annuity_annual_pct,
    )
    return NpsResponse.model_validate(asdict(result))


@router.post("/calculators:swp", response_model=SwpResponse)
def swp(body: SwpRequest) -> SwpResponse:
    """Withdrawal projection; stops early if the corpus runs out."""
    result = calculate_swp(
        body.initial_corpus, body.monthly_withdrawal, body.annual_return_pct, body.years
    )
    return SwpResponse.model_validate(asdict(result))


@router.post("/calculators:goal-planner", response_model=GoalResponse)
def goal_planner(body: GoalRequest) -> GoalResponse:
    """Required monthly SIP and lumpsum for an inflation-adjusted goal."""
    result = calculate_goal(body.goal_today, body.years, body.inflation_pct, body.annual_return_pct)
    return GoalResponse.model_validate(asdict(result))


def _xirr_response(result: XirrResult) -> XirrResponse:
    if not result.converged:
        logger.info("xirr_not_converged", iterations=result.iterations, rate_pct=result.rate_pct)
    return XirrResponse(xirr=result.rate_pct, iterations=result.iterations, converged=result.converged)


@router.post("/calculators:xirr", response_model=XirrResponse)
def xirr(body: XirrRequest) -> XirrResponse:
    """XIRR (percent) for dated cash flows; investments negative, redemptions positive."""
    flows = [CashFlow(date=c.date, amount=c.amount) for c in body.cashflows]
    return _xirr_response(solve_xirr(flows, body.guess_pct))


@router.get("/calculators:xirr", response_model=XirrResponse)
def xirr_from_link(
    cf: Optional[str] = Query(None, description="e.g. 2024-01-01:-100000|2024-12-31:112000"),
    guess_pct: float = Query(10.0, alias="guessPct", gt=-100, le=1000),
) -> XirrResponse:
    """XIRR for cash flows encoded in a shareable link."""
    flows = parse_cashflows(cf)
    if len(flows) < 2:
        raise HTTPException(status_code=422, detail="at least two valid cash flows are required")
    return _xirr_response(solve_xirr(flows, guess_pct))
