"""Loan endpoints: EMI and amortization schedule."""

from dataclasses import asdict

from fastapi import APIRouter

from fincalc.amortization import calculate_emi
from fincalc.schemas import EmiRequest, EmiResponse

router = APIRouter()


@router.post("/calculators:emi", response_model=EmiResponse)
def emi(body: EmiRequest) -> EmiResponse:
    """Level monthly installment, totals and the full amortization schedule."""
    result = calculate_emi(body.principal, body.annual_rate_pct, body.months)
    return EmiResponse.model_validate(asdict(result))
