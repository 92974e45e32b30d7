"""Tax endpoints: GST breakup and new-regime income tax."""

from dataclasses import asdict

from fastapi import APIRouter

from fincalc.schemas import GstRequest, GstResponse, IncomeTaxRequest, IncomeTaxResponse
from fincalc.tax import calculate_gst, calculate_income_tax

router = APIRouter()


@router.post("/calculators:gst", response_model=GstResponse)
def gst(body: GstRequest) -> GstResponse:
    """Base, GST (split into CGST/SGST) and gross for an exclusive or inclusive amount."""
    return GstResponse.model_validate(asdict(calculate_gst(body.amount, body.rate_pct, body.mode)))


@router.post("/calculators:income-tax", response_model=IncomeTaxResponse)
def income_tax(body: IncomeTaxRequest) -> IncomeTaxResponse:
    """Slab-wise tax, cess and total under the new regime."""
    result = calculate_income_tax(body.gross_income, body.deductions)
    return IncomeTaxResponse.model_validate(asdict(result))
