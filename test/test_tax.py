# Test type: Unit
# Validation: GST exclusive/inclusive split, income tax slabs, breakup labels, cess, monotonicity.
# Command: uv run pytest test/test_tax.py -v

import pytest

from fincalc.tax import calculate_gst, calculate_income_tax


def test_gst_exclusive():
    r = calculate_gst(1000, 18, "exclusive")
    assert round(r.tax) == 180
    assert round(r.gross) == 1180
    assert r.base == 1000
    assert r.cgst == r.sgst == pytest.approx(90)


def test_gst_inclusive_inverts_exclusive():
    r = calculate_gst(1180, 18, "inclusive")
    assert round(r.base) == 1000
    assert round(r.tax) == 180
    assert r.gross == 1180
    assert r.cgst + r.sgst == pytest.approx(r.tax)


def test_gst_clamps_negatives():
    r = calculate_gst(-500, -5, "exclusive")
    assert (r.base, r.tax, r.gross) == (0, 0, 0)


def test_income_tax_ten_lakh():
    result = calculate_income_tax(1_000_000)
    assert result.taxable_income == 1_000_000
    assert result.tax_payable == pytest.approx(50_000)
    assert result.cess == pytest.approx(2_000)
    assert result.total_tax == pytest.approx(52_000)
    assert [row.slab for row in result.breakup] == [
        "1-300000 @ 0%",
        "300001-700000 @ 5%",
        "700001-1000000 @ 10%",
    ]


def test_income_tax_top_slab():
    result = calculate_income_tax(2_000_000)
    assert result.tax_payable == pytest.approx(290_000)
    assert result.breakup[-1].slab == "1500001-∞ @ 30%"
    assert result.breakup[-1].tax == pytest.approx(150_000)
    assert len(result.breakup) == 6


def test_income_tax_deductions():
    with_deduction = calculate_income_tax(1_050_000, 50_000)
    assert with_deduction.taxable_income == 1_000_000
    assert with_deduction.total_tax == pytest.approx(calculate_income_tax(1_000_000).total_tax)
    assert calculate_income_tax(100_000, 500_000).taxable_income == 0


def test_income_tax_zero_income():
    result = calculate_income_tax(0)
    assert (result.taxable_income, result.tax_payable, result.cess, result.total_tax) == (0, 0, 0, 0)
    assert result.breakup == ()


def test_breakup_sums_to_tax_payable():
    for income in [250_000, 650_000, 1_150_000, 1_499_999, 3_750_000]:
        result = calculate_income_tax(income)
        assert sum(row.tax for row in result.breakup) == pytest.approx(result.tax_payable)


def test_total_tax_non_decreasing_in_income():
    totals = [calculate_income_tax(g, 75_000).total_tax for g in range(0, 4_000_001, 25_000)]
    assert all(b >= a for a, b in zip(totals, totals[1:]))
