import pytest
from sme_valuation.models.request import CompanyFinancialProfile
from sme_valuation.valuation.multiples import compute_multiples_valuation


def _profile(**overrides) -> CompanyFinancialProfile:
    data = dict(
        sector="technology",
        company_size="small",
        age_years=3,
        annual_revenues=[800_000, 1_200_000, 1_800_000],
        ebitda=180_000,
        total_assets=500_000,
        total_liabilities=150_000,
        expected_growth_rate=40,
    )
    data.update(overrides)
    return CompanyFinancialProfile(**data)


def test_technology_example():
    result = compute_multiples_valuation(_profile())
    # 0.7 * (180k * 10) + 0.3 * (1.8M * 4)
    assert result.value == pytest.approx(3_420_000)
    assert result.details["ev_from_ebitda"] == pytest.approx(1_800_000)
    assert result.details["ev_from_revenue"] == pytest.approx(7_200_000)
    assert result.details["ev_ebitda_multiple"] == 10
    assert result.details["ev_revenue_multiple"] == 4


def test_range_uses_min_and_max_multiples():
    result = compute_multiples_valuation(_profile())
    assert result.min == pytest.approx(0.7 * 180_000 * 8 + 0.3 * 1_800_000 * 3)
    assert result.max == pytest.approx(0.7 * 180_000 * 12 + 0.3 * 1_800_000 * 5)
    assert result.min <= result.value <= result.max


def test_uses_latest_revenue():
    result = compute_multiples_valuation(_profile(sector="retail", annual_revenues=[9_000_000, 1_000_000]))
    assert result.details["latest_revenue"] == 1_000_000
    assert result.value == pytest.approx(0.7 * 180_000 * 7 + 0.3 * 1_000_000 * 0.75)


def test_zero_ebitda_returns_zero():
    result = compute_multiples_valuation(_profile(ebitda=0))
    assert result.value == 0.0
    assert result.details == {}
    assert result.min is None and result.max is None
    assert any("EBITDA" in w for w in result.warnings)


def test_unknown_sector_returns_zero():
    result = compute_multiples_valuation(_profile(sector="space_mining"))
    assert result.value == 0.0
    assert result.details == {}
    assert any("Unknown sector" in w for w in result.warnings)


def test_negative_ebitda_still_valued():
    result = compute_multiples_valuation(_profile(sector="manufacturing", ebitda=-100_000))
    assert result.value == pytest.approx(0.7 * -100_000 * 6 + 0.3 * 1_800_000 * 1)


def test_empty_revenue_history():
    result = compute_multiples_valuation(_profile(annual_revenues=[]))
    assert result.details["latest_revenue"] == 0.0
    assert result.value == pytest.approx(0.7 * 180_000 * 10)
