import pytest
from sme_valuation.models.request import CompanyFinancialProfile
from sme_valuation.valuation.scoring import calculate_cagr, calculate_investment_score


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


def _factor(result, name):
    return next(f for f in result.breakdown if f.name == name)


def _labels(result) -> list[str]:
    return [b.label for b in result.badges]


def test_technology_example():
    result = calculate_investment_score(_profile())
    points = [f.points for f in result.breakdown]
    # margin 10% → 15, debt 0.83x → 20, CAGR 50% → 20, small → 10, age 3 → 4, liquidity 3.33x → 10
    assert points == [15, 20, 20, 10, 4, 10]
    assert result.score == 79
    assert result.rating == "Good"
    assert _labels(result) == ["Low Leverage", "High Growth", "Liquid"]


def test_breakdown_order_and_max_points():
    result = calculate_investment_score(_profile())
    assert [f.name for f in result.breakdown] == [
        "EBITDA Margin", "Debt/EBITDA", "Revenue Growth (CAGR)", "Size / Scale", "Company Age", "Liquidity",
    ]
    assert [f.max_points for f in result.breakdown] == [25, 20, 20, 15, 10, 10]
    assert sum(f.max_points for f in result.breakdown) == 100


def test_display_values():
    result = calculate_investment_score(_profile())
    assert _factor(result, "EBITDA Margin").display_value == "10.0%"
    assert _factor(result, "Debt/EBITDA").display_value == "0.8x"
    assert _factor(result, "Revenue Growth (CAGR)").display_value == "50.0%"
    assert _factor(result, "Size / Scale").display_value == "Small Enterprise"
    assert _factor(result, "Company Age").display_value == "3 years"
    assert _factor(result, "Liquidity").display_value == "3.33x"


@pytest.mark.parametrize("ebitda, points, status", [
    (300_000, 25, "excellent"),  # 15%
    (200_000, 15, "good"),       # 10%
    (100_000, 8, "fair"),        # 5%
    (50_000, 3, "poor"),
    (-20_000, 3, "poor"),
])
def test_margin_tiers(ebitda, points, status):
    factor = _factor(calculate_investment_score(_profile(annual_revenues=[2_000_000], ebitda=ebitda)), "EBITDA Margin")
    assert (factor.points, factor.status) == (points, status)


@pytest.mark.parametrize("liabilities, points, status", [
    (200_000, 20, "excellent"),  # 2.0x
    (400_000, 12, "good"),       # 4.0x
    (600_000, 5, "fair"),        # 6.0x
    (650_000, 0, "poor"),
])
def test_debt_tiers(liabilities, points, status):
    profile = _profile(ebitda=100_000, total_liabilities=liabilities, total_assets=5_000_000)
    factor = _factor(calculate_investment_score(profile), "Debt/EBITDA")
    assert (factor.points, factor.status) == (points, status)


def test_non_positive_ebitda_debt_ratio_is_unbounded():
    result = calculate_investment_score(_profile(ebitda=-10_000))
    factor = _factor(result, "Debt/EBITDA")
    assert factor.points == 0
    assert factor.display_value == "999.0x"
    assert "High Leverage" in _labels(result)


@pytest.mark.parametrize("revenues, points, status", [
    ([100, 120], 20, "excellent"),
    ([100, 110], 15, "good"),
    ([100, 105], 10, "fair"),
    ([100, 100], 5, "poor"),
    ([100, 90], 0, "poor"),
])
def test_growth_tiers(revenues, points, status):
    factor = _factor(calculate_investment_score(_profile(annual_revenues=revenues)), "Revenue Growth (CAGR)")
    assert (factor.points, factor.status) == (points, status)


def test_single_year_history_scores_zero_growth():
    result = calculate_investment_score(_profile(annual_revenues=[100_000]))
    factor = _factor(result, "Revenue Growth (CAGR)")
    assert factor.points == 0
    assert factor.display_value == "0.0%"
    assert "High Growth" not in _labels(result)


def test_zero_starting_revenue_scores_zero_growth():
    factor = _factor(calculate_investment_score(_profile(annual_revenues=[0, 500_000])), "Revenue Growth (CAGR)")
    assert factor.points == 0


@pytest.mark.parametrize("size, points, status, display", [
    ("micro", 5, "fair", "Micro Enterprise"),
    ("small", 10, "good", "Small Enterprise"),
    ("medium", 15, "excellent", "Medium Enterprise"),
    ("large", 5, "fair", "large"),
])
def test_size_factor(size, points, status, display):
    factor = _factor(calculate_investment_score(_profile(company_size=size)), "Size / Scale")
    assert (factor.points, factor.status, factor.display_value) == (points, status, display)


@pytest.mark.parametrize("age, points, status", [(1, 2, "poor"), (2, 4, "fair"), (5, 7, "good"), (10, 10, "excellent")])
def test_age_tiers(age, points, status):
    factor = _factor(calculate_investment_score(_profile(age_years=age)), "Company Age")
    assert (factor.points, factor.status) == (points, status)


@pytest.mark.parametrize("assets, points, status", [
    (150_000, 10, "excellent"),  # 1.5x
    (120_000, 7, "good"),        # 1.2x
    (100_000, 4, "fair"),        # 1.0x
    (90_000, 0, "poor"),
])
def test_liquidity_tiers(assets, points, status):
    profile = _profile(total_assets=assets, total_liabilities=100_000)
    factor = _factor(calculate_investment_score(profile), "Liquidity")
    assert (factor.points, factor.status) == (points, status)


def test_no_liabilities_is_fully_liquid():
    result = calculate_investment_score(_profile(total_liabilities=0))
    assert _factor(result, "Liquidity").points == 10
    assert _factor(result, "Liquidity").display_value == "999.00x"


def test_top_performer():
    profile = _profile(
        company_size="medium",
        age_years=12,
        annual_revenues=[1_000_000, 1_300_000],
        ebitda=260_000,
        total_assets=900_000,
        total_liabilities=300_000,
    )
    result = calculate_investment_score(profile)
    assert result.score == 100
    assert result.rating == "Excellent"
    assert _labels(result) == [
        "Healthy EBITDA", "Low Leverage", "High Growth", "Liquid", "Established Company", "Top Performer",
    ]


def test_distressed_company_red_flags():
    profile = _profile(
        company_size="micro",
        age_years=1,
        annual_revenues=[1_000_000, 800_000],
        ebitda=20_000,
        total_assets=200_000,
        total_liabilities=400_000,
    )
    result = calculate_investment_score(profile)
    # margin 2.5% → 3, debt 20x → 0, CAGR -20% → 0, micro → 5, age 1 → 2, liquidity 0.5x → 0
    assert result.score == 10
    assert result.rating == "Poor"
    assert _labels(result) == ["Low Margin", "High Leverage", "Liquidity Risk"]
    assert [b.tone for b in result.badges] == ["warning", "danger", "danger"]


@pytest.mark.parametrize("overrides, score, rating", [
    (dict(company_size="medium", age_years=12, annual_revenues=[1_000_000, 1_000_000], ebitda=150_000,
          total_assets=900_000, total_liabilities=300_000), 85, "Excellent"),
    (dict(company_size="small", age_years=6, annual_revenues=[1_000_000, 1_000_000], ebitda=100_000,
          total_assets=500_000, total_liabilities=200_000), 67, "Good"),
    (dict(company_size="small", age_years=6, annual_revenues=[1_000_000, 1_000_000], ebitda=100_000,
          total_assets=500_000, total_liabilities=350_000), 56, "Fair"),
])
def test_rating_thresholds(overrides, score, rating):
    result = calculate_investment_score(_profile(**overrides))
    assert result.score == score
    assert result.rating == rating


def test_score_bounds_across_inputs():
    for ebitda in [-100_000, 0, 10_000, 500_000]:
        for revenues in [[], [0], [100_000], [100_000, 50_000], [10_000, 2_000_000]]:
            for liabilities in [0, 100_000, 5_000_000]:
                result = calculate_investment_score(
                    _profile(ebitda=ebitda, annual_revenues=revenues, total_liabilities=liabilities)
                )
                assert 0 <= result.score <= 100
                assert all(f.points <= f.max_points for f in result.breakdown)


def test_calculate_cagr():
    assert calculate_cagr([800_000, 1_200_000, 1_800_000]) == pytest.approx(50.0)
    assert calculate_cagr([100]) == 0.0
    assert calculate_cagr([]) == 0.0
    assert calculate_cagr([0, 100]) == 0.0
    assert calculate_cagr([100, 0]) == pytest.approx(-100.0)
