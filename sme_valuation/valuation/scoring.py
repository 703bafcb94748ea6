"""Investment readiness score.

Six independent factors are scored from the company profile and summed into a
0-100 score. Factor order is fixed and is the order of the breakdown:

    EBITDA margin     25
    Debt/EBITDA       20
    Revenue CAGR      20
    Company size      15
    Age               10
    Liquidity         10
"""
from dataclasses import dataclass
from typing import Callable

from sme_valuation.models.request import CompanyFinancialProfile
from sme_valuation.models.valuations import Badge, InvestmentScoreResult, ScoreFactor
from sme_valuation.valuation.formatting import format_percentage
from sme_valuation.valuation.reference_data import DEFAULT_SIZE_SCORE_POINTS, get_size

# Stand-in ratio when the denominator is non-positive
UNBOUNDED_RATIO = 999.0

Tier = tuple[float, int, str]


@dataclass(frozen=True)
class ScoringMetrics:
    margin: float
    debt_ratio: float
    cagr: float
    has_growth_history: bool
    liquidity: float


def calculate_cagr(revenues: list[float]) -> float:
    """Compound annual growth rate of a revenue history, in percent.

    Returns 0 with fewer than two points or a non-positive starting revenue.
    """
    if len(revenues) < 2 or revenues[0] <= 0:
        return 0.0
    years = len(revenues) - 1
    return ((revenues[-1] / revenues[0]) ** (1 / years) - 1) * 100


def compute_metrics(profile: CompanyFinancialProfile) -> ScoringMetrics:
    latest_revenue = profile.latest_revenue
    revenues = profile.annual_revenues
    return ScoringMetrics(
        margin=profile.ebitda / latest_revenue * 100 if latest_revenue > 0 else 0.0,
        debt_ratio=profile.total_liabilities / profile.ebitda if profile.ebitda > 0 else UNBOUNDED_RATIO,
        cagr=calculate_cagr(revenues),
        has_growth_history=len(revenues) >= 2 and revenues[0] > 0,
        liquidity=profile.total_assets / profile.total_liabilities if profile.total_liabilities > 0 else UNBOUNDED_RATIO,
    )


def _tiered(value: float, tiers: tuple[Tier, ...], fallback: tuple[int, str], lower_is_better: bool = False) -> tuple[int, str]:
    for threshold, points, status in tiers:
        if (value <= threshold) if lower_is_better else (value >= threshold):
            return points, status
    return fallback


def _margin_factor(metrics: ScoringMetrics, profile: CompanyFinancialProfile) -> ScoreFactor:
    points, status = _tiered(
        metrics.margin,
        ((15, 25, "excellent"), (10, 15, "good"), (5, 8, "fair")),
        (3, "poor"),
    )
    return ScoreFactor(
        name="EBITDA Margin", points=points, max_points=25,
        display_value=format_percentage(metrics.margin), status=status,
    )


def _debt_factor(metrics: ScoringMetrics, profile: CompanyFinancialProfile) -> ScoreFactor:
    points, status = _tiered(
        metrics.debt_ratio,
        ((2, 20, "excellent"), (4, 12, "good"), (6, 5, "fair")),
        (0, "poor"),
        lower_is_better=True,
    )
    return ScoreFactor(
        name="Debt/EBITDA", points=points, max_points=20,
        display_value=f"{metrics.debt_ratio:.1f}x", status=status,
    )


def _growth_factor(metrics: ScoringMetrics, profile: CompanyFinancialProfile) -> ScoreFactor:
    if metrics.has_growth_history:
        points, status = _tiered(
            metrics.cagr,
            ((15, 20, "excellent"), (10, 15, "good"), (5, 10, "fair"), (0, 5, "poor")),
            (0, "poor"),
        )
    else:
        points, status = 0, "poor"
    return ScoreFactor(
        name="Revenue Growth (CAGR)", points=points, max_points=20,
        display_value=format_percentage(metrics.cagr), status=status,
    )


def _size_factor(metrics: ScoringMetrics, profile: CompanyFinancialProfile) -> ScoreFactor:
    size = get_size(profile.company_size)
    points = size.score_points if size else DEFAULT_SIZE_SCORE_POINTS
    status = "excellent" if points >= 12 else "good" if points >= 8 else "fair"
    return ScoreFactor(
        name="Size / Scale", points=points, max_points=15,
        display_value=size.name if size else profile.company_size, status=status,
    )


def _age_factor(metrics: ScoringMetrics, profile: CompanyFinancialProfile) -> ScoreFactor:
    points, status = _tiered(
        profile.age_years,
        ((10, 10, "excellent"), (5, 7, "good"), (2, 4, "fair")),
        (2, "poor"),
    )
    unit = "year" if profile.age_years == 1 else "years"
    return ScoreFactor(
        name="Company Age", points=points, max_points=10,
        display_value=f"{profile.age_years} {unit}", status=status,
    )


def _liquidity_factor(metrics: ScoringMetrics, profile: CompanyFinancialProfile) -> ScoreFactor:
    points, status = _tiered(
        metrics.liquidity,
        ((1.5, 10, "excellent"), (1.2, 7, "good"), (1.0, 4, "fair")),
        (0, "poor"),
    )
    return ScoreFactor(
        name="Liquidity", points=points, max_points=10,
        display_value=f"{metrics.liquidity:.2f}x", status=status,
    )


SCORING_FACTORS: tuple[Callable[[ScoringMetrics, CompanyFinancialProfile], ScoreFactor], ...] = (
    _margin_factor,
    _debt_factor,
    _growth_factor,
    _size_factor,
    _age_factor,
    _liquidity_factor,
)


def _rating(score: int) -> str:
    if score >= 80:
        return "Excellent"
    if score >= 60:
        return "Good"
    if score >= 40:
        return "Fair"
    return "Poor"


def _badges(metrics: ScoringMetrics, profile: CompanyFinancialProfile, score: int) -> list[Badge]:
    badges: list[Badge] = []
    if metrics.margin >= 15:
        badges.append(Badge(label="Healthy EBITDA", tone="success"))
    if metrics.debt_ratio <= 2:
        badges.append(Badge(label="Low Leverage", tone="success"))
    if metrics.cagr >= 10:
        badges.append(Badge(label="High Growth", tone="success"))
    if metrics.liquidity >= 1.5:
        badges.append(Badge(label="Liquid", tone="info"))
    if profile.age_years >= 10:
        badges.append(Badge(label="Established Company", tone="info"))
    if score >= 80:
        badges.append(Badge(label="Top Performer", tone="accent"))

    # Red flags
    if metrics.margin < 5:
        badges.append(Badge(label="Low Margin", tone="warning"))
    if metrics.debt_ratio > 6:
        badges.append(Badge(label="High Leverage", tone="danger"))
    if metrics.liquidity < 1:
        badges.append(Badge(label="Liquidity Risk", tone="danger"))
    return badges


def calculate_investment_score(profile: CompanyFinancialProfile) -> InvestmentScoreResult:
    """Score investment readiness from the raw profile (valuation outputs are not consulted)."""
    metrics = compute_metrics(profile)
    breakdown = [factor(metrics, profile) for factor in SCORING_FACTORS]
    score = sum(item.points for item in breakdown)
    return InvestmentScoreResult(
        score=score,
        rating=_rating(score),
        breakdown=breakdown,
        badges=_badges(metrics, profile, score),
    )
