import logging
from sme_valuation.models.request import CompanyFinancialProfile
from sme_valuation.models.valuations import (
    MethodologyResults, MethodologyWeights, ScenarioView, ValuationRange, ValuationResult,
)
from sme_valuation.valuation.asset import compute_asset_valuation
from sme_valuation.valuation.dcf import compute_dcf_valuation
from sme_valuation.valuation.multiples import compute_multiples_valuation
from sme_valuation.valuation.reference_data import RANGE_BAND, get_scenario, get_size
from sme_valuation.valuation.scoring import calculate_investment_score
from sme_valuation.valuation.wacc import estimate_wacc

logger = logging.getLogger(__name__)

WEIGHTS = MethodologyWeights(multiples=0.4, dcf=0.4, asset=0.2)


def _scenario_view(scenario_key: str, enterprise_value: float) -> ScenarioView | None:
    """Scenario adjustment shown alongside, never applied to, the enterprise value."""
    scenario = get_scenario(scenario_key)
    if scenario is None:
        return None
    return ScenarioView(
        key=scenario_key,
        name=scenario.name,
        adjustment=scenario.adjustment,
        adjusted_value=enterprise_value * (1 + scenario.adjustment),
    )


def calculate_valuation(profile: CompanyFinancialProfile) -> ValuationResult:
    """Run the three valuation methods, blend them with fixed weights and attach score and WACC."""
    multiples = compute_multiples_valuation(profile)
    dcf = compute_dcf_valuation(profile)
    asset = compute_asset_valuation(profile)

    weighted_value = (
        multiples.value * WEIGHTS.multiples
        + dcf.value * WEIGHTS.dcf
        + asset.value * WEIGHTS.asset
    )

    size = get_size(profile.company_size)
    size_discount = size.size_discount if size else 0.0
    enterprise_value = weighted_value * (1 - size_discount)

    value_range = ValuationRange(
        min=enterprise_value * (1 - RANGE_BAND),
        max=enterprise_value * (1 + RANGE_BAND),
    )

    net_debt = (profile.total_liabilities or 0.0) - (profile.cash_on_hand or 0.0)
    equity_value = max(0.0, enterprise_value - net_debt)

    investment_score = calculate_investment_score(profile)

    wacc = dcf.details.get("wacc")
    if wacc is None:
        wacc = estimate_wacc(profile.total_assets, profile.total_liabilities, profile.sector)

    logger.info(
        f"Valuation for '{profile.company_name or profile.sector}': EV=${enterprise_value:,.0f}, "
        f"equity=${equity_value:,.0f}, WACC={wacc:.1%}, score={investment_score.score}"
    )

    return ValuationResult(
        enterprise_value=enterprise_value,
        equity_value=equity_value,
        range=value_range,
        methodologies=MethodologyResults(multiples=multiples, dcf=dcf, asset=asset),
        weights=WEIGHTS,
        size_discount=size_discount,
        investment_score=investment_score,
        wacc=wacc,
        scenario=_scenario_view(profile.scenario, enterprise_value),
    )
