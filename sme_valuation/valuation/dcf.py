import logging
from sme_valuation.models.request import CompanyFinancialProfile
from sme_valuation.models.valuations import ValuationMethodResult
from sme_valuation.valuation.reference_data import DEFAULTS, FCF_CONVERSION, MIN_TERMINAL_SPREAD
from sme_valuation.valuation.wacc import clamp_wacc, estimate_wacc

logger = logging.getLogger(__name__)


def _project_cash_flows(ebitda: float, growth_rate: float, wacc: float, years: int) -> list[dict]:
    """Grow EBITDA year over year and discount the simplified free cash flow.

    FCF = EBITDA * (1 - tax) * FCF_CONVERSION stands in for after-tax earnings
    minus net reinvestment; there is no explicit capex or working-capital build.
    """
    projections: list[dict] = []
    current_ebitda = ebitda
    for year in range(1, years + 1):
        current_ebitda = current_ebitda * (1 + growth_rate)
        fcf = current_ebitda * (1 - DEFAULTS.tax_rate) * FCF_CONVERSION
        discount_factor = (1 + wacc) ** year
        projections.append({
            "year": year,
            "ebitda": current_ebitda,
            "fcf": fcf,
            "discount_factor": discount_factor,
            "present_value": fcf / discount_factor,
        })
    return projections


def compute_dcf_valuation(profile: CompanyFinancialProfile) -> ValuationMethodResult:
    """Compute enterprise value from a fixed-horizon FCF projection plus a Gordon growth terminal value."""
    ebitda = profile.ebitda
    warnings: list[str] = []

    if not ebitda or profile.expected_growth_rate is None:
        reason = "EBITDA is zero" if not ebitda else "No expected growth rate provided"
        logger.warning(f"DCF valuation skipped: {reason}")
        return ValuationMethodResult(method="dcf", value=0.0, warnings=[reason])

    override = profile.discount_rate_override
    if override is not None:
        wacc = clamp_wacc(override)
        if wacc != override:
            warnings.append(f"Discount rate override ({override:.2%}) clamped to {wacc:.2%}")
            logger.warning(warnings[-1])
    else:
        wacc = estimate_wacc(profile.total_assets, profile.total_liabilities, profile.sector)

    growth_rate = profile.expected_growth_rate / 100
    tgr = DEFAULTS.terminal_growth
    years = DEFAULTS.projection_years

    projections = _project_cash_flows(ebitda, growth_rate, wacc, years)

    spread = wacc - tgr
    if spread < MIN_TERMINAL_SPREAD:
        warnings.append(
            f"Discount rate ({wacc:.2%}) is within {MIN_TERMINAL_SPREAD:.0%} of terminal growth ({tgr:.2%}); "
            f"terminal value uses a {MIN_TERMINAL_SPREAD:.0%} spread"
        )
        logger.warning(warnings[-1])
        spread = MIN_TERMINAL_SPREAD

    final_fcf = projections[-1]["fcf"]
    terminal_value = final_fcf * (1 + tgr) / spread
    terminal_value_pv = terminal_value / (1 + wacc) ** years

    sum_pv = sum(p["present_value"] for p in projections)

    return ValuationMethodResult(
        method="dcf",
        value=sum_pv + terminal_value_pv,
        details={
            "wacc": wacc,
            "growth_rate": growth_rate,
            "projected_fcf": projections,
            "terminal_value": terminal_value,
            "terminal_value_pv": terminal_value_pv,
            "sum_pv": sum_pv,
        },
        warnings=warnings,
    )
