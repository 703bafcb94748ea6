import logging
from sme_valuation.models.request import CompanyFinancialProfile
from sme_valuation.models.valuations import ValuationMethodResult
from sme_valuation.valuation.reference_data import EBITDA_MULTIPLE_WEIGHT, REVENUE_MULTIPLE_WEIGHT, get_sector

logger = logging.getLogger(__name__)


def _blend(ebitda_component: float, revenue_component: float) -> float:
    return ebitda_component * EBITDA_MULTIPLE_WEIGHT + revenue_component * REVENUE_MULTIPLE_WEIGHT


def compute_multiples_valuation(profile: CompanyFinancialProfile) -> ValuationMethodResult:
    """Compute enterprise value from the sector's typical EV/EBITDA and EV/Revenue multiples.

    The EBITDA multiple carries 70% of the weight since revenue multiples are
    less reliable for SMEs.
    """
    sector = get_sector(profile.sector)
    ebitda = profile.ebitda

    if sector is None or not ebitda:
        reason = f"Unknown sector '{profile.sector}'" if sector is None else "EBITDA is zero"
        logger.warning(f"Multiples valuation skipped: {reason}")
        return ValuationMethodResult(method="multiples", value=0.0, warnings=[reason])

    latest_revenue = profile.latest_revenue
    ev_ebitda = sector.ev_ebitda_range
    ev_revenue = sector.ev_revenue_range

    ev_from_ebitda = ebitda * ev_ebitda.typical
    ev_from_revenue = latest_revenue * ev_revenue.typical

    return ValuationMethodResult(
        method="multiples",
        value=_blend(ev_from_ebitda, ev_from_revenue),
        min=_blend(ebitda * ev_ebitda.min, latest_revenue * ev_revenue.min),
        max=_blend(ebitda * ev_ebitda.max, latest_revenue * ev_revenue.max),
        details={
            "ev_ebitda_multiple": ev_ebitda.typical,
            "ev_revenue_multiple": ev_revenue.typical,
            "ev_from_ebitda": ev_from_ebitda,
            "ev_from_revenue": ev_from_revenue,
            "latest_revenue": latest_revenue,
        },
    )
