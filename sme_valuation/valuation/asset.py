import logging
from sme_valuation.models.request import CompanyFinancialProfile
from sme_valuation.models.valuations import ValuationMethodResult

logger = logging.getLogger(__name__)

# (minimum age in years, goodwill premium), highest tier first
_AGE_PREMIUMS = ((10, 0.15), (5, 0.08), (2, 0.03))
_SIZE_PREMIUMS = {"medium": 0.10, "small": 0.05}
_HIGH_INTANGIBLE_SECTORS = {"technology", "professional_services"}


def _age_premium(age_years: int) -> float:
    for min_age, premium in _AGE_PREMIUMS:
        if age_years >= min_age:
            return premium
    return 0.0


def compute_asset_valuation(profile: CompanyFinancialProfile) -> ValuationMethodResult:
    """Adjusted book value: net assets scaled by a goodwill multiplier plus estimated intangibles.

    Never returns less than book value, but book value itself is negative for
    an insolvent balance sheet and is returned as is.
    """
    total_assets = profile.total_assets
    if not total_assets:
        logger.warning("Asset valuation skipped: total assets are zero")
        return ValuationMethodResult(method="asset", value=0.0, warnings=["Total assets are zero"])

    book_value = total_assets - (profile.total_liabilities or 0.0)

    goodwill_multiplier = 1.0 + _age_premium(profile.age_years) + _SIZE_PREMIUMS.get(profile.company_size, 0.0)

    intangible_factor = 0.15 if profile.sector in _HIGH_INTANGIBLE_SECTORS else 0.05
    estimated_intangibles = total_assets * intangible_factor

    adjusted_value = book_value * goodwill_multiplier + estimated_intangibles

    return ValuationMethodResult(
        method="asset",
        value=max(adjusted_value, book_value),
        min=book_value,
        max=adjusted_value * 1.2,
        details={
            "book_value": book_value,
            "goodwill_multiplier": goodwill_multiplier,
            "intangible_factor": intangible_factor,
            "estimated_intangibles": estimated_intangibles,
            "adjusted_value": adjusted_value,
        },
    )
