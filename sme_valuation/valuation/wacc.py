from sme_valuation.valuation.reference_data import (
    BASE_COST_OF_DEBT, DEFAULT_RISK_PREMIUM, DEFAULT_WACC, DEFAULTS, WACC_CAP, WACC_FLOOR, get_sector,
)


def clamp_wacc(rate: float) -> float:
    return max(WACC_FLOOR, min(WACC_CAP, rate))


def estimate_wacc(total_assets: float, total_liabilities: float, sector: str) -> float:
    """Estimate a discount rate from the balance sheet and sector risk.

    Cost of equity is a simplified CAPM where beta is approximated from the
    sector risk premium (beta = 1 + 10 * premium). Cost of debt is a fixed base
    rate plus the same premium, tax-shielded. The result is clamped to
    [WACC_FLOOR, WACC_CAP]; non-positive capital returns DEFAULT_WACC.
    """
    equity = (total_assets or 0.0) - (total_liabilities or 0.0)
    debt = total_liabilities or 0.0
    total_value = equity + debt

    if total_value <= 0:
        return DEFAULT_WACC

    sector_profile = get_sector(sector)
    risk_premium = sector_profile.risk_premium if sector_profile else DEFAULT_RISK_PREMIUM

    beta = 1.0 + risk_premium * 10
    cost_of_equity = DEFAULTS.risk_free_rate + beta * DEFAULTS.market_risk_premium + risk_premium

    cost_of_debt = BASE_COST_OF_DEBT + risk_premium
    after_tax_cost_of_debt = cost_of_debt * (1 - DEFAULTS.tax_rate)

    equity_weight = equity / total_value
    debt_weight = debt / total_value

    return clamp_wacc(equity_weight * cost_of_equity + debt_weight * after_tax_cost_of_debt)
