"""Static reference tables: sector multiples, size categories, scenarios and default assumptions.

Benchmarks come from SME M&A transaction data. Every table is a read-only
mapping built once at import time.
"""
from types import MappingProxyType

from sme_valuation.models.reference import (
    GlobalAssumptions, MultipleRange, ScenarioProfile, SectorBenchmarks, SectorProfile, SizeProfile,
)
from sme_valuation.models.request import CompanyFinancialProfile


def _sector(
    name: str,
    ev_ebitda: tuple[float, float, float],
    ev_revenue: tuple[float, float, float],
    pe_ratio: tuple[float, float, float],
    risk_premium: float,
    benchmarks: tuple[float, float, float, float],
) -> SectorProfile:
    """Build a SectorProfile from (min, typical, max) tuples and (margin, growth, roic, debt/ebitda)."""
    margin, growth, roic, debt_to_ebitda = benchmarks
    return SectorProfile(
        name=name,
        ev_ebitda_range=MultipleRange(min=ev_ebitda[0], typical=ev_ebitda[1], max=ev_ebitda[2]),
        ev_revenue_range=MultipleRange(min=ev_revenue[0], typical=ev_revenue[1], max=ev_revenue[2]),
        pe_ratio_range=MultipleRange(min=pe_ratio[0], typical=pe_ratio[1], max=pe_ratio[2]),
        risk_premium=risk_premium,
        benchmarks=SectorBenchmarks(
            ebitda_margin=margin, growth=growth, roic=roic, debt_to_ebitda=debt_to_ebitda,
        ),
    )


SECTORS: MappingProxyType[str, SectorProfile] = MappingProxyType({
    "technology": _sector("Technology / Software", (8, 10, 12), (3, 4, 5), (15, 20, 25), 0.04, (20, 15, 18, 1.5)),
    "retail": _sector("Retail / Commerce", (6, 7, 8), (0.5, 0.75, 1), (10, 14, 18), 0.03, (8, 5, 12, 2.5)),
    "manufacturing": _sector("Manufacturing / Industrial", (5, 6, 7), (0.8, 1, 1.2), (8, 12, 15), 0.025, (12, 4, 10, 2)),
    "professional_services": _sector(
        "Professional Services", (6, 7.5, 9), (1, 1.5, 2), (12, 16, 20), 0.03, (15, 8, 20, 1),
    ),
    "food_beverage": _sector("Food & Beverage", (7, 8.5, 10), (1, 1.25, 1.5), (12, 15, 18), 0.02, (10, 6, 12, 2)),
    "construction": _sector("Construction", (5, 6, 7), (0.4, 0.6, 0.8), (8, 11, 14), 0.035, (8, 3, 10, 3)),
    "healthcare": _sector("Healthcare", (8, 10, 12), (2, 2.5, 3), (15, 20, 25), 0.025, (18, 10, 15, 1.5)),
    "agriculture": _sector(
        "Agriculture / Agribusiness", (6, 7.5, 9), (0.8, 1.1, 1.5), (10, 13, 16), 0.04, (12, 5, 10, 2.5),
    ),
    "logistics": _sector("Transport / Logistics", (6, 7, 8), (0.5, 0.75, 1), (10, 13, 16), 0.03, (10, 6, 12, 2.5)),
})

COMPANY_SIZES: MappingProxyType[str, SizeProfile] = MappingProxyType({
    "micro": SizeProfile(
        name="Micro Enterprise", description="Fewer than 10 employees",
        employee_range=(1, 9), size_discount=0.15, score_points=5,
    ),
    "small": SizeProfile(
        name="Small Enterprise", description="10 to 50 employees",
        employee_range=(10, 50), size_discount=0.08, score_points=10,
    ),
    "medium": SizeProfile(
        name="Medium Enterprise", description="51 to 250 employees",
        employee_range=(51, 250), size_discount=0.03, score_points=15,
    ),
})

SCENARIOS: MappingProxyType[str, ScenarioProfile] = MappingProxyType({
    "optimistic": ScenarioProfile(name="Optimistic", adjustment=0.2, color="#10b981", description="Best expected case"),
    "base": ScenarioProfile(name="Base", adjustment=0.0, color="#3b82f6", description="Most likely case"),
    "pessimistic": ScenarioProfile(name="Pessimistic", adjustment=-0.2, color="#ef4444", description="Conservative case"),
})

DEFAULTS = GlobalAssumptions()

# Engine constants
DEFAULT_WACC = 0.12
WACC_FLOOR = 0.08
WACC_CAP = 0.25
DEFAULT_RISK_PREMIUM = 0.03
BASE_COST_OF_DEBT = 0.08
FCF_CONVERSION = 0.85  # after-tax EBITDA kept after net reinvestment
MIN_TERMINAL_SPREAD = 0.01
EBITDA_MULTIPLE_WEIGHT = 0.7
REVENUE_MULTIPLE_WEIGHT = 0.3
RANGE_BAND = 0.15
DEFAULT_SIZE_SCORE_POINTS = 5

EXAMPLE_COMPANIES: MappingProxyType[str, CompanyFinancialProfile] = MappingProxyType({
    "tech_startup": CompanyFinancialProfile(
        company_name="TechStart SaaS",
        sector="technology",
        company_size="small",
        age_years=3,
        annual_revenues=[800_000, 1_200_000, 1_800_000],
        ebitda=180_000,
        total_assets=500_000,
        total_liabilities=150_000,
        employee_count=25,
        expected_growth_rate=40,
        scenario="optimistic",
    ),
    "consolidated_retail": CompanyFinancialProfile(
        company_name="Central Distribution",
        sector="retail",
        company_size="medium",
        age_years=15,
        annual_revenues=[5_000_000, 5_200_000, 5_500_000],
        ebitda=440_000,
        total_assets=3_000_000,
        total_liabilities=1_200_000,
        employee_count=120,
        expected_growth_rate=5,
        scenario="base",
    ),
    "traditional_manufacturing": CompanyFinancialProfile(
        company_name="Industrial Metalworks",
        sector="manufacturing",
        company_size="medium",
        age_years=25,
        annual_revenues=[8_000_000, 8_100_000, 8_200_000],
        ebitda=1_200_000,
        total_assets=6_000_000,
        total_liabilities=2_500_000,
        employee_count=180,
        expected_growth_rate=2,
        scenario="pessimistic",
    ),
})


def get_sector(key: str) -> SectorProfile | None:
    return SECTORS.get(key)


def get_size(key: str) -> SizeProfile | None:
    return COMPANY_SIZES.get(key)


def get_scenario(key: str) -> ScenarioProfile | None:
    return SCENARIOS.get(key)
