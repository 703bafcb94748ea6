from sme_valuation.models.request import CompanyFinancialProfile, SaveValuationRequest
from sme_valuation.models.reference import (
    MultipleRange, SectorBenchmarks, SectorProfile, SizeProfile, ScenarioProfile, GlobalAssumptions,
)
from sme_valuation.models.valuations import (
    ValuationMethodResult, ScoreFactor, Badge, InvestmentScoreResult,
    ValuationRange, MethodologyWeights, MethodologyResults, ScenarioView, ValuationResult,
)
from sme_valuation.models.report import (
    MethodValues, ValuationSummary, SavedValuation, ComparisonRow, ValuationComparison,
)

__all__ = [
    "CompanyFinancialProfile", "SaveValuationRequest",
    "MultipleRange", "SectorBenchmarks", "SectorProfile", "SizeProfile", "ScenarioProfile", "GlobalAssumptions",
    "ValuationMethodResult", "ScoreFactor", "Badge", "InvestmentScoreResult",
    "ValuationRange", "MethodologyWeights", "MethodologyResults", "ScenarioView", "ValuationResult",
    "MethodValues", "ValuationSummary", "SavedValuation", "ComparisonRow", "ValuationComparison",
]
