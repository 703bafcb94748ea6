from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime, timezone

from sme_valuation.models.request import CompanyFinancialProfile
from sme_valuation.models.valuations import ValuationRange


class MethodValues(BaseModel):
    multiples: float
    dcf: float
    asset: float


class ValuationSummary(BaseModel):
    enterprise_value: float
    equity_value: float
    range: ValuationRange
    methodologies: MethodValues
    score: int
    rating: str
    wacc: float


class SavedValuation(BaseModel):
    id: Optional[str] = None
    name: str
    sector: str
    inputs: CompanyFinancialProfile
    results_summary: ValuationSummary
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class ComparisonRow(BaseModel):
    id: str
    name: str
    sector_name: str
    enterprise_value: str = Field(..., description="Formatted currency")
    score: int
    rating: str
    multiples: str
    dcf: str
    asset: str
    created_at: datetime


class ValuationComparison(BaseModel):
    rows: list[ComparisonRow]
    highest_value_id: str
    highest_score_id: str
