from pydantic import BaseModel, ConfigDict, Field
from typing import Literal, Optional
from datetime import datetime, timezone

FactorStatus = Literal["excellent", "good", "fair", "poor"]
BadgeTone = Literal["success", "info", "accent", "warning", "danger"]


class ValuationMethodResult(BaseModel):
    method: str
    value: float
    min: Optional[float] = None
    max: Optional[float] = None
    details: dict = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)


class ScoreFactor(BaseModel):
    name: str
    points: int
    max_points: int
    display_value: str
    status: FactorStatus


class Badge(BaseModel):
    label: str
    tone: BadgeTone


class InvestmentScoreResult(BaseModel):
    score: int = Field(..., ge=0, le=100)
    rating: Literal["Excellent", "Good", "Fair", "Poor"]
    breakdown: list[ScoreFactor]
    badges: list[Badge] = Field(default_factory=list)


class ValuationRange(BaseModel):
    min: float
    max: float


class MethodologyWeights(BaseModel):
    model_config = ConfigDict(frozen=True)

    multiples: float = 0.4
    dcf: float = 0.4
    asset: float = 0.2


class MethodologyResults(BaseModel):
    multiples: ValuationMethodResult
    dcf: ValuationMethodResult
    asset: ValuationMethodResult


class ScenarioView(BaseModel):
    key: str
    name: str
    adjustment: float
    adjusted_value: float = Field(..., description="Enterprise value shifted by the scenario adjustment")


class ValuationResult(BaseModel):
    enterprise_value: float
    equity_value: float = Field(..., ge=0)
    range: ValuationRange
    methodologies: MethodologyResults
    weights: MethodologyWeights = Field(default_factory=MethodologyWeights)
    size_discount: float
    investment_score: InvestmentScoreResult
    wacc: float
    scenario: Optional[ScenarioView] = None
    computed_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
