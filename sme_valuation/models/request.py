from pydantic import BaseModel, ConfigDict, Field, NonNegativeFloat
from typing import Literal, Optional

ScenarioKey = Literal["optimistic", "base", "pessimistic"]


class CompanyFinancialProfile(BaseModel):
    model_config = ConfigDict(frozen=True)

    company_name: Optional[str] = Field(None, description="Display name, informational only")
    sector: str = Field(..., description="Sector key, e.g. 'technology', 'retail'")
    company_size: str = Field(..., description="Size key: 'micro', 'small' or 'medium'")
    age_years: int = Field(..., gt=0, description="Years since founding")
    annual_revenues: list[NonNegativeFloat] = Field(
        ..., description="Chronological annual revenues, last element is the most recent year"
    )
    ebitda: float = Field(..., description="Most recent year's EBITDA (may be negative)")
    total_assets: float = Field(..., ge=0, description="Total assets")
    total_liabilities: float = Field(..., ge=0, description="Total liabilities")
    cash_on_hand: Optional[float] = Field(None, ge=0, description="Cash, netted against liabilities for net debt")
    employee_count: Optional[int] = Field(None, ge=0, description="Headcount, informational only")
    expected_growth_rate: Optional[float] = Field(
        None, description="Expected annual EBITDA growth in percent (10 means 10%/yr)"
    )
    discount_rate_override: Optional[float] = Field(
        None, gt=0, description="Discount rate as a decimal; WACC is estimated when omitted"
    )
    scenario: ScenarioKey = Field("base", description="Scenario selection")

    @property
    def latest_revenue(self) -> float:
        return self.annual_revenues[-1] if self.annual_revenues else 0.0


class SaveValuationRequest(BaseModel):
    name: Optional[str] = Field(None, description="Label for the saved valuation")
    profile: CompanyFinancialProfile
