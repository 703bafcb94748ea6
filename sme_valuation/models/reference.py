from pydantic import BaseModel, ConfigDict, Field


class MultipleRange(BaseModel):
    model_config = ConfigDict(frozen=True)

    min: float
    typical: float
    max: float


class SectorBenchmarks(BaseModel):
    model_config = ConfigDict(frozen=True)

    ebitda_margin: float = Field(..., description="Typical EBITDA margin in percent")
    growth: float = Field(..., description="Typical annual growth in percent")
    roic: float = Field(..., description="Typical return on invested capital in percent")
    debt_to_ebitda: float


class SectorProfile(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    ev_ebitda_range: MultipleRange
    ev_revenue_range: MultipleRange
    pe_ratio_range: MultipleRange
    risk_premium: float = Field(..., description="Additional sector risk as a decimal")
    benchmarks: SectorBenchmarks


class SizeProfile(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    employee_range: tuple[int, int]
    size_discount: float = Field(..., description="Discount applied to the blended value")
    score_points: int = Field(..., description="Points awarded in the size factor of the investment score")


class ScenarioProfile(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    adjustment: float
    color: str
    description: str


class GlobalAssumptions(BaseModel):
    model_config = ConfigDict(frozen=True)

    tax_rate: float = 0.25
    risk_free_rate: float = 0.05
    market_risk_premium: float = 0.06
    terminal_growth: float = 0.02
    depreciation_rate: float = Field(0.05, description="Documented only; not used by the simplified FCF")
    capex_rate: float = Field(0.03, description="Documented only; not used by the simplified FCF")
    projection_years: int = 5
