from __future__ import annotations

import math
from datetime import datetime
from typing import List, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

FACTOR_NAMES: Tuple[str, ...] = (
    "bat_density",
    "pig_farming_intensity",
    "fruit_consumption_practices",
    "human_population_density",
    "healthcare_infrastructure",
    "environmental_degradation",
)
# higher value = better healthcare = lower risk
INVERTED_FACTOR = "healthcare_infrastructure"
NEUTRAL_VALUE = 0.5
HORIZON = 12

_CAMEL_TO_FACTOR = {to_camel(name): name for name in FACTOR_NAMES}


def clamp01(v: float) -> float:
    return max(0.0, min(1.0, v))


def resolve_factor(name: str | None) -> str | None:
    """Map a snake_case or camelCase factor name to its canonical name."""
    if not name:
        return None
    if name in FACTOR_NAMES:
        return name
    return _CAMEL_TO_FACTOR.get(name)


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ----------------------------
# Risk factors & weights
# ----------------------------
class RiskFactorSet(CamelModel):
    """Six normalized risk factors. Out-of-range values are clamped, never kept."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, validate_assignment=True
    )

    bat_density: float = NEUTRAL_VALUE
    pig_farming_intensity: float = NEUTRAL_VALUE
    fruit_consumption_practices: float = NEUTRAL_VALUE
    human_population_density: float = NEUTRAL_VALUE
    healthcare_infrastructure: float = NEUTRAL_VALUE
    environmental_degradation: float = NEUTRAL_VALUE

    @field_validator("*", mode="before")
    @classmethod
    def _clamp(cls, v):
        v = float(v)
        if math.isnan(v):
            raise ValueError("factor value is NaN")
        return clamp01(v)

    def value_of(self, name: str) -> float:
        return getattr(self, name)

    def with_value(self, name: str, value: float) -> "RiskFactorSet":
        return self.model_copy(update={name: clamp01(value)})


class WeightProfile(CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    bat_density: float = 0.25
    pig_farming_intensity: float = 0.20
    fruit_consumption_practices: float = 0.15
    human_population_density: float = 0.15
    healthcare_infrastructure: float = 0.15
    environmental_degradation: float = 0.10

    def items(self) -> List[Tuple[str, float]]:
        return [(name, getattr(self, name)) for name in FACTOR_NAMES]

    def total(self) -> float:
        return sum(w for _, w in self.items())

    def is_valid(self, tolerance: float = 0.01) -> bool:
        return abs(self.total() - 1.0) <= tolerance


DEFAULT_WEIGHTS = WeightProfile()
ALTERNATE_WEIGHTS = WeightProfile(
    bat_density=0.30,
    pig_farming_intensity=0.25,
    fruit_consumption_practices=0.15,
    human_population_density=0.15,
    healthcare_infrastructure=0.10,
    environmental_degradation=0.05,
)


# ----------------------------
# Regions, interventions, seasonal events
# ----------------------------
class Region(CamelModel):
    identifier: str
    name: str
    base_risk_score: float = Field(ge=0, le=1)
    center: Tuple[float, float]
    coordinates: List[Tuple[float, float]] = Field(default_factory=list)


class Impact(CamelModel):
    # free-form so imported definitions with unknown targets still parse
    parameter: str
    effect: float


class Intervention(CamelModel):
    id: str
    name: str
    description: str = ""
    impact: Impact


class ActiveIntervention(Intervention):
    applied_at: int = Field(1, ge=1, le=HORIZON)


def activate(intervention: Intervention, applied_at: int = 1) -> ActiveIntervention:
    data = intervention.model_dump(exclude={"applied_at"})
    return ActiveIntervention(**data, applied_at=applied_at)


class SeasonalEvent(CamelModel):
    id: str
    name: str
    months: List[int]
    icon: Optional[str] = None
    affects: Impact

    @field_validator("months")
    @classmethod
    def _months_in_horizon(cls, v: List[int]) -> List[int]:
        bad = [m for m in v if not 1 <= m <= HORIZON]
        if bad:
            raise ValueError(f"months must be within 1..{HORIZON}, got {bad}")
        return v

    def is_active(self, month: int) -> bool:
        return month in self.months


class RiskProjection(CamelModel):
    base_risk: List[float]
    intervention_risk: List[float]

    def risk_reduction(self, month: int = 1) -> float:
        """Percent reduction of the intervention case against the base case."""
        original = self.base_risk[month - 1]
        reduced = self.intervention_risk[month - 1]
        if original == 0:
            return 0.0
        return (original - reduced) / original * 100


# ----------------------------
# HTTP request / response bodies
# ----------------------------
class RiskParametersInput(CamelModel):
    """Strict boundary shape: rejects instead of clamping."""

    bat_density: float = Field(ge=0, le=1)
    pig_farming_intensity: float = Field(ge=0, le=1)
    fruit_consumption_practices: float = Field(ge=0, le=1)
    human_population_density: float = Field(ge=0, le=1)
    healthcare_infrastructure: float = Field(ge=0, le=1)
    environmental_degradation: float = Field(ge=0, le=1)

    def to_factor_set(self) -> RiskFactorSet:
        return RiskFactorSet(**self.model_dump())


class WeightsInput(CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, allow_inf_nan=False)

    bat_density: float
    pig_farming_intensity: float
    fruit_consumption_practices: float
    human_population_density: float
    healthcare_infrastructure: float
    environmental_degradation: float

    def to_profile(self) -> WeightProfile:
        return WeightProfile(**self.model_dump())


class CalculateRiskInput(CamelModel):
    parameters: RiskParametersInput
    base_risk_score: Optional[float] = Field(None, ge=0, le=1)
    weights: Optional[WeightsInput] = None


class CalculateRiskResponse(CamelModel):
    risk_score: float
    classification: str
    recommendation: str
    weights_valid: bool
    warnings: List[str] = Field(default_factory=list)


class InterventionSelection(CamelModel):
    id: str
    applied_at: int = Field(1, ge=1, le=HORIZON)


class ProjectionInput(CamelModel):
    region_identifier: str
    parameters: RiskParametersInput
    interventions: List[InterventionSelection] = Field(default_factory=list)
    custom_interventions: List[ActiveIntervention] = Field(default_factory=list)
    # None = the whole reference calendar
    seasonal_event_ids: Optional[List[str]] = None
    weights: Optional[WeightsInput] = None
    mode: Optional[Literal["constant", "temporal"]] = None


class ProjectionResponse(CamelModel):
    mode: str
    base_risk: List[float]
    intervention_risk: List[float]
    risk_reduction: float


class ParameterSetInput(CamelModel):
    name: str = Field(min_length=1)
    user_id: Optional[int] = None
    parameters: RiskParametersInput


class ParameterSetOut(CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    id: int
    name: str
    user_id: Optional[int] = None
    parameters: RiskFactorSet
    created_at: datetime


class ScenarioInput(CamelModel):
    name: str = Field(min_length=1)
    user_id: Optional[int] = None
    region_identifier: str
    parameters: RiskParametersInput
    interventions: List[ActiveIntervention] = Field(default_factory=list)


class ScenarioOut(CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    id: int
    name: str
    user_id: Optional[int] = None
    region_identifier: str
    parameters: RiskFactorSet
    interventions: List[ActiveIntervention]
    created_at: datetime


class RegionParametersData(CamelModel):
    state: str
    district: str = ""
    parameters: RiskFactorSet
