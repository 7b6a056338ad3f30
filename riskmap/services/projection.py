# riskmap/services/projection.py
from __future__ import annotations

from enum import Enum
from typing import List, Optional, Sequence

from ..config import settings
from ..schemas import HORIZON, Intervention, Region, RiskFactorSet, RiskProjection, SeasonalEvent, WeightProfile
from .interventions import applied_month, apply_interventions, apply_seasonal_effects
from .scoring import compute_score


class ProjectionMode(str, Enum):
    CONSTANT = "constant"
    TEMPORAL = "temporal"


class InterventionState(str, Enum):
    PENDING = "pending"
    ACTIVE = "active"


def intervention_state(intervention: Intervention, month: int) -> InterventionState:
    # no expiry: once active, active for the rest of the horizon
    if applied_month(intervention) <= month:
        return InterventionState.ACTIVE
    return InterventionState.PENDING


def _constant(region, factors, interventions, weights) -> RiskProjection:
    base = compute_score(factors, weights, region.base_risk_score)
    treated = compute_score(apply_interventions(factors, interventions), weights, region.base_risk_score)
    return RiskProjection(base_risk=[base] * HORIZON, intervention_risk=[treated] * HORIZON)


def _temporal(region, factors, seasonal_events, interventions, weights) -> RiskProjection:
    base_risk: List[float] = []
    intervention_risk: List[float] = []
    for month in range(1, HORIZON + 1):
        seasonal = apply_seasonal_effects(factors, seasonal_events, month)
        base_risk.append(compute_score(seasonal, weights, region.base_risk_score))
        treated = apply_interventions(seasonal, interventions, current_time=month)
        intervention_risk.append(compute_score(treated, weights, region.base_risk_score))
    return RiskProjection(base_risk=base_risk, intervention_risk=intervention_risk)


def project(
    region: Region,
    factors: RiskFactorSet,
    seasonal_events: Sequence[SeasonalEvent],
    interventions: Sequence[Intervention],
    weights: Optional[WeightProfile] = None,
    mode: Optional[ProjectionMode | str] = None,
) -> RiskProjection:
    """
    Paired base / intervention risk series over the 12-month horizon.

    CONSTANT scores once per case and repeats the value (seasonal events are
    not modeled). TEMPORAL re-scores every month with that month's seasonal
    effects and only the interventions already applied by then.
    """
    mode = ProjectionMode(mode or settings.PROJECTION_MODE)
    if mode is ProjectionMode.TEMPORAL:
        return _temporal(region, factors, seasonal_events, interventions, weights)
    return _constant(region, factors, interventions, weights)


compute_projection = project
