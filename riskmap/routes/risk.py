import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends
from sqlalchemy.orm import Session

from ..catalog import SqlRegionCatalog, get_intervention, get_seasonal_event, list_seasonal_events
from ..config import settings
from ..database import get_db
from ..errors import InputValidationError
from ..legacy import factors_from_legacy, is_legacy_shape, weights_from_legacy
from ..schemas import (
    CalculateRiskInput, CalculateRiskResponse, ProjectionInput, ProjectionResponse,
    RiskFactorSet, WeightProfile, activate,
)
from ..services import ProjectionMode, check_weights, compute_projection, compute_score
from ..services.scoring import classify, log_weighting_step, recommendation_for
from ..utils.logging import logger

router = APIRouter(prefix="/api", tags=["risk"])

def _trace_hook():
    return log_weighting_step if logger.isEnabledFor(logging.DEBUG) else None

def _score_response(
    factors: RiskFactorSet,
    weights: Optional[WeightProfile],
    base_risk_score: Optional[float],
) -> CalculateRiskResponse:
    warnings: List[str] = check_weights(weights, settings.WEIGHT_TOLERANCE) if weights else []
    score = compute_score(factors, weights, base_risk_score, trace=_trace_hook())
    logger.info("Risk score computed: %.4f (%s)", score, classify(score))
    return CalculateRiskResponse(
        risk_score=score,
        classification=classify(score),
        recommendation=recommendation_for(score),
        weights_valid=not warnings,
        warnings=warnings,
    )

@router.post("/calculate-risk", response_model=CalculateRiskResponse)
def calculate_risk(payload: CalculateRiskInput):
    weights = payload.weights.to_profile() if payload.weights else None
    return _score_response(payload.parameters.to_factor_set(), weights, payload.base_risk_score)

@router.post("/calculate-risk/legacy", response_model=CalculateRiskResponse)
def calculate_legacy_risk(payload: Dict[str, Any] = Body(...)):
    """Five-factor request shape; translated to the six-factor model before scoring."""
    params = payload.get("parameters")
    if not isinstance(params, dict) or not is_legacy_shape(params):
        raise InputValidationError("parameters", "expected the five-factor parameter shape")

    base = payload.get("baseRiskScore")
    if base is not None and (isinstance(base, bool) or not isinstance(base, (int, float)) or not 0 <= base <= 1):
        raise InputValidationError("baseRiskScore", "must be a number between 0 and 1")

    weights = weights_from_legacy(payload["weights"]) if payload.get("weights") else weights_from_legacy()
    return _score_response(factors_from_legacy(params), weights, base)

@router.post("/projection", response_model=ProjectionResponse)
def projection(payload: ProjectionInput, db: Session = Depends(get_db)):
    region = SqlRegionCatalog(db).require(payload.region_identifier)

    interventions = [activate(get_intervention(sel.id), sel.applied_at) for sel in payload.interventions]
    interventions.extend(payload.custom_interventions)

    if payload.seasonal_event_ids is None:
        events = list_seasonal_events()
    else:
        events = [get_seasonal_event(i) for i in payload.seasonal_event_ids]

    weights = payload.weights.to_profile() if payload.weights else None
    if weights:
        check_weights(weights, settings.WEIGHT_TOLERANCE)

    mode = ProjectionMode(payload.mode or settings.PROJECTION_MODE)
    result = compute_projection(
        region, payload.parameters.to_factor_set(), events, interventions, weights, mode
    )
    logger.info(
        "Projection for %s (%s, %d interventions)", region.identifier, mode.value, len(interventions)
    )
    return ProjectionResponse(
        mode=mode.value,
        base_risk=result.base_risk,
        intervention_risk=result.intervention_risk,
        risk_reduction=result.risk_reduction(),
    )
