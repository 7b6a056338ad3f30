# scoring.py
from __future__ import annotations

import math
import warnings
from dataclasses import dataclass
from typing import Callable, List, Optional

from ..errors import ConfigurationWarning
from ..schemas import DEFAULT_WEIGHTS, INVERTED_FACTOR, RiskFactorSet, WeightProfile, clamp01
from ..utils.logging import logger

# -----------------------------
# Tunables
# -----------------------------
# current conditions dominate, regional prior evidence anchors
CURRENT_SHARE = 0.7
BASE_SHARE = 0.3

THRESHOLDS = {
    "high": 0.55,    # > 0.55 → high
    "medium": 0.45,  # >= 0.45 → medium, else low
}

RECOMMENDATIONS = {
    "high": "Immediate intervention required",
    "medium": "Monitor situation closely",
    "low": "Continue routine surveillance",
}

# map band colours, checked top-down
COLOR_BANDS = [
    (0.8, "#b71c1c"),  # critical
    (0.6, "#f44336"),  # high
    (0.3, "#ff9800"),  # medium
    (0.0, "#4caf50"),  # low
]

# -----------------------------
# Trace hook
# -----------------------------
@dataclass(frozen=True)
class WeightingStep:
    factor: str
    value: float
    weight: float
    contribution: float


TraceHook = Callable[[WeightingStep], None]


def log_weighting_step(step: WeightingStep) -> None:
    logger.debug(
        "weighting %s: value=%.4f weight=%.4f contribution=%.4f",
        step.factor, step.value, step.weight, step.contribution,
    )

# -----------------------------
# Helpers
# -----------------------------
def classify(score: float) -> str:
    if score > THRESHOLDS["high"]:
        return "high"
    if score >= THRESHOLDS["medium"]:
        return "medium"
    return "low"

def recommendation_for(score: float) -> str:
    return RECOMMENDATIONS[classify(score)]

def color_for(score: float) -> str:
    for floor, color in COLOR_BANDS:
        if score >= floor:
            return color
    return COLOR_BANDS[-1][1]

def check_weights(weights: WeightProfile, tolerance: float = 0.01) -> List[str]:
    """
    Advisory checks for a weight profile. Returns human-readable messages and
    emits each one as a ConfigurationWarning; never blocks scoring.
    """
    messages: List[str] = []
    total = weights.total()
    if not math.isfinite(total):
        messages.append(f"weights sum to {total}, expected a finite value")
    elif abs(total - 1.0) > tolerance:
        messages.append(f"weights sum to {total:.3f}, expected 1.0 ± {tolerance}")
    negative = [name for name, w in weights.items() if w < 0]
    if negative:
        messages.append(f"negative weights: {', '.join(negative)}")

    for msg in messages:
        logger.warning("Weight profile: %s", msg)
        warnings.warn(msg, ConfigurationWarning, stacklevel=2)
    return messages

# -----------------------------
# Main entry
# -----------------------------
def compute_score(
    factors: RiskFactorSet,
    weights: Optional[WeightProfile] = None,
    base_risk_score: Optional[float] = None,
    trace: Optional[TraceHook] = None,
) -> float:
    """
    Weighted, normalized risk score in [0, 1].

    Healthcare infrastructure contributes (1 - value); every other factor
    contributes its value. The weighted sum is divided by the sum of weights,
    so profiles that don't add up to exactly 1 still give a normalized score.
    With a base_risk_score the result is blended 70/30 with that prior.
    """
    weights = weights or DEFAULT_WEIGHTS

    total_score = 0.0
    total_weight = 0.0
    for name, weight in weights.items():
        value = clamp01(factors.value_of(name))
        if name == INVERTED_FACTOR:
            contribution = weight * (1 - value)
        else:
            contribution = weight * value
        if trace is not None:
            trace(WeightingStep(name, value, weight, contribution))
        total_score += contribution
        total_weight += weight

    score = total_score / total_weight if total_weight > 0 else 0.0

    if base_risk_score is not None:
        score = CURRENT_SHARE * score + BASE_SHARE * base_risk_score

    return clamp01(score)
