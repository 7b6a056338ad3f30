# riskmap/legacy.py
"""
Adapter for the older five-factor parameter shape:
{batDensity, pigDensity, fruitExposure, inverseHealthcare, urbanWildOverlap}.
"""
import math
from typing import Any, Dict, Mapping, Optional

from .errors import InputValidationError
from .schemas import NEUTRAL_VALUE, RiskFactorSet, WeightProfile

# legacy key -> six-factor name. The old engine already scored
# inverseHealthcare as (1 - value), so it maps onto healthcare directly.
LEGACY_FIELDS: Dict[str, str] = {
    "batDensity": "bat_density",
    "pigDensity": "pig_farming_intensity",
    "fruitExposure": "fruit_consumption_practices",
    "inverseHealthcare": "healthcare_infrastructure",
    "urbanWildOverlap": "environmental_degradation",
}

LEGACY_DEFAULT_WEIGHTS = {
    "batDensity": 0.3,
    "pigDensity": 0.2,
    "fruitExposure": 0.2,
    "inverseHealthcare": 0.2,
    "urbanWildOverlap": 0.1,
}


def _read(payload: Mapping[str, Any], key: str, upper: Optional[float] = 1.0) -> float:
    if key not in payload:
        raise InputValidationError(key, "missing legacy field")
    value = payload[key]
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InputValidationError(key, f"expected a number, got {type(value).__name__}")
    value = float(value)
    if not math.isfinite(value):
        raise InputValidationError(key, "must be a finite number")
    if value < 0 or (upper is not None and value > upper):
        bound = f"between 0 and {upper}" if upper is not None else "non-negative"
        raise InputValidationError(key, f"must be {bound}")
    return value


def is_legacy_shape(payload: Mapping[str, Any]) -> bool:
    return "pigDensity" in payload or "inverseHealthcare" in payload


def factors_from_legacy(payload: Mapping[str, Any]) -> RiskFactorSet:
    values = {name: _read(payload, key) for key, name in LEGACY_FIELDS.items()}
    # no counterpart in the five-factor model
    values["human_population_density"] = NEUTRAL_VALUE
    return RiskFactorSet(**values)


def weights_from_legacy(payload: Mapping[str, Any] = LEGACY_DEFAULT_WEIGHTS) -> WeightProfile:
    values = {name: _read(payload, key, upper=None) for key, name in LEGACY_FIELDS.items()}
    values["human_population_density"] = 0.0
    return WeightProfile(**values)
