from .scoring import compute_score, classify, check_weights
from .interventions import apply_interventions, apply_seasonal_effects
from .projection import ProjectionMode, compute_projection, project

__all__ = [
    "compute_score",
    "classify",
    "check_weights",
    "apply_interventions",
    "apply_seasonal_effects",
    "ProjectionMode",
    "compute_projection",
    "project",
]
