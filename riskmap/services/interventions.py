# riskmap/services/interventions.py
from __future__ import annotations

from typing import Iterable, Optional

from ..schemas import INVERTED_FACTOR, Intervention, RiskFactorSet, SeasonalEvent, resolve_factor
from ..utils.logging import logger


def applied_month(intervention: Intervention) -> int:
    # plain Interventions are treated as active from the first month
    return getattr(intervention, "applied_at", 1)


def apply_interventions(
    factors: RiskFactorSet,
    interventions: Iterable[Intervention],
    current_time: Optional[int] = None,
) -> RiskFactorSet:
    """
    Return a new factor set with intervention effects added, in order.

    Effects are signed deltas: callers pass a negative effect to reduce a
    risk-positive factor. For healthcare infrastructure the absolute value is
    added, since an intervention can only improve healthcare. Each step is
    clamped to [0, 1]. With current_time, interventions applied after that
    month are skipped. Unknown targets are ignored.
    """
    out = factors.model_copy()
    for iv in interventions:
        if current_time is not None and applied_month(iv) > current_time:
            continue
        name = resolve_factor(iv.impact.parameter)
        if name is None:
            logger.debug("Ignoring intervention %s: unknown factor %r", iv.id, iv.impact.parameter)
            continue
        effect = abs(iv.impact.effect) if name == INVERTED_FACTOR else iv.impact.effect
        out = out.with_value(name, out.value_of(name) + effect)
    return out


def apply_seasonal_effects(
    factors: RiskFactorSet,
    events: Iterable[SeasonalEvent],
    month: int,
) -> RiskFactorSet:
    """Add the signed effect of every event active in `month`."""
    out = factors.model_copy()
    for ev in events:
        if not ev.is_active(month):
            continue
        name = resolve_factor(ev.affects.parameter)
        if name is None:
            logger.debug("Ignoring seasonal event %s: unknown factor %r", ev.id, ev.affects.parameter)
            continue
        out = out.with_value(name, out.value_of(name) + ev.affects.effect)
    return out
