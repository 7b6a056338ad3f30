# riskmap/catalog/library.py
from typing import List

from ..errors import NotFoundError
from ..schemas import Intervention, SeasonalEvent
from .data import INTERVENTIONS, SEASONAL_EVENTS

_INTERVENTIONS = {d["id"]: Intervention(**d) for d in INTERVENTIONS}
_SEASONAL_EVENTS = {d["id"]: SeasonalEvent(**d) for d in SEASONAL_EVENTS}


def list_interventions() -> List[Intervention]:
    return list(_INTERVENTIONS.values())

def get_intervention(intervention_id: str) -> Intervention:
    try:
        return _INTERVENTIONS[intervention_id]
    except KeyError:
        raise NotFoundError("intervention", intervention_id) from None

def list_seasonal_events() -> List[SeasonalEvent]:
    return list(_SEASONAL_EVENTS.values())

def get_seasonal_event(event_id: str) -> SeasonalEvent:
    try:
        return _SEASONAL_EVENTS[event_id]
    except KeyError:
        raise NotFoundError("seasonal event", event_id) from None
