from .regions import RegionCatalog, SqlRegionCatalog, default_catalog, seed_regions
from .library import get_intervention, get_seasonal_event, list_interventions, list_seasonal_events

__all__ = [
    "RegionCatalog",
    "SqlRegionCatalog",
    "default_catalog",
    "seed_regions",
    "get_intervention",
    "get_seasonal_event",
    "list_interventions",
    "list_seasonal_events",
]
