# riskmap/store.py
from __future__ import annotations

from typing import Dict, List, Optional, Protocol, Tuple

from pydantic import TypeAdapter, ValidationError
from sqlalchemy import select
from sqlalchemy.orm import Session

from .catalog.data import DISTRICTS_BY_STATE, INDIAN_STATES
from .errors import InputValidationError
from .models import KeyValueEntry
from .schemas import FACTOR_NAMES, RegionParametersData, RiskFactorSet
from .utils.logging import logger

REGION_DATA_KEY = "normsRegionData"

# per-factor (min, max) used when generating initial values
VARIANCE_RANGES: Dict[str, Tuple[float, float]] = {
    "bat_density": (0.2, 0.8),
    "pig_farming_intensity": (0.2, 0.8),
    "fruit_consumption_practices": (0.3, 0.9),
    "human_population_density": (0.3, 0.9),
    "healthcare_infrastructure": (0.2, 0.8),
    "environmental_degradation": (0.2, 0.7),
}

_entries = TypeAdapter(List[RegionParametersData])


# ----------------------------
# Key-value backends
# ----------------------------
class KeyValueStore(Protocol):
    def get(self, key: str) -> Optional[str]: ...
    def set(self, key: str, value: str) -> None: ...


class InMemoryKeyValueStore:
    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value


class SqlKeyValueStore:
    def __init__(self, db: Session):
        self.db = db

    def get(self, key: str) -> Optional[str]:
        row = self.db.execute(select(KeyValueEntry).where(KeyValueEntry.key == key)).scalar_one_or_none()
        return row.value if row else None

    def set(self, key: str, value: str) -> None:
        row = self.db.get(KeyValueEntry, key)
        if row:
            row.value = value
        else:
            self.db.add(KeyValueEntry(key=key, value=value))
        self.db.commit()


# ----------------------------
# Deterministic initial values
# ----------------------------
def _string_hash(s: str) -> int:
    # 32-bit signed rolling hash (h * 31 + c), stable across runs
    h = 0
    for ch in s:
        h = ((h << 5) - h + ord(ch)) & 0xFFFFFFFF
    return h - 0x100000000 if h & 0x80000000 else h


def deterministic_value(state: str, district: str, factor: str) -> float:
    normalized = abs(_string_hash(f"{state}{district}{factor}")) / 2147483647
    lo, hi = VARIANCE_RANGES[factor]
    return lo + normalized * (hi - lo)


def generate_initial_data() -> List[RegionParametersData]:
    data: List[RegionParametersData] = []
    for state in INDIAN_STATES:
        for district in [""] + DISTRICTS_BY_STATE.get(state, []):
            params = {f: deterministic_value(state, district, f) for f in FACTOR_NAMES}
            data.append(RegionParametersData(state=state, district=district, parameters=RiskFactorSet(**params)))
    return data


# ----------------------------
# Region parameter store
# ----------------------------
class RegionParameterStore:
    """
    Factor sets per (state, district), persisted as one JSON document in a
    key-value store. Missing or unreadable data is regenerated.
    """

    def __init__(self, kv: KeyValueStore, key: str = REGION_DATA_KEY):
        self.kv = kv
        self.key = key
        self._data = self._load()

    def _load(self) -> List[RegionParametersData]:
        raw = self.kv.get(self.key)
        if raw is not None:
            try:
                return _entries.validate_json(raw)
            except ValidationError:
                logger.error("Failed to parse saved region data, generating new data")
        data = generate_initial_data()
        self._save(data)
        return data

    def _save(self, data: List[RegionParametersData]) -> None:
        self.kv.set(self.key, _entries.dump_json(data, by_alias=True).decode("utf-8"))

    def _index(self, state: str, district: str) -> int:
        for i, item in enumerate(self._data):
            if item.state == state and item.district == district:
                return i
        return -1

    def all(self) -> List[RegionParametersData]:
        return list(self._data)

    def get(self, state: str, district: str = "") -> RiskFactorSet:
        i = self._index(state, district)
        if i >= 0:
            return self._data[i].parameters.model_copy()
        # unknown district falls back to the state-level entry
        if district:
            i = self._index(state, "")
            if i >= 0:
                return self._data[i].parameters.model_copy()
        return RiskFactorSet()

    def update(self, state: str, district: str, parameters: RiskFactorSet) -> None:
        entry = RegionParametersData(state=state, district=district, parameters=parameters.model_copy())
        i = self._index(state, district)
        if i >= 0:
            self._data[i] = entry
        else:
            self._data.append(entry)
        self._save(self._data)

    def export_data(self) -> str:
        return _entries.dump_json(self._data, by_alias=True, indent=2).decode("utf-8")

    def import_data(self, payload) -> int:
        """Replace all entries with `payload` (JSON text or a list of dicts)."""
        try:
            if isinstance(payload, (str, bytes)):
                data = _entries.validate_json(payload)
            else:
                data = _entries.validate_python(payload)
        except ValidationError as e:
            err = e.errors()[0]
            field = ".".join(str(p) for p in err["loc"]) or "body"
            raise InputValidationError(field, err["msg"]) from None
        self._data = data
        self._save(data)
        logger.info("Imported %d region parameter entries", len(data))
        return len(data)
