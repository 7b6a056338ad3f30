from typing import Any, List

from fastapi import APIRouter, Body, Depends
from fastapi.responses import Response
from sqlalchemy.orm import Session

from ..database import get_db
from ..schemas import RegionParametersData, RiskFactorSet, RiskParametersInput
from ..store import RegionParameterStore, SqlKeyValueStore

router = APIRouter(prefix="/api/region-parameters", tags=["region-parameters"])

def get_store(db: Session = Depends(get_db)) -> RegionParameterStore:
    return RegionParameterStore(SqlKeyValueStore(db))

# fixed paths first so they don't match /{state}
@router.get("/export")
def export_region_parameters(store: RegionParameterStore = Depends(get_store)):
    return Response(
        content=store.export_data(),
        media_type="application/json",
        headers={"Content-Disposition": 'attachment; filename="norms-region-data.json"'},
    )

@router.post("/import")
def import_region_parameters(data: List[Any] = Body(...), store: RegionParameterStore = Depends(get_store)):
    return {"ok": True, "imported": store.import_data(data)}

@router.get("", response_model=List[RegionParametersData])
def all_region_parameters(store: RegionParameterStore = Depends(get_store)):
    return store.all()

@router.get("/{state}", response_model=RiskFactorSet)
def region_parameters(state: str, district: str = "", store: RegionParameterStore = Depends(get_store)):
    return store.get(state, district)

@router.put("/{state}", response_model=RiskFactorSet)
def update_region_parameters(
    state: str,
    payload: RiskParametersInput,
    district: str = "",
    store: RegionParameterStore = Depends(get_store),
):
    factors = payload.to_factor_set()
    store.update(state, district, factors)
    return factors
