from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..catalog import SqlRegionCatalog, list_interventions, list_seasonal_events
from ..database import get_db
from ..schemas import Intervention, Region, SeasonalEvent

router = APIRouter(prefix="/api", tags=["catalog"])

@router.get("/regions", response_model=List[Region])
def all_regions(db: Session = Depends(get_db)):
    return SqlRegionCatalog(db).get_all()

@router.get("/regions/{identifier}", response_model=Region)
def region_by_identifier(identifier: str, db: Session = Depends(get_db)):
    return SqlRegionCatalog(db).require(identifier)

@router.get("/interventions", response_model=List[Intervention])
def interventions():
    return list_interventions()

@router.get("/seasonal-events", response_model=List[SeasonalEvent])
def seasonal_events():
    return list_seasonal_events()
