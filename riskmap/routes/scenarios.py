from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from .. import repository
from ..catalog import SqlRegionCatalog
from ..database import get_db
from ..errors import NotFoundError
from ..schemas import ParameterSetInput, ParameterSetOut, ScenarioInput, ScenarioOut
from ..utils.logging import logger

router = APIRouter(prefix="/api", tags=["scenarios"])

@router.post("/parameter-sets", response_model=ParameterSetOut, status_code=201)
def save_parameter_set(payload: ParameterSetInput, db: Session = Depends(get_db)):
    row = repository.create_parameter_set(db, payload)
    logger.info("Parameter set %s saved (user=%s)", row.id, row.user_id)
    return row

@router.get("/parameter-sets/user/{user_id}", response_model=List[ParameterSetOut])
def user_parameter_sets(user_id: int, db: Session = Depends(get_db)):
    return repository.parameter_sets_for_user(db, user_id)

@router.get("/parameter-sets/{set_id}", response_model=ParameterSetOut)
def parameter_set(set_id: int, db: Session = Depends(get_db)):
    row = repository.get_parameter_set(db, set_id)
    if row is None:
        raise NotFoundError("parameter set", set_id)
    return row

@router.post("/scenarios", response_model=ScenarioOut, status_code=201)
def save_scenario(payload: ScenarioInput, db: Session = Depends(get_db)):
    SqlRegionCatalog(db).require(payload.region_identifier)
    row = repository.create_scenario(db, payload)
    logger.info("Scenario %s saved for region %s", row.id, row.region_identifier)
    return row

@router.get("/scenarios/user/{user_id}", response_model=List[ScenarioOut])
def user_scenarios(user_id: int, db: Session = Depends(get_db)):
    return repository.scenarios_for_user(db, user_id)

@router.get("/scenarios/{scenario_id}", response_model=ScenarioOut)
def scenario(scenario_id: int, db: Session = Depends(get_db)):
    row = repository.get_scenario(db, scenario_id)
    if row is None:
        raise NotFoundError("scenario", scenario_id)
    return row
