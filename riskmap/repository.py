# riskmap/repository.py
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from .models import ParameterSet, Scenario
from .schemas import ParameterSetInput, ScenarioInput


def create_parameter_set(db: Session, payload: ParameterSetInput) -> ParameterSet:
    row = ParameterSet(
        name=payload.name,
        user_id=payload.user_id,
        parameters=payload.parameters.model_dump(),
    )
    db.add(row)
    db.commit()
    db.refresh(row)
    return row

def get_parameter_set(db: Session, set_id: int) -> Optional[ParameterSet]:
    return db.get(ParameterSet, set_id)

def parameter_sets_for_user(db: Session, user_id: int) -> List[ParameterSet]:
    stmt = select(ParameterSet).where(ParameterSet.user_id == user_id).order_by(ParameterSet.id)
    return list(db.execute(stmt).scalars().all())


def create_scenario(db: Session, payload: ScenarioInput) -> Scenario:
    row = Scenario(
        name=payload.name,
        user_id=payload.user_id,
        region_identifier=payload.region_identifier,
        parameters=payload.parameters.model_dump(),
        interventions=[iv.model_dump() for iv in payload.interventions],
    )
    db.add(row)
    db.commit()
    db.refresh(row)
    return row

def get_scenario(db: Session, scenario_id: int) -> Optional[Scenario]:
    return db.get(Scenario, scenario_id)

def scenarios_for_user(db: Session, user_id: int) -> List[Scenario]:
    stmt = select(Scenario).where(Scenario.user_id == user_id).order_by(Scenario.id)
    return list(db.execute(stmt).scalars().all())
