import os

# in-memory database for the whole test session; must be set before riskmap.config loads
os.environ["DATABASE_URL"] = "sqlite://"

import pytest
from fastapi.testclient import TestClient

from riskmap.database import Base, get_engine, get_sessionmaker, init_db
from riskmap.main import app
from riskmap.schemas import RiskFactorSet

@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c
    Base.metadata.drop_all(bind=get_engine())

@pytest.fixture
def db():
    init_db()
    session = get_sessionmaker()()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=get_engine())

@pytest.fixture
def scenario_factors():
    return RiskFactorSet(
        bat_density=0.6,
        pig_farming_intensity=0.4,
        fruit_consumption_practices=0.7,
        human_population_density=0.5,
        healthcare_infrastructure=0.5,
        environmental_degradation=0.3,
    )
