# tests/test_migrations.py
from pathlib import Path

from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, inspect

from riskmap import models  # noqa: F401
from riskmap.config import settings
from riskmap.database import Base

ROOT = Path(__file__).resolve().parents[2]
TABLES = ["regions", "parameter_sets", "scenarios", "kv_entries"]

def _shape(engine):
    insp = inspect(engine)
    return {
        table: (
            sorted((i["name"], tuple(i["column_names"]), bool(i["unique"])) for i in insp.get_indexes(table)),
            insp.get_unique_constraints(table),
        )
        for table in TABLES
    }

def test_migration_builds_the_same_schema_as_the_models(tmp_path, monkeypatch):
    url = f"sqlite:///{tmp_path / 'migrated.db'}"
    # env.py prefers settings.DATABASE_URL over the ini value
    monkeypatch.setattr(settings, "DATABASE_URL", url)
    cfg = Config()
    cfg.set_main_option("script_location", str(ROOT / "alembic"))
    cfg.set_main_option("sqlalchemy.url", url)
    command.upgrade(cfg, "head")

    models = create_engine(f"sqlite:///{tmp_path / 'models.db'}")
    Base.metadata.create_all(models)

    migrated = _shape(create_engine(url))
    assert migrated == _shape(models)
    assert migrated["regions"][1] == []
