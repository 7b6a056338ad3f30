from typing import Generator, Optional
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, DeclarativeBase
from sqlalchemy.pool import StaticPool
from .config import settings

def _normalize_db_url(url: str) -> str:
    # Use psycopg v3 driver with SQLAlchemy
    if url.startswith("postgresql://"):
        return "postgresql+psycopg://" + url[len("postgresql://"):]
    if url.startswith("postgres://"):
        return "postgresql+psycopg://" + url[len("postgres://"):]
    return url

_DB_URL = _normalize_db_url(settings.DATABASE_URL)

_engine = None  # lazy-init so importing models never opens a connection
_SessionLocal: Optional[sessionmaker] = None

def _engine_kwargs(url: str) -> dict:
    if not url.startswith("sqlite"):
        return {"pool_pre_ping": True}
    kwargs = {"connect_args": {"check_same_thread": False}}
    # in-memory sqlite lives inside a single connection
    if url in ("sqlite://", "sqlite:///:memory:"):
        kwargs["poolclass"] = StaticPool
    return kwargs

def get_engine():
    global _engine
    if _engine is None:
        _engine = create_engine(
            _DB_URL,
            future=True,  # explicit 2.0-style
            **_engine_kwargs(_DB_URL),
        )
    return _engine

def get_sessionmaker() -> sessionmaker:
    global _SessionLocal
    if _SessionLocal is None:
        _SessionLocal = sessionmaker(
            bind=get_engine(),
            autocommit=False,
            autoflush=False,
            future=True,
        )
    return _SessionLocal

class Base(DeclarativeBase):
    pass

def init_db() -> None:
    from . import models  # noqa: F401  (register tables on Base.metadata)
    Base.metadata.create_all(bind=get_engine())

def get_db() -> Generator:
    db = get_sessionmaker()()
    try:
        yield db
    finally:
        db.close()
