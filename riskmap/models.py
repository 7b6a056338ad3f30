from __future__ import annotations
from typing import Optional, List, Any
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import String, Integer, Float, DateTime, JSON, func
from .database import Base

# ----------------------------
# Region reference data
# ----------------------------
class RegionRecord(Base):
    __tablename__ = "regions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    identifier: Mapped[str] = mapped_column(String(64), unique=True, nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(128), nullable=False)
    center: Mapped[List[float]] = mapped_column(JSON, nullable=False)       # [lat, lng]
    coordinates: Mapped[List[Any]] = mapped_column(JSON, nullable=False)    # polygon [[lat, lng], ...]
    base_risk_score: Mapped[float] = mapped_column(Float, nullable=False)

# ----------------------------
# Saved factor configurations
# ----------------------------
class ParameterSet(Base):
    __tablename__ = "parameter_sets"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(128), nullable=False)
    user_id: Mapped[Optional[int]] = mapped_column(Integer, index=True)
    parameters: Mapped[dict] = mapped_column(JSON, nullable=False)
    created_at: Mapped[DateTime] = mapped_column(DateTime(timezone=True), server_default=func.now())

# ----------------------------
# Intervention scenarios
# ----------------------------
class Scenario(Base):
    __tablename__ = "scenarios"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(128), nullable=False)
    user_id: Mapped[Optional[int]] = mapped_column(Integer, index=True)
    region_identifier: Mapped[str] = mapped_column(String(64), nullable=False)
    parameters: Mapped[dict] = mapped_column(JSON, nullable=False)
    interventions: Mapped[List[Any]] = mapped_column(JSON, nullable=False)  # list of active interventions
    created_at: Mapped[DateTime] = mapped_column(DateTime(timezone=True), server_default=func.now())

# ----------------------------
# Key-value blobs (region parameter data)
# ----------------------------
class KeyValueEntry(Base):
    __tablename__ = "kv_entries"

    key: Mapped[str] = mapped_column(String(128), primary_key=True)
    value: Mapped[Any] = mapped_column(JSON)
    updated_at: Mapped[DateTime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )
