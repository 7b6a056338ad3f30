# riskmap/catalog/regions.py
from typing import Dict, Iterable, List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from ..errors import NotFoundError
from ..models import RegionRecord
from ..schemas import Region
from .data import REGIONS


class RegionCatalog:
    """Read-only, in-memory region lookup used by the scoring core."""

    def __init__(self, regions: Iterable[Region]):
        self._by_id: Dict[str, Region] = {}
        for r in regions:
            self._by_id[r.identifier] = r

    def get_all(self) -> List[Region]:
        return list(self._by_id.values())

    def get_by_identifier(self, identifier: str) -> Optional[Region]:
        return self._by_id.get(identifier)

    def require(self, identifier: str) -> Region:
        region = self.get_by_identifier(identifier)
        if region is None:
            raise NotFoundError("region", identifier)
        return region


def default_catalog() -> RegionCatalog:
    return RegionCatalog(Region(**r) for r in REGIONS)


def _to_region(row: RegionRecord) -> Region:
    return Region(
        identifier=row.identifier,
        name=row.name,
        base_risk_score=row.base_risk_score,
        center=tuple(row.center),
        coordinates=[tuple(p) for p in row.coordinates],
    )


class SqlRegionCatalog:
    """Same read contract, backed by the regions table. Only this one can create."""

    def __init__(self, db: Session):
        self.db = db

    def get_all(self) -> List[Region]:
        rows = self.db.execute(select(RegionRecord).order_by(RegionRecord.id)).scalars().all()
        return [_to_region(r) for r in rows]

    def get_by_identifier(self, identifier: str) -> Optional[Region]:
        row = self.db.execute(
            select(RegionRecord).where(RegionRecord.identifier == identifier)
        ).scalar_one_or_none()
        return _to_region(row) if row else None

    def require(self, identifier: str) -> Region:
        region = self.get_by_identifier(identifier)
        if region is None:
            raise NotFoundError("region", identifier)
        return region

    def create(self, region: Region) -> Region:
        self.db.add(RegionRecord(
            identifier=region.identifier,
            name=region.name,
            center=list(region.center),
            coordinates=[list(p) for p in region.coordinates],
            base_risk_score=region.base_risk_score,
        ))
        self.db.commit()
        return region


def seed_regions(db: Session) -> int:
    """Insert the reference regions that aren't stored yet. Returns how many were added."""
    catalog = SqlRegionCatalog(db)
    added = 0
    for region in default_catalog().get_all():
        if catalog.get_by_identifier(region.identifier) is None:
            catalog.create(region)
            added += 1
    return added
