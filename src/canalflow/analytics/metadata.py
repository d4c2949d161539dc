"""Catalogs of countries, segments, objects and years for filter controls."""
from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from pydantic import BaseModel, Field

from canalflow.ingest.models import DischargeRecord
from canalflow.ingest.tables import ALL_COUNTRIES


class ObjectRef(BaseModel):
    code: str
    name: str


class DatasetMetadata(BaseModel):
    countries: List[str] = Field(default_factory=list)
    segments: List[str] = Field(default_factory=list)
    objects: List[ObjectRef] = Field(default_factory=list)
    # None when no record carries a usable year; callers supply fallbacks.
    min_year: Optional[int] = None
    max_year: Optional[int] = None


def _objects(records: Iterable[DischargeRecord]) -> List[ObjectRef]:
    names: Dict[str, str] = {}
    for record in records:
        names[record.object_code] = record.object_name
    refs = [ObjectRef(code=code, name=name) for code, name in names.items()]
    return sorted(refs, key=lambda ref: ref.name)


def extract_metadata(records: Iterable[DischargeRecord]) -> DatasetMetadata:
    records = list(records)
    years = [r.year for r in records if r.year is not None]
    return DatasetMetadata(
        countries=sorted({r.country for r in records} - {ALL_COUNTRIES}),
        segments=sorted({r.segment for r in records}),
        objects=_objects(records),
        min_year=min(years) if years else None,
        max_year=max(years) if years else None,
    )


def countries_for_object(records: Iterable[DischargeRecord], object_code: str) -> List[str]:
    """Countries that report data for ``object_code``."""
    return sorted({r.country for r in records if r.object_code == object_code} - {ALL_COUNTRIES})


def objects_for_segment(records: Iterable[DischargeRecord], segment: str) -> List[ObjectRef]:
    """Objects within ``segment``; every object when ``segment`` is empty."""
    if segment:
        records = [r for r in records if r.segment == segment]
    return _objects(records)
