"""Country shares, half-period trend and capacity utilization."""
from __future__ import annotations

from typing import Dict, Iterable, List, Mapping, Optional, Sequence

from pydantic import BaseModel

from canalflow.ingest.models import DischargeRecord
from canalflow.ingest.tables import CANAL_CAPACITIES

from .seasonal import CUBIC_METERS_PER_MILLION, SECONDS_PER_DAY

# Changes below this many percent count as stable.
STABLE_CHANGE_PERCENT = 5.0


class CountryShare(BaseModel):
    country: str
    volume: float
    percentage: float


class PeriodComparison(BaseModel):
    first_start: str
    first_end: str
    second_start: str
    second_end: str
    first_avg: float
    second_avg: float
    percent_change: float
    is_stable: bool


def calculate_country_share(records: Iterable[DischargeRecord]) -> List[CountryShare]:
    """Volume (million m³) and share of total for each country, valid records only."""
    volumes: Dict[str, float] = {}
    for record in records:
        if record.is_invalid:
            continue
        volumes[record.country] = volumes.get(record.country, 0.0) + record.value * SECONDS_PER_DAY

    total = sum(volumes.values())
    return [
        CountryShare(
            country=country,
            volume=volume / CUBIC_METERS_PER_MILLION,
            percentage=volume / total * 100 if total > 0 else 0.0,
        )
        for country, volume in volumes.items()
    ]


def _average(records: Sequence[DischargeRecord]) -> float:
    return sum(r.value for r in records) / len(records) if records else 0.0


def compare_periods(records: Iterable[DischargeRecord]) -> Optional[PeriodComparison]:
    """Split the subset chronologically in half and compare mean discharge."""
    ordered = sorted(records, key=lambda r: r.date)
    if len(ordered) < 2:
        return None

    mid = len(ordered) // 2
    first, second = ordered[:mid], ordered[mid:]
    first_avg, second_avg = _average(first), _average(second)
    change = (second_avg - first_avg) / first_avg * 100 if first_avg != 0 else 0.0
    return PeriodComparison(
        first_start=first[0].date,
        first_end=first[-1].date,
        second_start=second[0].date,
        second_end=second[-1].date,
        first_avg=first_avg,
        second_avg=second_avg,
        percent_change=change,
        is_stable=abs(change) < STABLE_CHANGE_PERCENT,
    )


def utilization_rate(
    records: Sequence[DischargeRecord],
    capacities: Mapping[str, float] = CANAL_CAPACITIES,
) -> Optional[float]:
    """Mean discharge as a percentage of the object's rated capacity."""
    if not records:
        return None
    capacity = capacities.get(records[0].object_code)
    if not capacity:
        return None
    return _average(records) / capacity * 100
