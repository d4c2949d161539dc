"""Per-year seasonal comparison and the multi-year "typical year"."""
from __future__ import annotations

from collections import defaultdict
from typing import Dict, Iterable, List, Optional, Sequence

from pydantic import BaseModel

from canalflow.ingest.models import DischargeRecord, Season

from .seasonal import SeasonalAnalytics, calculate_seasonal_analytics


class YearlyComparison(BaseModel):
    year: int
    vegetation: SeasonalAnalytics
    non_vegetation: SeasonalAnalytics
    seasonality_coefficient: float
    total_annual: float


class SeasonAverage(BaseModel):
    avg_volume: float
    avg_discharge: float


class MultiYearAverage(BaseModel):
    vegetation: SeasonAverage
    non_vegetation: SeasonAverage
    years_count: int


def calculate_yearly_comparison(records: Iterable[DischargeRecord]) -> List[YearlyComparison]:
    """One comparison per year present, ascending.

    Records are grouped by their own ``year``; records without one are left out.
    """
    by_year: Dict[int, List[DischargeRecord]] = defaultdict(list)
    for record in records:
        if record.year is not None:
            by_year[record.year].append(record)

    comparisons: List[YearlyComparison] = []
    for year in sorted(by_year):
        year_records = by_year[year]
        veg = calculate_seasonal_analytics(r for r in year_records if r.season is Season.VEGETATION)
        non_veg = calculate_seasonal_analytics(r for r in year_records if r.season is Season.NON_VEGETATION)
        coefficient = veg.avg_discharge / non_veg.avg_discharge if non_veg.avg_discharge > 0 else 0.0
        comparisons.append(
            YearlyComparison(
                year=year,
                vegetation=veg,
                non_vegetation=non_veg,
                seasonality_coefficient=coefficient,
                total_annual=veg.total_volume_million + non_veg.total_volume_million,
            )
        )
    return comparisons


def _mean(values: List[float]) -> float:
    return sum(values) / len(values)


def calculate_multi_year_average(yearly: Sequence[YearlyComparison]) -> Optional[MultiYearAverage]:
    """Mean seasonal volume and discharge across ``yearly``; None when empty."""
    if not yearly:
        return None

    return MultiYearAverage(
        vegetation=SeasonAverage(
            avg_volume=_mean([y.vegetation.total_volume_million for y in yearly]),
            avg_discharge=_mean([y.vegetation.avg_discharge for y in yearly]),
        ),
        non_vegetation=SeasonAverage(
            avg_volume=_mean([y.non_vegetation.total_volume_million for y in yearly]),
            avg_discharge=_mean([y.non_vegetation.avg_discharge for y in yearly]),
        ),
        years_count=len(yearly),
    )
