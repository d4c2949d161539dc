"""Volume and discharge statistics over an arbitrary record subset."""
from __future__ import annotations

from typing import Iterable

import pandas as pd
from pydantic import BaseModel

from canalflow.ingest.models import DischargeRecord

SECONDS_PER_DAY = 86400
CUBIC_METERS_PER_MILLION = 1_000_000


class SeasonalAnalytics(BaseModel):
    total_volume: float = 0.0
    total_volume_million: float = 0.0
    avg_discharge: float = 0.0
    max_discharge: float = 0.0
    min_discharge: float = 0.0
    days_count: int = 0
    variability_index: float = 0.0


def calculate_seasonal_analytics(records: Iterable[DischargeRecord]) -> SeasonalAnalytics:
    """Aggregate the valid records of ``records``.

    Each record is taken as one day at its average rate, so its volume is
    ``value * 86400`` m³. Invalid records are ignored; an empty selection
    yields all-zero statistics.
    """
    values = pd.Series([r.value for r in records if not r.is_invalid], dtype="float64")
    if values.empty:
        return SeasonalAnalytics()

    avg = float(values.mean())
    high = float(values.max())
    low = float(values.min())
    total = float((values * SECONDS_PER_DAY).sum())
    return SeasonalAnalytics(
        total_volume=total,
        total_volume_million=total / CUBIC_METERS_PER_MILLION,
        avg_discharge=avg,
        max_discharge=high,
        min_discharge=low,
        days_count=int(values.size),
        variability_index=(high - low) / avg if avg > 0 else 0.0,
    )
