"""Data models for ingestion layer."""
from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date as Date
from datetime import datetime
from enum import Enum
from typing import Any, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator

VEGETATION_MONTHS = range(4, 10)
ISO_DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}")


class Season(str, Enum):
    VEGETATION = "vegetation"
    NON_VEGETATION = "non_vegetation"


def iso_date(text: str) -> Date:
    """Parse ``YYYY-MM-DD`` or a full ISO timestamp starting with it.

    Anything else, including trailing text after the date, raises ValueError.
    """
    text = text.strip()
    if not ISO_DATE_PATTERN.match(text):
        raise ValueError(f"not an ISO date: {text!r}")
    if len(text) == 10:
        return Date.fromisoformat(text)
    if text[10] not in "T ":
        raise ValueError(f"not an ISO timestamp: {text!r}")
    return datetime.fromisoformat(text).date()


def season_for_month(month: Optional[int]) -> Optional[Season]:
    """Vegetation season runs April through September inclusive."""
    if month is None:
        return None
    return Season.VEGETATION if month in VEGETATION_MONTHS else Season.NON_VEGETATION


RecordKey = Tuple[str, str, str]


class DischargeRecord(BaseModel):
    """One daily discharge measurement for a canal object."""

    model_config = ConfigDict(frozen=True)

    segment: str = ""
    segment_label: str = ""
    object_code: str = ""
    object_name: str = ""
    country: str = ""
    country_label: str = ""
    parameter: str = ""
    date: str = Field(..., description="ISO date as read from the feed")
    year: Optional[int] = None
    month: Optional[int] = Field(default=None, ge=1, le=12)
    season: Optional[Season] = None
    value: float = Field(..., description="Discharge, m³/s")
    source_file: str = ""
    is_invalid: bool = False
    invalid_reason: Optional[str] = None

    @model_validator(mode="after")
    def _check_period(self) -> "DischargeRecord":
        try:
            parsed = iso_date(self.date)
        except ValueError:
            expected = (None, None)
        else:
            expected = (parsed.year, parsed.month)
        if (self.year, self.month) != expected:
            raise ValueError(f"year/month {(self.year, self.month)!r} do not match date {self.date!r}")
        if self.season != season_for_month(self.month):
            raise ValueError(f"season {self.season!r} does not match month {self.month!r}")
        return self

    @property
    def key(self) -> RecordKey:
        """Identity of the physical measurement."""
        return (self.object_code, self.country, self.date)


class ValidationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    is_valid: bool
    reason: Optional[str] = None


@dataclass(frozen=True)
class ParseResult:
    """Outcome of parsing one raw field."""

    ok: bool
    value: Any = None
    reason: Optional[str] = None

    @classmethod
    def success(cls, value: Any) -> "ParseResult":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, reason: str) -> "ParseResult":
        return cls(ok=False, reason=reason)


class IngestionBatch(BaseModel):
    """Container for ingestion results along with provenance metadata."""

    source_name: str
    records: List[DischargeRecord]
    raw_path: str
    issues: List[str] = Field(default_factory=list)
    skipped_rows: int = 0
    duplicates_removed: int = 0
