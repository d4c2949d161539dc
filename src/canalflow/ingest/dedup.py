"""Collapsing of duplicate measurements pulled from overlapping source files."""
from __future__ import annotations

import re
from typing import Callable, Dict, Iterable, List, Optional

from .models import DischargeRecord, RecordKey
from .tables import MONTH_NAMES

YEAR_PATTERN = re.compile(r"\d{4}")

DateMatcher = Callable[[str, Optional[int], Optional[int]], bool]


def filename_year(filename: str) -> int:
    """First run of four digits in ``filename``, or 0."""
    match = YEAR_PATTERN.search(filename)
    return int(match.group(0)) if match else 0


def filename_month(filename: str) -> int:
    """Month of the first month name contained in ``filename``, or 0."""
    lowered = filename.lower()
    for name, number in MONTH_NAMES.items():
        if name in lowered:
            return number
    return 0


def matches_date(filename: str, year: Optional[int], month: Optional[int]) -> bool:
    """True when ``filename`` names the same year and month as the record."""
    return filename_year(filename) == year and filename_month(filename) == month


def _prefer(existing: DischargeRecord, candidate: DischargeRecord, matcher: DateMatcher) -> DischargeRecord:
    if existing.is_invalid != candidate.is_invalid:
        return existing if candidate.is_invalid else candidate
    if existing.is_invalid:
        return existing

    candidate_matches = matcher(candidate.source_file, candidate.year, candidate.month)
    existing_matches = matcher(existing.source_file, existing.year, existing.month)
    if candidate_matches and not existing_matches:
        return candidate
    return existing


def deduplicate(
    records: Iterable[DischargeRecord],
    matcher: DateMatcher = matches_date,
) -> List[DischargeRecord]:
    """Keep exactly one record per ``(object_code, country, date)``.

    A valid record beats an invalid one. Among invalid records the first
    seen is kept. Among valid records a later one replaces the held record
    only if its source file names the record's own month and the held
    record's file does not.
    """
    kept: Dict[RecordKey, DischargeRecord] = {}
    for record in records:
        existing = kept.get(record.key)
        if existing is None:
            kept[record.key] = record
        else:
            kept[record.key] = _prefer(existing, record, matcher)
    return list(kept.values())
