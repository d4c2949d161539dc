"""Construction of typed discharge records from parsed feed fields."""
from __future__ import annotations

import math
from enum import Enum
from typing import Mapping, Optional, Sequence

from .models import DischargeRecord, ParseResult, ValidationResult, iso_date, season_for_month
from .tables import CANAL_CAPACITIES, country_label, segment_label
from .validation import validate_discharge

# Column positions in the feed.
SEGMENT, OBJECT_CODE, OBJECT_NAME, COUNTRY, PARAMETER, DATE, VALUE, SOURCE_FILE = range(8)
MIN_FIELDS = 8


class ValuePolicy(str, Enum):
    """What to do with a row whose value cannot be parsed."""

    ZERO = "zero"
    REJECT = "reject"


class RowRejected(ValueError):
    """Raised when a row cannot be turned into a record under the active policy."""


def parse_value(text: str) -> ParseResult:
    try:
        value = float(text)
    except (TypeError, ValueError):
        return ParseResult.failure(f"unparsable value {text!r}")
    if not math.isfinite(value):
        return ParseResult.failure(f"non-finite value {text!r}")
    return ParseResult.success(value)


def parse_date(text: str) -> ParseResult:
    try:
        return ParseResult.success(iso_date(text))
    except (AttributeError, ValueError):
        return ParseResult.failure(f"unparsable date {text!r}")


def build_record(
    fields: Sequence[str],
    validation: Optional[ValidationResult] = None,
    parsed_value: Optional[ParseResult] = None,
    on_bad_value: ValuePolicy = ValuePolicy.ZERO,
    capacities: Mapping[str, float] = CANAL_CAPACITIES,
) -> DischargeRecord:
    """Map one split feed line onto a :class:`DischargeRecord`.

    ``parsed_value`` and ``validation`` are computed from the fields when not
    supplied.
    A bad date leaves ``year``, ``month`` and ``season`` unset.
    """
    if len(fields) < MIN_FIELDS:
        raise RowRejected(f"expected {MIN_FIELDS} fields, got {len(fields)}")

    if parsed_value is None:
        parsed_value = parse_value(fields[VALUE])
    if parsed_value.ok:
        value = parsed_value.value
    elif on_bad_value is ValuePolicy.REJECT:
        raise RowRejected(parsed_value.reason)
    else:
        value = 0.0

    parsed_date = parse_date(fields[DATE])
    year = month = None
    if parsed_date.ok:
        year, month = parsed_date.value.year, parsed_date.value.month

    object_code = fields[OBJECT_CODE]
    if validation is None:
        validation = validate_discharge(object_code, value, capacities)

    segment = fields[SEGMENT]
    country = fields[COUNTRY]
    return DischargeRecord(
        segment=segment,
        segment_label=segment_label(segment),
        object_code=object_code,
        object_name=fields[OBJECT_NAME],
        country=country,
        country_label=country_label(country),
        parameter=fields[PARAMETER],
        date=fields[DATE],
        year=year,
        month=month,
        season=season_for_month(month),
        value=value,
        source_file=fields[SOURCE_FILE],
        is_invalid=not validation.is_valid,
        invalid_reason=validation.reason,
    )
