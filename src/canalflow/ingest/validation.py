"""Capacity-based plausibility checks for discharge values."""
from __future__ import annotations

from typing import Mapping

from .models import ValidationResult
from .tables import CANAL_CAPACITIES

# Values up to 10% above the rated capacity are still accepted.
CAPACITY_TOLERANCE = 1.1

NEGATIVE_VALUE_REASON = "negative value"


def validate_discharge(
    object_code: str,
    value: float,
    capacities: Mapping[str, float] = CANAL_CAPACITIES,
) -> ValidationResult:
    """Classify a discharge value for ``object_code``.

    Invalid values are only flagged; callers keep the record and leave it
    out of aggregates.
    """
    if value < 0:
        return ValidationResult(is_valid=False, reason=NEGATIVE_VALUE_REASON)

    capacity = capacities.get(object_code)
    if capacity and value > capacity * CAPACITY_TOLERANCE:
        return ValidationResult(
            is_valid=False,
            reason=f"exceeds canal capacity (max: {capacity:g} m³/s)",
        )

    return ValidationResult(is_valid=True)
