import pytest

from canalflow.ingest.tables import CANAL_CAPACITIES
from canalflow.ingest.validation import CAPACITY_TOLERANCE, NEGATIVE_VALUE_REASON, validate_discharge


@pytest.mark.parametrize("code", ["LNK", "BNK", "Mekhnat"])
def test_capacity_threshold_is_inclusive(code):
    limit = CANAL_CAPACITIES[code] * CAPACITY_TOLERANCE
    assert validate_discharge(code, limit).is_valid
    over = validate_discharge(code, limit + 1e-6)
    assert not over.is_valid
    assert f"{CANAL_CAPACITIES[code]:g}" in over.reason


@pytest.mark.parametrize("code", ["LNK", "UNKNOWN"])
def test_negative_values_are_invalid(code):
    result = validate_discharge(code, -0.5)
    assert not result.is_valid
    assert result.reason == NEGATIVE_VALUE_REASON


def test_unknown_object_has_no_upper_bound():
    result = validate_discharge("UNKNOWN", 1e9)
    assert result.is_valid
    assert result.reason is None


def test_custom_capacity_table():
    assert not validate_discharge("X", 12, capacities={"X": 10}).is_valid
