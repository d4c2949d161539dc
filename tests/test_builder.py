import pytest
from pydantic import ValidationError

from canalflow.ingest.builder import RowRejected, ValuePolicy, build_record, parse_date, parse_value
from canalflow.ingest.models import DischargeRecord, Season, ValidationResult

FIELDS = ["Upper", "LNK", "Left Bank Canal", "Uzbekistan", "discharge", "2020-07-15", "12.5", "июль 2020.xlsx"]


def _fields(**overrides):
    fields = list(FIELDS)
    positions = {"segment": 0, "code": 1, "country": 3, "date": 5, "value": 6}
    for name, value in overrides.items():
        fields[positions[name]] = value
    return fields


def test_builds_enriched_record():
    record = build_record(FIELDS)
    assert record.year == 2020
    assert record.month == 7
    assert record.season is Season.VEGETATION
    assert record.value == 12.5
    assert record.segment_label == "Верхний"
    assert record.country_label == "Узбекистан"
    assert record.key == ("LNK", "Uzbekistan", "2020-07-15")
    assert not record.is_invalid


@pytest.mark.parametrize(
    "date, season",
    [
        ("2020-03-31", Season.NON_VEGETATION),
        ("2020-04-01", Season.VEGETATION),
        ("2020-09-30", Season.VEGETATION),
        ("2020-10-01", Season.NON_VEGETATION),
    ],
)
def test_season_boundaries(date, season):
    assert build_record(_fields(date=date)).season is season


def test_unknown_codes_keep_raw_labels():
    record = build_record(_fields(segment="Somewhere", country="Narnia"))
    assert record.segment_label == "Somewhere"
    assert record.country_label == "Narnia"


def test_unparsable_value_defaults_to_zero():
    assert build_record(_fields(value="n/a")).value == 0.0


def test_unparsable_value_rejected_under_reject_policy():
    with pytest.raises(RowRejected):
        build_record(_fields(value="n/a"), on_bad_value=ValuePolicy.REJECT)


def test_unparsable_date_leaves_period_unset():
    record = build_record(_fields(date="not a date"))
    assert record.year is None
    assert record.month is None
    assert record.season is None


def test_timestamp_dates_are_accepted():
    record = build_record(_fields(date="2021-01-05T00:00:00"))
    assert (record.year, record.month) == (2021, 1)


def test_negative_value_is_kept_and_flagged():
    record = build_record(_fields(value="-3"))
    assert record.value == -3.0
    assert record.is_invalid
    assert record.invalid_reason


def test_supplied_validation_is_used():
    record = build_record(FIELDS, validation=ValidationResult(is_valid=False, reason="manual"))
    assert record.is_invalid
    assert record.invalid_reason == "manual"


def test_short_field_list_is_rejected():
    with pytest.raises(RowRejected):
        build_record(FIELDS[:5])


def test_records_are_frozen():
    record = build_record(FIELDS)
    with pytest.raises(ValidationError):
        record.is_invalid = True


def test_season_must_match_month():
    with pytest.raises(ValidationError):
        DischargeRecord(date="2020-07-01", year=2020, month=7, season=Season.NON_VEGETATION, value=1.0)


def test_parse_results():
    assert parse_value("1e3").value == 1000.0
    assert not parse_value("nan").ok
    assert not parse_value("").ok
    assert parse_date("2020-02-29").ok
    assert not parse_date("2021-02-29").ok


def test_period_must_match_date():
    with pytest.raises(ValidationError):
        DischargeRecord(date="2020-07-01", year=2021, month=7, season=Season.VEGETATION, value=1.0)
    with pytest.raises(ValidationError):
        DischargeRecord(date="bad", year=2020, month=7, season=Season.VEGETATION, value=1.0)


@pytest.mark.parametrize("text", ["2020-04-01garbage", "20200401", "2020-04-01x12:00", "01.04.2020", ""])
def test_malformed_dates_are_unusable(text):
    assert not parse_date(text).ok
    assert build_record(_fields(date=text)).year is None


@pytest.mark.parametrize("text", ["2020-04-01", " 2020-04-01 ", "2020-04-01T06:30:00", "2020-04-01 06:30"])
def test_iso_dates_and_timestamps_parse(text):
    assert parse_date(text).value.isoformat() == "2020-04-01"


def test_supplied_parse_result_is_used():
    record = build_record(FIELDS, parsed_value=parse_value("7"))
    assert record.value == 7.0
