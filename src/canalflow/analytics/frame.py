"""Tabular export of discharge records."""
from __future__ import annotations

from typing import Iterable

import pandas as pd

from canalflow.ingest.models import DischargeRecord

COLUMNS = [
    "segment",
    "segment_label",
    "object_code",
    "object_name",
    "country",
    "country_label",
    "parameter",
    "date",
    "year",
    "month",
    "season",
    "value",
    "source_file",
    "is_invalid",
    "invalid_reason",
]


def records_to_frame(records: Iterable[DischargeRecord]) -> pd.DataFrame:
    rows = [record.model_dump(mode="json") for record in records]
    return pd.DataFrame(rows, columns=COLUMNS)
