"""Ingestion of the canal discharge feed into normalized records."""
from __future__ import annotations

import logging
from typing import List, Optional

from canalflow.config import get_settings

from .builder import MIN_FIELDS, VALUE, RowRejected, ValuePolicy, build_record, parse_value
from .dedup import deduplicate
from .feed_client import FeedClient
from .line_parser import split_line
from .models import DischargeRecord, IngestionBatch

logger = logging.getLogger(__name__)

DEFAULT_SOURCE_NAME = "bwo_discharge"


def parse_feed_text(
    text: str,
    source_name: str = DEFAULT_SOURCE_NAME,
    raw_path: str = "",
    delimiter: Optional[str] = None,
    on_bad_value: ValuePolicy = ValuePolicy.ZERO,
) -> IngestionBatch:
    """Parse the feed body (header line first) and deduplicate the result."""
    delimiter = delimiter or get_settings().delimiter
    records: List[DischargeRecord] = []
    issues: List[str] = []
    skipped = 0

    # Line 1 is the header; numbering below is 1-based over the whole text.
    for lineno, raw_line in enumerate(text.split("\n")[1:], start=2):
        line = raw_line.strip()
        if not line:
            continue

        fields = split_line(line, delimiter)
        if len(fields) < MIN_FIELDS:
            skipped += 1
            logger.debug("Line %d has %d fields; skipped", lineno, len(fields))
            continue

        parsed_value = parse_value(fields[VALUE])
        try:
            record = build_record(fields, parsed_value=parsed_value, on_bad_value=on_bad_value)
        except RowRejected as exc:
            skipped += 1
            issues.append(f"Line {lineno} rejected: {exc}")
            continue

        if not parsed_value.ok:
            logger.debug("Line %d: %s; read as 0", lineno, parsed_value.reason)
            issues.append(f"Line {lineno} value {fields[VALUE]!r} read as 0")
        if record.year is None:
            issues.append(f"Line {lineno} has unparsable date {record.date!r}")
        records.append(record)

    if skipped:
        logger.warning("Skipped %d malformed lines from %s", skipped, source_name)

    canonical = deduplicate(records)
    logger.info(
        "Parsed %d records from %s (%d after deduplication)",
        len(records),
        source_name,
        len(canonical),
    )
    return IngestionBatch(
        source_name=source_name,
        records=canonical,
        raw_path=raw_path,
        issues=issues,
        skipped_rows=skipped,
        duplicates_removed=len(records) - len(canonical),
    )


def load_feed(client: Optional[FeedClient] = None, **kwargs) -> IngestionBatch:
    """Fetch the feed over HTTP and parse it. :class:`FeedError` propagates."""
    client = client or FeedClient()
    text = client.fetch_text()
    return parse_feed_text(text, raw_path=client.url, **kwargs)
