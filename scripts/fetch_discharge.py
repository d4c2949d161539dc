"""CLI utilities for fetching and summarizing the canal discharge feed."""
from __future__ import annotations

import json
import logging
from collections import defaultdict
from pathlib import Path

import typer

from canalflow.analytics.frame import records_to_frame
from canalflow.analytics.metadata import extract_metadata
from canalflow.analytics.shares import calculate_country_share, compare_periods, utilization_rate
from canalflow.analytics.yearly import calculate_multi_year_average, calculate_yearly_comparison
from canalflow.ingest.csv_loader import load_feed
from canalflow.ingest.feed_client import FeedClient, FeedError
from canalflow.store import DischargeStore

app = typer.Typer(help="Fetch the canal discharge feed and report aggregates")


def configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(message)s")


def _load_store(url: str | None) -> DischargeStore:
    store = DischargeStore(loader=lambda: load_feed(FeedClient(url=url)))
    try:
        store.load()
    except FeedError as exc:
        typer.secho(f"Discharge data unavailable: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    batch = store.batch
    if batch.skipped_rows or batch.issues:
        typer.secho(
            f"{batch.skipped_rows} lines skipped, {len(batch.issues)} issues recorded",
            fg=typer.colors.YELLOW,
            err=True,
        )
    return store


def _utilization_by_object(records) -> dict:
    by_object = defaultdict(list)
    for record in records:
        by_object[record.object_code].append(record)
    rates = {code: utilization_rate(group) for code, group in by_object.items()}
    return {code: rate for code, rate in sorted(rates.items()) if rate is not None}


@app.command()
def summary(
    url: str = typer.Option(None, help="Feed URL; defaults to CANALFLOW_FEED_URL"),
    output: Path | None = typer.Option(None, help="Optional path to dump the JSON summary"),
    verbose: bool = typer.Option(False, "--verbose"),
) -> None:
    """Print dataset catalog, yearly and multi-year aggregates, shares and trends."""
    configure_logging(verbose)
    records = _load_store(url).get()
    yearly = calculate_yearly_comparison(records)
    average = calculate_multi_year_average(yearly)
    periods = compare_periods(records)
    data = {
        "metadata": extract_metadata(records).model_dump(),
        "yearly": [y.model_dump() for y in yearly],
        "multi_year_average": average.model_dump() if average else None,
        "country_share": [s.model_dump() for s in calculate_country_share(records)],
        "period_comparison": periods.model_dump() if periods else None,
        "utilization_percent": _utilization_by_object(records),
    }
    payload = json.dumps(data, indent=2, ensure_ascii=False)
    if output:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(payload, encoding="utf-8")
        typer.secho(f"Summary written to {output}", fg=typer.colors.GREEN)
    else:
        typer.echo(payload)


@app.command()
def export(
    output: Path = typer.Argument(..., help="CSV file to write"),
    url: str = typer.Option(None, help="Feed URL; defaults to CANALFLOW_FEED_URL"),
    verbose: bool = typer.Option(False, "--verbose"),
) -> None:
    """Write the deduplicated record set to CSV."""
    configure_logging(verbose)
    frame = records_to_frame(_load_store(url).get())
    output.parent.mkdir(parents=True, exist_ok=True)
    frame.to_csv(output, index=False)
    typer.secho(f"{len(frame)} records written to {output}", fg=typer.colors.GREEN)


if __name__ == "__main__":  # pragma: no cover
    app()
