"""CLI for scoring saved upstream responses offline."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import click

from skydeal_core.airports import get_airport_directory
from skydeal_core.schemas import FlightOffer, OfferSource, SortKey
from skydeal_ml.result_filter import ResultFilter, filter_and_sort
from skydeal_ml.scoring import compute_price_stats, deal_score_label

from .config import settings
from .mappers import get_mapper
from .pipeline.result_set import ResultSetPipeline

logging.basicConfig(
    level=settings.log_level.upper(), format="%(levelname)s: %(message)s"
)
logger = logging.getLogger(__name__)


def _print_offers(offers: list[FlightOffer]) -> None:
    if not offers:
        click.echo("No flights found.")
        return
    click.echo(f"\nFound {len(offers)} offer(s):\n")
    for i, o in enumerate(offers, 1):
        route = " / ".join(
            f"{s.departure.iata_code}→{s.arrival.iata_code}"
            for s in o.outbound.segments
        )
        trip = "round trip" if o.is_round_trip else "one way"
        click.echo(
            f"  {i}. {o.price:.2f} {o.currency} | {route} ({trip}) | "
            f"{o.total_duration_min}min | {o.stops} stop(s) | "
            f"{', '.join(o.airlines)} | {o.co2_kg} kg CO2 | "
            f"score {o.deal_score} ({deal_score_label(o.deal_score)})"
        )


@click.group()
def cli() -> None:
    """SkyDeal offer pipeline CLI."""


@cli.command("score")
@click.argument(
    "response_file", type=click.Path(exists=True, dir_okay=False, path_type=Path)
)
@click.option(
    "--source",
    type=click.Choice([s.value for s in OfferSource], case_sensitive=False),
    required=True,
    help="Upstream the response came from",
)
@click.option("--passengers", type=int, default=None, help="Amadeus passenger count")
@click.option(
    "--sort",
    "sort_by",
    type=click.Choice([k.value for k in SortKey], case_sensitive=False),
    default=settings.default_sort,
    help="Result ordering",
)
@click.option("--max-price", type=float, default=None, help="Per-passenger limit")
@click.option("--max-stops", type=int, default=None, help="Outbound stop limit")
@click.option("--airline", "airlines", multiple=True, help="Carrier code filter")
@click.option("--json-output", is_flag=True, help="Output as JSON")
def score(
    response_file: Path,
    source: str,
    passengers: int | None,
    sort_by: str,
    max_price: float | None,
    max_stops: int | None,
    airlines: tuple[str, ...],
    json_output: bool,
) -> None:
    """Normalize and score a saved Amadeus or Duffel response body."""
    payload = json.loads(response_file.read_text(encoding="utf-8"))
    mapper = get_mapper(source, passengers=passengers)
    result = ResultSetPipeline(mapper).run_response(payload)

    offers = filter_and_sort(
        result.offers,
        ResultFilter(
            max_price=max_price,
            max_stops=max_stops,
            airlines=[a.upper() for a in airlines],
        ),
        SortKey(sort_by.upper()),
    )
    stats = compute_price_stats(offers)

    if json_output:
        click.echo(
            json.dumps(
                {
                    "offers": [o.model_dump(mode="json") for o in offers],
                    "failures": [f.model_dump(mode="json") for f in result.failures],
                    "price_stats": stats.model_dump(mode="json"),
                },
                indent=2,
            )
        )
        return

    click.echo(
        f"Source: {result.source.value} | Duration: {result.duration_ms}ms | "
        f"Dropped: {len(result.failures)}"
    )
    for failure in result.failures:
        click.echo(f"Dropped {failure.offer_id}: {failure.reason}", err=True)
    _print_offers(offers)
    if offers:
        click.echo(
            f"\nPrice min {stats.min:.2f} | median {stats.median:.2f} | "
            f"max {stats.max:.2f} | mean {stats.mean}"
        )


@cli.command("airport")
@click.argument("query")
@click.option("--limit", type=int, default=10, help="Maximum results")
def airport(query: str, limit: int) -> None:
    """Search the airport directory by code, name or city."""
    matches = get_airport_directory().search(query, limit=limit)
    if not matches:
        click.echo("No airports found.")
        return
    for a in matches:
        click.echo(f"  {a.iata} | {a.name} | {a.city}, {a.country}")
