"""Post-processing filters and orderings for a scored result set."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

from skydeal_core.schemas import SortKey

if TYPE_CHECKING:
    from collections.abc import Sequence

    from skydeal_core.schemas import FlightOffer

# Stop limit meaning "any number of stops"
ANY_STOPS = 99


class ResultFilter(BaseModel):
    """User-selected narrowing of a result list."""

    max_price: float | None = None
    max_stops: int | None = None
    airlines: list[str] = Field(default_factory=list)

    def matches(self, offer: FlightOffer) -> bool:
        if self.max_price and offer.price > self.max_price:
            return False
        if (
            self.max_stops is not None
            and self.max_stops != ANY_STOPS
            and offer.stops > self.max_stops
        ):
            return False
        if self.airlines and not any(a in self.airlines for a in offer.airlines):
            return False
        return True


class AirlineOption(BaseModel):
    """An airline present somewhere in a result set."""

    code: str
    name: str
    logo_url: str | None = None


def sort_offers(
    offers: Sequence[FlightOffer],
    sort_by: SortKey = SortKey.PRICE,
) -> list[FlightOffer]:
    """Stable sort: price and duration ascending, deal score descending."""
    if sort_by == SortKey.DURATION:
        return sorted(offers, key=lambda o: o.total_duration_min)
    if sort_by == SortKey.DEAL_SCORE:
        return sorted(offers, key=lambda o: o.deal_score, reverse=True)
    return sorted(offers, key=lambda o: o.price)


def filter_and_sort(
    offers: Sequence[FlightOffer],
    result_filter: ResultFilter | None = None,
    sort_by: SortKey = SortKey.PRICE,
) -> list[FlightOffer]:
    flt = result_filter or ResultFilter()
    return sort_offers([o for o in offers if flt.matches(o)], sort_by)


def available_airlines(offers: Sequence[FlightOffer]) -> list[AirlineOption]:
    """Distinct airlines across ``offers`` in first-seen order."""
    seen: dict[str, AirlineOption] = {}
    for offer in offers:
        for code, name, logo in zip(
            offer.airlines, offer.airline_names, offer.airline_logo_urls, strict=True
        ):
            if code not in seen:
                seen[code] = AirlineOption(code=code, name=name, logo_url=logo)
    return list(seen.values())
