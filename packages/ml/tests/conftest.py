"""Shared fixtures for scoring, emission and filter tests."""

from __future__ import annotations

import pytest

from skydeal_core.airports import AirportDirectory
from skydeal_core.schemas import (
    Airport,
    FlightOffer,
    OfferSource,
    Segment,
    SegmentEndpoint,
    Slice,
)


def _segment(origin: str, destination: str, carrier: str = "IB") -> Segment:
    return Segment(
        id=f"seg_{origin}_{destination}",
        departure=SegmentEndpoint(iata_code=origin, at="2026-11-02T08:00:00"),
        arrival=SegmentEndpoint(iata_code=destination, at="2026-11-02T10:00:00"),
        carrier_code=carrier,
        carrier_name=f"{carrier} Airways",
        operating_carrier=carrier,
        flight_number=f"{carrier}100",
        duration="PT2H",
    )


@pytest.fixture
def make_segment():
    return _segment


@pytest.fixture
def grid_directory() -> AirportDirectory:
    """Airports on the equator, one degree of longitude apart where noted."""
    return AirportDirectory(
        [
            Airport(iata="AAA", name="A", city="A", lat=0.0, lng=0.0),
            Airport(iata="BBB", name="B", city="B", lat=0.0, lng=1.0),
            Airport(iata="CCC", name="C", city="C", lat=0.0, lng=20.0),
            Airport(iata="DDD", name="D", city="D", lat=10.0, lng=10.0),
            Airport(iata="NOC", name="No coords", city="N"),
        ]
    )


@pytest.fixture
def make_offer():
    """Factory fixture for FlightOffer instances with ``stops + 1`` segments."""

    def _make(
        price: float,
        duration_min: int = 120,
        stops: int = 0,
        offer_id: str | None = None,
        carriers: tuple[str, ...] = ("IB",),
        deal_score: int = 0,
    ) -> FlightOffer:
        codes = ["MAD", *(f"X{i:02d}" for i in range(stops)), "JFK"]
        segments = [
            _segment(codes[i], codes[i + 1], carriers[i % len(carriers)])
            for i in range(stops + 1)
        ]
        airlines = list(dict.fromkeys(carriers))
        return FlightOffer(
            id=offer_id or f"off_{price}_{duration_min}_{stops}",
            source=OfferSource.DUFFEL,
            origin=Airport(iata="MAD", name="Madrid", city="Madrid"),
            destination=Airport(iata="JFK", name="JFK", city="New York"),
            price=price,
            price_base=price,
            currency="EUR",
            outbound=Slice(
                duration="",
                duration_min=duration_min,
                stops=stops,
                segments=segments,
            ),
            total_duration_min=duration_min,
            stops=stops,
            airlines=airlines,
            airline_names=[f"{c} Airways" for c in airlines],
            airline_logo_urls=[None for _ in airlines],
            deal_score=deal_score,
        )

    return _make
