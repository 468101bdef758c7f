"""Shared fixtures for core schema and directory tests."""

from __future__ import annotations

import pytest

from skydeal_core.airports import AirportDirectory
from skydeal_core.schemas import (
    Airport,
    OfferSource,
    Segment,
    SegmentEndpoint,
    Slice,
)


@pytest.fixture
def directory() -> AirportDirectory:
    return AirportDirectory(
        [
            Airport(iata="MAD", name="Madrid-Barajas", city="Madrid", country="ES",
                    lat=40.4719, lng=-3.5626),
            Airport(iata="LHR", name="London Heathrow", city="London", country="GB",
                    lat=51.47, lng=-0.4543),
            Airport(iata="LGW", name="London Gatwick", city="London", country="GB",
                    lat=51.1537, lng=-0.1821),
            Airport(iata="NUL", name="Null Island", city="Atlantic", country="",
                    lat=0.0, lng=0.0),
        ]
    )


@pytest.fixture
def make_segment():
    """Factory fixture for Segment instances."""

    def _make(origin: str, destination: str, carrier: str = "IB") -> Segment:
        return Segment(
            id=f"seg_{origin}_{destination}",
            departure=SegmentEndpoint(iata_code=origin, at="2026-11-02T08:00:00"),
            arrival=SegmentEndpoint(iata_code=destination, at="2026-11-02T10:00:00"),
            carrier_code=carrier,
            carrier_name=carrier,
            operating_carrier=carrier,
            flight_number=f"{carrier}100",
            duration="PT2H",
        )

    return _make


@pytest.fixture
def make_offer_fields(make_segment):
    """Factory for the keyword arguments of a valid one-way FlightOffer."""

    def _make(**overrides):
        outbound = Slice(
            duration="PT2H",
            duration_min=120,
            stops=0,
            segments=[make_segment("MAD", "LHR")],
        )
        fields = {
            "id": "off_1",
            "source": OfferSource.DUFFEL,
            "origin": Airport(iata="MAD", name="Madrid", city="Madrid"),
            "destination": Airport(iata="LHR", name="Heathrow", city="London"),
            "price": 120.0,
            "price_base": 100.0,
            "currency": "EUR",
            "outbound": outbound,
            "total_duration_min": 120,
            "stops": 0,
            "airlines": ["IB"],
            "airline_names": ["Iberia"],
            "airline_logo_urls": [None],
        }
        fields.update(overrides)
        return fields

    return _make
