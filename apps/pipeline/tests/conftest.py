"""Raw upstream payload factories for mapper and pipeline tests."""

from __future__ import annotations

from typing import Any

import pytest


def _duffel_segment(
    origin: str,
    destination: str,
    carrier: str = "IB",
    number: str = "3100",
    *,
    name: str | None = None,
    logo: str | None = None,
    departing_at: str = "2026-11-02T08:00:00",
    arriving_at: str = "2026-11-02T10:00:00",
    duration: str = "PT2H",
) -> dict[str, Any]:
    return {
        "id": f"seg_{origin}{destination}{carrier}{number}",
        "origin": {"iata_code": origin},
        "destination": {"iata_code": destination},
        "origin_terminal": None,
        "destination_terminal": None,
        "departing_at": departing_at,
        "arriving_at": arriving_at,
        "duration": duration,
        "marketing_carrier": {
            "iata_code": carrier,
            "name": name or f"{carrier} Air",
            "logo_symbol_url": logo,
        },
        "marketing_carrier_flight_number": number,
        "operating_carrier": {"iata_code": carrier},
        "aircraft": {"iata_code": "320"},
        "stops": [],
    }


def _duffel_slice(
    segments: list[dict[str, Any]],
    duration: str = "PT2H",
    origin: dict[str, Any] | None = None,
    destination: dict[str, Any] | None = None,
) -> dict[str, Any]:
    return {
        "duration": duration,
        "origin": origin or {"iata_code": segments[0]["origin"]["iata_code"]},
        "destination": destination
        or {"iata_code": segments[-1]["destination"]["iata_code"]},
        "segments": segments,
    }


def _duffel_offer(
    offer_id: str,
    total_amount: str,
    slices: list[dict[str, Any]] | None = None,
    *,
    currency: str = "EUR",
    passengers: int = 1,
    base_amount: str | None = None,
    total_emissions_kg: str | None = None,
) -> dict[str, Any]:
    if slices is None:
        slices = [_duffel_slice([_duffel_segment("MAD", "BCN")])]
    offer: dict[str, Any] = {
        "id": offer_id,
        "total_amount": total_amount,
        "total_currency": currency,
        "passengers": [{"id": f"pas_{i}", "type": "adult"} for i in range(passengers)],
        "slices": slices,
    }
    if base_amount is not None:
        offer["base_amount"] = base_amount
    if total_emissions_kg is not None:
        offer["total_emissions_kg"] = total_emissions_kg
    return offer


def _amadeus_segment(
    origin: str,
    destination: str,
    carrier: str = "IB",
    number: str = "3456",
    *,
    operating: str | None = None,
    stops: int = 0,
    seg_id: str = "1",
) -> dict[str, Any]:
    seg: dict[str, Any] = {
        "id": seg_id,
        "departure": {"iataCode": origin, "terminal": "4", "at": "2026-11-02T08:00:00"},
        "arrival": {"iataCode": destination, "at": "2026-11-02T10:15:00"},
        "carrierCode": carrier,
        "number": number,
        "aircraft": {"code": "321"},
        "duration": "PT2H15M",
        "numberOfStops": stops,
    }
    if operating:
        seg["operating"] = {"carrierCode": operating}
    return seg


def _amadeus_offer(
    offer_id: str,
    total: str,
    itineraries: list[dict[str, Any]] | None = None,
    *,
    base: str | None = None,
    currency: str = "EUR",
) -> dict[str, Any]:
    if itineraries is None:
        itineraries = [
            {"duration": "PT2H15M", "segments": [_amadeus_segment("MAD", "LHR")]}
        ]
    price: dict[str, Any] = {"total": total, "currency": currency}
    if base is not None:
        price["base"] = base
    return {
        "type": "flight-offer",
        "id": offer_id,
        "itineraries": itineraries,
        "price": price,
        "numberOfBookableSeats": 4,
    }


@pytest.fixture
def amadeus_dictionaries() -> dict[str, Any]:
    return {
        "carriers": {
            "IB": "IBERIA",
            "BA": "BRITISH AIRWAYS",
            "AA": "AMERICAN AIRLINES",
        },
        "locations": {
            "MAD": {"cityCode": "MAD", "countryCode": "ES"},
            "QQQ": {"cityCode": "QQC", "countryCode": "QC"},
        },
    }


@pytest.fixture
def make_duffel_segment():
    return _duffel_segment


@pytest.fixture
def make_duffel_slice():
    return _duffel_slice


@pytest.fixture
def make_duffel_offer():
    return _duffel_offer


@pytest.fixture
def make_amadeus_segment():
    return _amadeus_segment


@pytest.fixture
def make_amadeus_offer():
    return _amadeus_offer
