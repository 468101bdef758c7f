"""Map Amadeus Flight Offers Search results into FlightOffer objects."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from skydeal_core.schemas import Airport, OfferSource, Segment, SegmentEndpoint

from ..base import BaseOfferMapper, OfferMappingError, require_list
from ..config import settings

if TYPE_CHECKING:
    from skydeal_core.airports import AirportDirectory
    from skydeal_core.schemas import FlightOffer
    from skydeal_ml.emissions import EmissionEstimator

logger = logging.getLogger(__name__)


def _endpoint(raw: dict[str, Any]) -> SegmentEndpoint:
    return SegmentEndpoint(
        iata_code=raw["iataCode"],
        terminal=raw.get("terminal"),
        at=raw["at"],
    )


def _map_segment(seg: dict[str, Any], carriers: dict[str, str]) -> Segment:
    carrier_code = seg["carrierCode"]
    operating = seg.get("operating") or {}
    aircraft = seg.get("aircraft") or {}
    return Segment(
        id=str(seg.get("id", "")),
        departure=_endpoint(seg["departure"]),
        arrival=_endpoint(seg["arrival"]),
        carrier_code=carrier_code,
        carrier_name=carriers.get(carrier_code, carrier_code),
        carrier_logo_url=None,
        operating_carrier=operating.get("carrierCode", carrier_code),
        flight_number=f"{carrier_code}{seg.get('number', '')}",
        aircraft_code=aircraft.get("code", ""),
        duration=seg.get("duration", ""),
        stops=int(seg.get("numberOfStops", 0)),
    )


class AmadeusOfferMapper(BaseOfferMapper):
    """Amadeus ``itineraries``/``segments`` offers.

    Carrier names come from the response ``dictionaries``; Amadeus offers do
    not embed a passenger list, so the count of the originating search is
    passed in.
    """

    source = OfferSource.AMADEUS

    def __init__(
        self,
        passengers: int | None = None,
        directory: AirportDirectory | None = None,
        estimator: EmissionEstimator | None = None,
    ) -> None:
        super().__init__(directory=directory, estimator=estimator)
        self._passengers = passengers or settings.default_passengers

    def unwrap_response(
        self, payload: dict[str, Any]
    ) -> tuple[list[dict[str, Any]], dict[str, Any] | None]:
        offers = payload.get("data") or []
        logger.debug("Amadeus response carries %d offers", len(offers))
        return offers, payload.get("dictionaries")

    def map_offer(
        self, raw: dict[str, Any], auxiliary: dict[str, Any] | None = None
    ) -> FlightOffer:
        dictionaries = auxiliary or {}
        carriers: dict[str, str] = dictionaries.get("carriers") or {}
        locations: dict[str, dict[str, Any]] = dictionaries.get("locations") or {}

        itineraries = require_list(raw, "itineraries", "itineraries")
        outbound_raw = itineraries[0]
        inbound_raw = itineraries[1] if len(itineraries) > 1 else None

        outbound = self.build_slice(
            outbound_raw.get("duration"),
            [
                _map_segment(s, carriers)
                for s in require_list(outbound_raw, "segments", "outbound segments")
            ],
        )
        inbound = None
        if inbound_raw is not None:
            inbound = self.build_slice(
                inbound_raw.get("duration"),
                [
                    _map_segment(s, carriers)
                    for s in require_list(inbound_raw, "segments", "inbound segments")
                ],
            )

        price = raw.get("price") or {}
        total = price.get("total")
        if total is None:
            total = price.get("grandTotal")
        if total is None:
            msg = "missing price total"
            raise OfferMappingError(msg)

        return self.build_offer(
            offer_id=str(raw["id"]),
            outbound=outbound,
            inbound=inbound,
            total_amount=total,
            base_amount=price.get("base"),
            currency=price.get("currency"),
            passengers=self._passengers,
            origin=self._airport(outbound.origin_iata, locations),
            destination=self._airport(outbound.destination_iata, locations),
        )

    def _airport(self, iata: str, locations: dict[str, dict[str, Any]]) -> Airport:
        location = locations.get(iata) or {}
        return self.resolve_airport(
            iata,
            city=location.get("cityCode"),
            country=location.get("countryCode"),
        )
