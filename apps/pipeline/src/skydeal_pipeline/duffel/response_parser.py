"""Map Duffel offer-request results into FlightOffer objects."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from skydeal_core.schemas import Airport, OfferSource, Segment, SegmentEndpoint

from ..base import BaseOfferMapper, require_list

if TYPE_CHECKING:
    from skydeal_core.schemas import FlightOffer

logger = logging.getLogger(__name__)


def _endpoint(place: dict[str, Any], terminal: str | None, at: str) -> SegmentEndpoint:
    return SegmentEndpoint(
        iata_code=place["iata_code"],
        terminal=terminal or place.get("terminal"),
        at=at,
    )


def _map_segment(seg: dict[str, Any]) -> Segment:
    """Duffel snake_case segment -> :class:`Segment`."""
    carrier = seg["marketing_carrier"]
    code = carrier["iata_code"]
    operating = seg.get("operating_carrier") or {}
    aircraft = seg.get("aircraft") or {}
    return Segment(
        id=str(seg.get("id", "")),
        departure=_endpoint(
            seg["origin"], seg.get("origin_terminal"), seg["departing_at"]
        ),
        arrival=_endpoint(
            seg["destination"], seg.get("destination_terminal"), seg["arriving_at"]
        ),
        carrier_code=code,
        carrier_name=carrier.get("name") or code,
        carrier_logo_url=carrier.get("logo_symbol_url"),
        operating_carrier=operating.get("iata_code") or code,
        flight_number=f"{code}{seg.get('marketing_carrier_flight_number', '')}",
        aircraft_code=aircraft.get("iata_code") or "",
        duration=seg.get("duration") or "",
        stops=len(seg.get("stops") or []),
    )


class DuffelOfferMapper(BaseOfferMapper):
    """Duffel ``slices``/``segments`` offers with inline carrier objects."""

    source = OfferSource.DUFFEL

    def unwrap_response(
        self, payload: dict[str, Any]
    ) -> tuple[list[dict[str, Any]], dict[str, Any] | None]:
        data = payload.get("data") or []
        # Raw offer-request bodies nest the offers one level down
        if isinstance(data, dict):
            data = data.get("offers") or []
        logger.debug("Duffel response carries %d offers", len(data))
        return data, None

    def map_offer(
        self, raw: dict[str, Any], auxiliary: dict[str, Any] | None = None
    ) -> FlightOffer:
        slices = require_list(raw, "slices", "slices")
        outbound_raw = slices[0]
        inbound_raw = slices[1] if len(slices) > 1 else None

        outbound = self.build_slice(
            outbound_raw.get("duration"),
            [
                _map_segment(s)
                for s in require_list(outbound_raw, "segments", "outbound segments")
            ],
        )
        inbound = None
        if inbound_raw is not None:
            inbound = self.build_slice(
                inbound_raw.get("duration"),
                [
                    _map_segment(s)
                    for s in require_list(inbound_raw, "segments", "inbound segments")
                ],
            )

        return self.build_offer(
            offer_id=str(raw["id"]),
            outbound=outbound,
            inbound=inbound,
            total_amount=raw["total_amount"],
            base_amount=raw.get("base_amount"),
            currency=raw.get("total_currency"),
            passengers=len(raw.get("passengers") or []),
            emissions_kg=raw.get("total_emissions_kg"),
            origin=self._airport(outbound.origin_iata, outbound_raw.get("origin")),
            destination=self._airport(
                outbound.destination_iata, outbound_raw.get("destination")
            ),
        )

    def _airport(self, iata: str, place: dict[str, Any] | None) -> Airport:
        place = place or {}
        return self.resolve_airport(
            iata,
            name=place.get("name"),
            city=place.get("city_name"),
            country=place.get("iata_country_code"),
        )
