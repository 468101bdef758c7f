"""Canonical flight offer DTOs shared by every upstream mapper."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .airport import Airport
from .enums import OfferSource


class SegmentEndpoint(BaseModel):
    """Departure or arrival side of a segment."""

    model_config = ConfigDict(frozen=True)

    iata_code: str
    terminal: str | None = None
    at: str = Field(description="Upstream ISO-8601 local datetime")


class Segment(BaseModel):
    """One non-stop flown leg."""

    model_config = ConfigDict(frozen=True)

    id: str = ""
    departure: SegmentEndpoint
    arrival: SegmentEndpoint
    carrier_code: str
    carrier_name: str
    carrier_logo_url: str | None = None
    operating_carrier: str
    flight_number: str
    aircraft_code: str = ""
    duration: str = ""
    # Technical stops inside the leg, not itinerary connections
    stops: int = Field(default=0, ge=0)


class Slice(BaseModel):
    """Outbound or inbound itinerary."""

    model_config = ConfigDict(frozen=True)

    duration: str = ""
    duration_min: int = Field(default=0, ge=0)
    stops: int = Field(default=0, ge=0)
    segments: list[Segment] = Field(min_length=1)

    @model_validator(mode="after")
    def _validate_stops(self) -> Slice:
        if self.stops != len(self.segments) - 1:
            msg = f"stops ({self.stops}) must equal segment count - 1"
            raise ValueError(msg)
        return self

    @property
    def origin_iata(self) -> str:
        return self.segments[0].departure.iata_code

    @property
    def destination_iata(self) -> str:
        return self.segments[-1].arrival.iata_code


class FlightOffer(BaseModel):
    """Unified flight offer consumed by result lists, maps and saved flights.

    Prices are per passenger. ``deal_score`` is only meaningful relative to
    the result set it was scored in; it is ``0`` until that pass runs.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    source: OfferSource
    origin: Airport
    destination: Airport
    price: float
    price_base: float
    currency: str = Field(min_length=3, max_length=3)
    outbound: Slice
    inbound: Slice | None = None
    total_duration_min: int = Field(ge=0)
    stops: int = Field(ge=0)
    airlines: list[str] = Field(default_factory=list)
    airline_names: list[str] = Field(default_factory=list)
    airline_logo_urls: list[str | None] = Field(default_factory=list)
    is_round_trip: bool = False
    deal_score: int = Field(default=0, ge=0, le=100)
    co2_kg: int = Field(default=0, ge=0)

    @model_validator(mode="after")
    def _validate_airlines_aligned(self) -> FlightOffer:
        if not (
            len(self.airlines) == len(self.airline_names) == len(self.airline_logo_urls)
        ):
            msg = "airlines, airline_names and airline_logo_urls must be index-aligned"
            raise ValueError(msg)
        return self

    @property
    def segments(self) -> list[Segment]:
        """All segments, outbound first."""
        inbound = self.inbound.segments if self.inbound else []
        return [*self.outbound.segments, *inbound]

    def with_deal_score(self, score: int) -> FlightOffer:
        """Return a copy carrying ``score``; the receiver is left untouched."""
        return self.model_copy(update={"deal_score": score})
