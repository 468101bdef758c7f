"""Abstract base class for upstream offer mappers."""

from __future__ import annotations

import abc
import logging
import math
from typing import TYPE_CHECKING, Any, ClassVar

from skydeal_core.airports import AirportDirectory, get_airport_directory
from skydeal_core.config import settings as core_settings
from skydeal_core.geo import parse_iso_duration_minutes
from skydeal_core.numbers import round_half_up
from skydeal_core.schemas import (
    Airport,
    FlightOffer,
    MappingError,
    MappingOutcome,
    Slice,
)
from skydeal_ml.emissions import EmissionEstimator

if TYPE_CHECKING:
    from collections.abc import Sequence

    from skydeal_core.schemas import OfferSource, Segment

logger = logging.getLogger(__name__)

# Errors a malformed payload can surface while being walked
_MAPPING_ERRORS = (KeyError, IndexError, TypeError, ValueError, AttributeError)


class OfferMappingError(ValueError):
    """A raw offer lacks the structure required to normalize it."""


def require_list(obj: dict[str, Any], key: str, what: str) -> list[Any]:
    """Return the non-empty list at ``obj[key]`` or raise OfferMappingError."""
    value = obj.get(key)
    if not isinstance(value, list) or not value:
        msg = f"missing {what} ({key!r})"
        raise OfferMappingError(msg)
    return value


def _upstream_co2(emissions_kg: str | float | None, pax: int) -> int | None:
    """Per-passenger upstream CO2, or None when absent or unusable."""
    if emissions_kg in (None, ""):
        return None
    try:
        total = float(emissions_kg)
    except (TypeError, ValueError):
        logger.debug("Ignoring unparseable upstream emissions %r", emissions_kg)
        return None
    if not math.isfinite(total) or total < 0:
        logger.debug("Ignoring out-of-range upstream emissions %r", emissions_kg)
        return None
    return round_half_up(total / pax)


def collect_airlines(
    segments: Sequence[Segment],
) -> tuple[list[str], list[str], list[str | None]]:
    """Distinct marketing carriers across ``segments`` in first-seen order."""
    seen: set[str] = set()
    codes: list[str] = []
    names: list[str] = []
    logos: list[str | None] = []
    for seg in segments:
        if seg.carrier_code in seen:
            continue
        seen.add(seg.carrier_code)
        codes.append(seg.carrier_code)
        names.append(seg.carrier_name)
        logos.append(seg.carrier_logo_url)
    return codes, names, logos


class BaseOfferMapper(abc.ABC):
    """Maps one upstream's raw offers into :class:`FlightOffer` records.

    Subclasses only extract fields from their payload shape; slice assembly,
    airline collection, per-passenger pricing, emissions and airport
    resolution are shared here. The caller picks the subclass matching the
    upstream it queried.
    """

    source: ClassVar[OfferSource]

    def __init__(
        self,
        directory: AirportDirectory | None = None,
        estimator: EmissionEstimator | None = None,
    ) -> None:
        self._directory = directory or get_airport_directory()
        self._estimator = estimator or EmissionEstimator(self._directory)

    @abc.abstractmethod
    def map_offer(
        self, raw: dict[str, Any], auxiliary: dict[str, Any] | None = None
    ) -> FlightOffer:
        """Normalize one raw offer; raises on malformed input."""

    @abc.abstractmethod
    def unwrap_response(
        self, payload: dict[str, Any]
    ) -> tuple[list[dict[str, Any]], dict[str, Any] | None]:
        """Split an upstream response body into raw offers and auxiliary data."""

    def try_map(
        self, raw: dict[str, Any], auxiliary: dict[str, Any] | None = None
    ) -> MappingOutcome:
        """Like :meth:`map_offer` but returns the failure instead of raising."""
        try:
            return MappingOutcome(offer=self.map_offer(raw, auxiliary))
        except _MAPPING_ERRORS as exc:
            offer_id = raw.get("id") if isinstance(raw, dict) else None
            logger.warning(
                "Dropping %s offer %s: %s", self.source.value, offer_id, exc
            )
            return MappingOutcome(
                error=MappingError(
                    offer_id=str(offer_id) if offer_id is not None else None,
                    source=self.source,
                    reason=f"{type(exc).__name__}: {exc}",
                ),
            )

    # -- shared downstream steps ---------------------------------------------

    @staticmethod
    def build_slice(duration: str | None, segments: list[Segment]) -> Slice:
        return Slice(
            duration=duration or "",
            duration_min=parse_iso_duration_minutes(duration),
            stops=len(segments) - 1,
            segments=segments,
        )

    def resolve_airport(
        self,
        iata: str,
        *,
        name: str | None = None,
        city: str | None = None,
        country: str | None = None,
    ) -> Airport:
        """Directory airport, or a coordinate-less one built from the payload."""
        airport = self._directory.lookup(iata)
        if airport is not None:
            return airport
        logger.debug("Airport %s not in directory, using upstream fields", iata)
        return Airport(
            iata=iata,
            name=name or iata,
            city=city or iata,
            country=country or "",
        )

    def build_offer(
        self,
        *,
        offer_id: str,
        outbound: Slice,
        inbound: Slice | None,
        total_amount: str | float,
        base_amount: str | float | None,
        currency: str | None,
        passengers: int,
        emissions_kg: str | float | None = None,
        origin: Airport,
        destination: Airport,
    ) -> FlightOffer:
        pax = max(1, passengers)
        total = float(total_amount)
        base = float(base_amount) if base_amount not in (None, "") else total

        co2_kg = _upstream_co2(emissions_kg, pax)
        if co2_kg is None:
            co2_kg = self._estimator.estimate(
                outbound.origin_iata,
                outbound.destination_iata,
                outbound.segments,
                outbound.duration_min,
            )

        all_segments = [*outbound.segments, *(inbound.segments if inbound else [])]
        airlines, airline_names, airline_logo_urls = collect_airlines(all_segments)

        return FlightOffer(
            id=offer_id,
            source=self.source,
            origin=origin,
            destination=destination,
            price=total / pax,
            price_base=base / pax,
            currency=currency or core_settings.default_currency,
            outbound=outbound,
            inbound=inbound,
            total_duration_min=outbound.duration_min
            + (inbound.duration_min if inbound else 0),
            stops=outbound.stops,
            airlines=airlines,
            airline_names=airline_names,
            airline_logo_urls=airline_logo_urls,
            is_round_trip=inbound is not None,
            deal_score=0,
            co2_kg=co2_kg,
        )
