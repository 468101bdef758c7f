"""Per-passenger CO2 estimate for an itinerary.

Simplified ICAO-style method, meant for comparing offers against each other
rather than for reporting:

1. Great-circle distance, summed leg by leg for connecting itineraries.
2. Economy emission factor by haul length: 0.255 kg/km below 1500 km,
   0.195 kg/km from 1500 km.
3. Radiative Forcing Index of 1.9 for high-altitude non-CO2 effects.
4. 11% airport/infrastructure overhead.

When no leg can be placed on the map the distance is derived from the flight
time at an 800 km/h average cruise speed.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from skydeal_core.airports import AirportDirectory, get_airport_directory
from skydeal_core.geo import haversine_distance_km
from skydeal_core.numbers import round_half_up

if TYPE_CHECKING:
    from collections.abc import Sequence

    from skydeal_core.schemas import Segment

logger = logging.getLogger(__name__)

SHORT_HAUL_FACTOR = 0.255  # kg CO2/km per passenger, economy, < 1500 km
LONG_HAUL_FACTOR = 0.195  # kg CO2/km per passenger, economy, >= 1500 km
LONG_HAUL_THRESHOLD_KM = 1500.0
RFI = 1.9
OVERHEAD = 1.11
FALLBACK_CRUISE_KMH = 800.0


class EmissionEstimator:
    """Estimates kg CO2 per passenger from airport coordinates."""

    def __init__(self, directory: AirportDirectory | None = None) -> None:
        self._directory = directory or get_airport_directory()

    def _leg_km(self, from_iata: str, to_iata: str) -> float:
        """Distance of one leg, ``0.0`` unless both ends have coordinates."""
        src = self._directory.lookup(from_iata)
        dst = self._directory.lookup(to_iata)
        if src is None or dst is None:
            return 0.0
        if not (src.has_coordinates and dst.has_coordinates):
            return 0.0
        return haversine_distance_km(src.lat, src.lng, dst.lat, dst.lng)

    def distance_km(
        self,
        origin_iata: str,
        dest_iata: str,
        segments: Sequence[Segment] = (),
    ) -> float:
        """Flown distance: per-leg sum when connecting, else straight line."""
        if len(segments) > 1:
            return sum(
                self._leg_km(s.departure.iata_code, s.arrival.iata_code)
                for s in segments
            )
        return self._leg_km(origin_iata, dest_iata)

    def estimate(
        self,
        origin_iata: str,
        dest_iata: str,
        segments: Sequence[Segment] = (),
        fallback_duration_min: int = 0,
    ) -> int:
        """Return rounded kg CO2 per passenger; ``0`` if nothing is known."""
        try:
            total_km = self.distance_km(origin_iata, dest_iata, segments)
            if total_km == 0:
                total_km = (fallback_duration_min / 60) * FALLBACK_CRUISE_KMH
                logger.debug(
                    "No coordinates for %s-%s, using %d min flight time",
                    origin_iata,
                    dest_iata,
                    fallback_duration_min,
                )

            factor = (
                SHORT_HAUL_FACTOR
                if total_km < LONG_HAUL_THRESHOLD_KM
                else LONG_HAUL_FACTOR
            )
            return max(0, round_half_up(total_km * factor * RFI * OVERHEAD))
        except Exception:
            logger.warning(
                "CO2 estimate failed for %s-%s", origin_iata, dest_iata, exc_info=True
            )
            return 0


def estimate_co2(
    origin_iata: str,
    dest_iata: str,
    segments: Sequence[Segment] = (),
    fallback_duration_min: int = 0,
) -> int:
    """:meth:`EmissionEstimator.estimate` against the shared airport directory."""
    return EmissionEstimator().estimate(
        origin_iata, dest_iata, segments, fallback_duration_min
    )
