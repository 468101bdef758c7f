"""Great-circle distance, ISO-8601 durations and map geometry."""

from __future__ import annotations

import math
import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

EARTH_RADIUS_KM = 6371.0

# "PT2H35M", "PT8H", "PT45M", and day-prefixed "P1DT2H" for long slices
_DURATION_RE = re.compile(
    r"P(?:(\d+)D)?(?:T(?:(\d+)H)?(?:(\d+)M)?(?:\d+(?:\.\d+)?S)?)?"
)

LngLat = tuple[float, float]


def haversine_distance_km(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """Great-circle distance in km on a spherical earth."""
    d_lat = math.radians(lat2 - lat1)
    d_lng = math.radians(lng2 - lng1)
    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1))
        * math.cos(math.radians(lat2))
        * math.sin(d_lng / 2) ** 2
    )
    return EARTH_RADIUS_KM * 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def parse_iso_duration_minutes(iso: str | None) -> int:
    """Convert an ISO-8601 duration string to minutes; ``0`` if unparseable."""
    if not iso or not isinstance(iso, str):
        return 0
    m = _DURATION_RE.fullmatch(iso.strip().upper())
    if not m:
        return 0
    days = int(m.group(1) or 0)
    hours = int(m.group(2) or 0)
    minutes = int(m.group(3) or 0)
    return days * 24 * 60 + hours * 60 + minutes


def arc_coordinates(start: LngLat, end: LngLat, steps: int = 80) -> list[LngLat]:
    """Points of a curved route line between two ``(lng, lat)`` points.

    Quadratic Bezier whose control point sits above the midpoint, lifted by a
    quarter of the planar distance and capped at 20 degrees of latitude.
    """
    x0, y0 = start
    x1, y1 = end
    mx = (x0 + x1) / 2
    my = (y0 + y1) / 2
    dist = math.hypot(x1 - x0, y1 - y0)
    cx = mx
    cy = my + min(dist * 0.25, 20.0)

    points: list[LngLat] = []
    for i in range(steps + 1):
        t = i / steps
        lng = (1 - t) ** 2 * x0 + 2 * (1 - t) * t * cx + t**2 * x1
        lat = (1 - t) ** 2 * y0 + 2 * (1 - t) * t * cy + t**2 * y1
        points.append((lng, lat))
    return points


def get_bounds(points: Iterable[LngLat]) -> tuple[LngLat, LngLat]:
    """Bounding box ``((min_lng, min_lat), (max_lng, max_lat))`` of points."""
    pts = list(points)
    if not pts:
        msg = "get_bounds() requires at least one point"
        raise ValueError(msg)
    lngs = [p[0] for p in pts]
    lats = [p[1] for p in pts]
    return (min(lngs), min(lats)), (max(lngs), max(lats))
