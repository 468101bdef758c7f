"""Core schemas for SkyDeal."""

from .airport import Airport
from .enums import OfferSource, SortKey
from .flight import FlightOffer, Segment, SegmentEndpoint, Slice
from .result import MappingError, MappingOutcome, PriceStats, ResultSet

__all__ = [
    "Airport",
    "FlightOffer",
    "MappingError",
    "MappingOutcome",
    "OfferSource",
    "PriceStats",
    "ResultSet",
    "Segment",
    "SegmentEndpoint",
    "Slice",
    "SortKey",
]
