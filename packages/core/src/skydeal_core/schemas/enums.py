"""Enums shared across the offer pipeline."""

from enum import StrEnum


class OfferSource(StrEnum):
    """Upstream flight-offer API a search was served by."""

    AMADEUS = "AMADEUS"
    DUFFEL = "DUFFEL"


class SortKey(StrEnum):
    """Result list ordering."""

    PRICE = "PRICE"
    DURATION = "DURATION"
    DEAL_SCORE = "DEAL_SCORE"
