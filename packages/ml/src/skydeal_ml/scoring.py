"""Relative deal scoring and price statistics for a result set."""

from __future__ import annotations

import statistics
from typing import TYPE_CHECKING

from pydantic import BaseModel

from skydeal_core.numbers import round_half_up
from skydeal_core.schemas import PriceStats

if TYPE_CHECKING:
    from collections.abc import Sequence

    from skydeal_core.schemas import FlightOffer

PRICE_WEIGHT = 60
DURATION_WEIGHT = 30
STOPS_WEIGHT = 10
NEUTRAL_SCORE = 50

# Directness component by outbound stop count; 2+ stops score 0
_STOPS_SCORES: dict[int, float] = {0: 1.0, 1: 0.5}


class ScoringContext(BaseModel):
    """Set-wide maxima every offer of one search is scored against."""

    max_price: float
    max_duration: int

    @classmethod
    def from_offers(cls, offers: Sequence[FlightOffer]) -> ScoringContext:
        if not offers:
            return cls(max_price=0, max_duration=0)
        return cls(
            max_price=max(o.price for o in offers),
            max_duration=max(o.total_duration_min for o in offers),
        )


class DealScorer:
    """Scores offers 0-100: 60% price, 30% duration, 10% directness.

    Each component is normalized against the most expensive / longest offer of
    the same result set, so a score must never be reused across searches.
    """

    def score(self, offer: FlightOffer, context: ScoringContext) -> int:
        if not context.max_price:
            return NEUTRAL_SCORE

        price_score = 1 - offer.price / context.max_price
        duration_score = (
            1 - offer.total_duration_min / context.max_duration
            if context.max_duration > 0
            else 0.0
        )
        stops_score = _STOPS_SCORES.get(offer.stops, 0.0)

        raw = (
            PRICE_WEIGHT * price_score
            + DURATION_WEIGHT * duration_score
            + STOPS_WEIGHT * stops_score
        )
        return round_half_up(min(100.0, max(0.0, raw)))

    def score_offers(self, offers: Sequence[FlightOffer]) -> list[FlightOffer]:
        """Return new offers with ``deal_score`` set relative to ``offers``."""
        if not offers:
            return []
        context = ScoringContext.from_offers(offers)
        return [o.with_deal_score(self.score(o, context)) for o in offers]


def compute_price_stats(offers: Sequence[FlightOffer]) -> PriceStats:
    """Min / median / max / mean of per-passenger prices.

    Only the mean is rounded; the others keep currency precision.
    """
    if not offers:
        return PriceStats()
    prices = sorted(o.price for o in offers)
    return PriceStats(
        min=prices[0],
        median=statistics.median(prices),
        max=prices[-1],
        mean=round_half_up(statistics.fmean(prices)),
    )


def deal_score_label(score: int) -> str:
    if score >= 70:
        return "Great deal"
    if score >= 40:
        return "Good deal"
    return "Fair price"
