"""SkyDeal ML - emission estimates, deal scoring and result post-processing."""

from skydeal_ml.emissions import EmissionEstimator, estimate_co2
from skydeal_ml.result_filter import (
    ANY_STOPS,
    AirlineOption,
    ResultFilter,
    available_airlines,
    filter_and_sort,
    sort_offers,
)
from skydeal_ml.scoring import (
    DealScorer,
    ScoringContext,
    compute_price_stats,
    deal_score_label,
)

__all__ = [
    "ANY_STOPS",
    "AirlineOption",
    "DealScorer",
    "EmissionEstimator",
    "ResultFilter",
    "ScoringContext",
    "available_airlines",
    "compute_price_stats",
    "deal_score_label",
    "estimate_co2",
    "filter_and_sort",
    "sort_offers",
]
