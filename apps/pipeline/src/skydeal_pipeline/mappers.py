"""Mapper selection by upstream."""

from __future__ import annotations

from typing import TYPE_CHECKING

from skydeal_core.schemas import OfferSource

from .amadeus.response_parser import AmadeusOfferMapper
from .duffel.response_parser import DuffelOfferMapper

if TYPE_CHECKING:
    from skydeal_core.airports import AirportDirectory
    from skydeal_ml.emissions import EmissionEstimator

    from .base import BaseOfferMapper


def get_mapper(
    source: OfferSource | str,
    *,
    passengers: int | None = None,
    directory: AirportDirectory | None = None,
    estimator: EmissionEstimator | None = None,
) -> BaseOfferMapper:
    """Return the mapper for the upstream a search was sent to.

    ``passengers`` only applies to Amadeus; Duffel offers list their own.
    """
    source = OfferSource(str(source).upper())
    if source == OfferSource.AMADEUS:
        return AmadeusOfferMapper(
            passengers=passengers, directory=directory, estimator=estimator
        )
    return DuffelOfferMapper(directory=directory, estimator=estimator)
