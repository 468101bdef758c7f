"""Normalize a batch of raw offers, then score them against each other."""

from __future__ import annotations

import logging
import time
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

from skydeal_core.schemas import ResultSet
from skydeal_ml.scoring import DealScorer

if TYPE_CHECKING:
    from collections.abc import Iterable

    from skydeal_core.schemas import FlightOffer, MappingError

    from ..base import BaseOfferMapper

logger = logging.getLogger(__name__)


class ResultSetPipeline:
    """Two-phase pipeline: map every raw offer, then score the mapped set.

    Scores depend on the set's most expensive and longest offers, so they are
    computed only after the whole batch is normalized and are recomputed on
    every call.
    """

    def __init__(
        self, mapper: BaseOfferMapper, scorer: DealScorer | None = None
    ) -> None:
        self._mapper = mapper
        self._scorer = scorer or DealScorer()

    def run(
        self,
        raw_offers: Iterable[dict[str, Any]],
        auxiliary: dict[str, Any] | None = None,
    ) -> ResultSet:
        """Map and score ``raw_offers``; dropped offers land in ``failures``."""
        start = time.monotonic()
        mapped: list[FlightOffer] = []
        failures: list[MappingError] = []
        total = 0

        for raw in raw_offers:
            total += 1
            outcome = self._mapper.try_map(raw, auxiliary)
            if outcome.offer is not None:
                mapped.append(outcome.offer)
            elif outcome.error is not None:
                failures.append(outcome.error)

        offers = self._scorer.score_offers(mapped) if mapped else []

        elapsed_ms = int((time.monotonic() - start) * 1000)
        logger.info(
            "Mapped %d of %d %s offers (%d dropped) in %dms",
            len(offers),
            total,
            self._mapper.source.value,
            len(failures),
            elapsed_ms,
        )
        return ResultSet(
            offers=offers,
            failures=failures,
            source=self._mapper.source,
            processed_at=datetime.now(tz=UTC),
            duration_ms=elapsed_ms,
        )

    def process(
        self,
        raw_offers: Iterable[dict[str, Any]],
        auxiliary: dict[str, Any] | None = None,
    ) -> list[FlightOffer]:
        """Scored offers only; an empty list when nothing could be mapped."""
        return self.run(raw_offers, auxiliary).offers

    def run_response(self, payload: dict[str, Any]) -> ResultSet:
        """Run on a full upstream response body (``{"data": ...}``)."""
        raw_offers, auxiliary = self._mapper.unwrap_response(payload)
        return self.run(raw_offers, auxiliary)
