"""Batch mapping outcome schemas."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field, model_validator

from .enums import OfferSource
from .flight import FlightOffer


class MappingError(BaseModel):
    """Why a single raw offer could not be normalized."""

    offer_id: str | None = None
    source: OfferSource
    reason: str


class MappingOutcome(BaseModel):
    """Either a mapped offer or the error that prevented it."""

    offer: FlightOffer | None = None
    error: MappingError | None = None

    @model_validator(mode="after")
    def _validate_exclusive(self) -> MappingOutcome:
        if (self.offer is None) == (self.error is None):
            msg = "exactly one of offer or error must be set"
            raise ValueError(msg)
        return self

    @property
    def ok(self) -> bool:
        return self.offer is not None


class PriceStats(BaseModel):
    """Price distribution of a result set, in the offers' currency."""

    min: float = 0
    median: float = 0
    max: float = 0
    mean: int = 0


class ResultSet(BaseModel):
    """Scored offers of one search plus the offers that were dropped."""

    offers: list[FlightOffer] = Field(default_factory=list)
    failures: list[MappingError] = Field(default_factory=list)
    source: OfferSource
    processed_at: datetime
    duration_ms: int = 0

    @property
    def success(self) -> bool:
        return not self.failures

    @property
    def is_empty(self) -> bool:
        return not self.offers
