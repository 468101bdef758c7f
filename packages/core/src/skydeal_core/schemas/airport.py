"""Static airport reference record."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Airport(BaseModel):
    """Airport reference data keyed by IATA code.

    ``lat``/``lng`` are ``None`` for records synthesized from an upstream
    payload when the code is missing from the directory.
    """

    model_config = ConfigDict(frozen=True)

    iata: str = Field(description="IATA airport code")
    name: str
    city: str
    country: str = ""
    lat: float | None = None
    lng: float | None = None

    @property
    def has_coordinates(self) -> bool:
        return self.lat is not None and self.lng is not None
