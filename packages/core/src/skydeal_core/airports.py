"""Static IATA airport directory."""

from __future__ import annotations

import functools
import json
import logging
from importlib import resources
from typing import TYPE_CHECKING

from .config import settings
from .schemas import Airport

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

logger = logging.getLogger(__name__)


class AirportDirectory:
    """Read-only IATA code -> :class:`Airport` lookup.

    Unknown codes are a normal outcome: :meth:`lookup` returns ``None`` and the
    caller decides how to degrade.
    """

    def __init__(self, airports: Iterable[Airport]) -> None:
        self._by_code: dict[str, Airport] = {}
        for airport in airports:
            self._by_code[airport.iata.upper()] = airport

    @classmethod
    def from_records(cls, records: Iterable[dict]) -> AirportDirectory:
        return cls(Airport.model_validate(r) for r in records)

    @classmethod
    def from_json(cls, path: Path) -> AirportDirectory:
        """Load a JSON array of ``{iata, name, city, country, lat, lng}``."""
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        directory = cls.from_records(data)
        logger.info("Loaded %d airports from %s", len(directory), path)
        return directory

    def lookup(self, iata_code: str | None) -> Airport | None:
        if not iata_code:
            return None
        return self._by_code.get(iata_code.strip().upper())

    def search(self, query: str, limit: int = 10) -> list[Airport]:
        """Airports whose code, name or city contains ``query``.

        An exact code match always comes first; the rest are ordered by name.
        """
        q = query.strip().lower()
        if not q:
            return []
        exact = self.lookup(q)
        matches = sorted(
            (
                a
                for a in self._by_code.values()
                if a is not exact
                and (q in a.iata.lower() or q in a.name.lower() or q in a.city.lower())
            ),
            key=lambda a: a.name,
        )
        if exact is not None:
            matches.insert(0, exact)
        return matches[:limit]

    def __contains__(self, iata_code: object) -> bool:
        return isinstance(iata_code, str) and self.lookup(iata_code) is not None

    def __len__(self) -> int:
        return len(self._by_code)


@functools.cache
def get_airport_directory() -> AirportDirectory:
    """Process-wide directory, built once from settings or the bundled table."""
    if settings.airports_file is not None:
        return AirportDirectory.from_json(settings.airports_file)
    bundled = resources.files("skydeal_core") / "data" / "airports.json"
    with resources.as_file(bundled) as path:
        return AirportDirectory.from_json(path)
