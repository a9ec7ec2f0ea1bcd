"""Index of known city and country names used to validate keywords."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Iterable

from loguru import logger

from wego.search.text import normalize_name
from wego.sources.http import load_json_asset


class LocationIndex:
    """
    Case-insensitive, exact-match set of known cities and countries.

    The index is fail-closed: until a load succeeds every name is invalid.
    `wait_ready()` resolves once the first load attempt has finished, whether
    or not it succeeded, so callers never hang on a broken asset.
    """

    def __init__(self, source: str | Path | None = None, timeout: float = 10.0):
        self.source = source
        self.timeout = timeout
        self.cities: set[str] = set()
        self.countries: set[str] = set()
        self._ready = asyncio.Event()
        self._load_task: asyncio.Task | None = None

    @classmethod
    def from_names(cls, cities: Iterable[str], countries: Iterable[str] = ()) -> "LocationIndex":
        """Build an index that is already populated and ready."""
        index = cls()
        index._populate({"cities": list(cities), "countries": list(countries)})
        index._ready.set()
        return index

    @property
    def ready(self) -> bool:
        return self._ready.is_set()

    @property
    def loaded(self) -> bool:
        return bool(self.cities or self.countries)

    def start(self) -> asyncio.Task:
        """Schedule `load()` once; repeated calls return the same task."""
        if self._load_task is None:
            self._load_task = asyncio.create_task(self.load())
        return self._load_task

    async def load(self) -> bool:
        """Load the index asset. Returns True on success; failures are logged, not raised."""
        if self.source is None:
            logger.warning("Location index has no source configured")
            self._ready.set()
            return False
        try:
            payload = await load_json_asset(self.source, timeout=self.timeout)
            self._populate(payload)
        except Exception as e:
            logger.error("Failed to load location index from {}: {}", self.source, e)
            return False
        finally:
            self._ready.set()

        logger.info(
            "Location index loaded: {} cities, {} countries",
            len(self.cities),
            len(self.countries),
        )
        return True

    async def wait_ready(self) -> None:
        await self._ready.wait()

    def is_valid(self, name: str) -> bool:
        """Check whether name is a known city or country."""
        key = normalize_name(name)
        if not key:
            return False
        return key in self.cities or key in self.countries

    def _populate(self, payload: object) -> None:
        if not isinstance(payload, dict):
            raise ValueError("location index must be an object with 'cities' and 'countries'")
        cities = payload.get("cities", [])
        countries = payload.get("countries", [])
        if not isinstance(cities, list) or not isinstance(countries, list):
            raise ValueError("'cities' and 'countries' must be arrays")
        # build fully before swapping so a bad payload leaves the previous state intact
        new_cities = {normalize_name(str(c)) for c in cities if str(c).strip()}
        new_countries = {normalize_name(str(c)) for c in countries if str(c).strip()}
        self.cities = new_cities
        self.countries = new_countries
