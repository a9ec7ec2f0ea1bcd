"""Locally curated destination dataset."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from loguru import logger

from wego.search.models import Destination
from wego.search.text import normalize_name
from wego.sources.http import load_json_asset


class CuratedDataset:
    """Ordered list of hand-picked destinations used for enrichment and fallback."""

    def __init__(self, destinations: Iterable[Destination] = ()):
        self.destinations: list[Destination] = list(destinations)

    def __len__(self) -> int:
        return len(self.destinations)

    @classmethod
    async def load(cls, source: str | Path, timeout: float = 10.0) -> "CuratedDataset":
        """Load the dataset asset; a missing or broken asset yields an empty dataset."""
        try:
            payload = await load_json_asset(source, timeout=timeout)
            if not isinstance(payload, list):
                raise ValueError("dataset must be an array of destinations")
            dataset = cls(Destination.from_dict(item) for item in payload)
        except Exception as e:
            logger.error("Failed to load curated dataset from {}: {}", source, e)
            return cls()

        logger.info("Curated dataset loaded: {} destinations", len(dataset))
        return dataset

    def matches(self, keyword: str) -> list[Destination]:
        """Destinations whose name or country equals keyword, in dataset order."""
        key = normalize_name(keyword)
        if not key:
            return []
        return [
            dest
            for dest in self.destinations
            if normalize_name(dest.name) == key or normalize_name(dest.country) == key
        ]
