"""Topic summary API adapter (Wikipedia REST-shaped) with caching."""

from __future__ import annotations

from urllib.parse import quote

import httpx
from loguru import logger

from wego.config.schema import DescriptionSourceConfig
from wego.search.cache import ABSENT, DescriptionCache
from wego.search.models import FetchResult, SourceRecord
from wego.search.text import normalize_name, truncate_description
from wego.search.tokens import SearchToken
from wego.sources.http import classify_status, retry_hint

USER_AGENT = "wego/0.1 (destination search)"


class DescriptionFetcher:
    """Look up short destination descriptions, memoized per normalized name."""

    source = "descriptions"

    def __init__(
        self,
        config: DescriptionSourceConfig | None = None,
        cache: DescriptionCache | None = None,
    ):
        self.config = config or DescriptionSourceConfig()
        self.cache = cache if cache is not None else DescriptionCache()

    async def fetch(self, query: str, token: SearchToken | None = None) -> FetchResult:
        """
        Fetch the display-ready description for query.

        Every settled lookup is cached, so a name is requested at most once
        per session. Failures are cached as None but still returned with their
        own status; cancelled lookups never write.
        """
        key = normalize_name(query)
        title = query.strip()
        cached = self.cache.get(key)
        if cached is not ABSENT:
            logger.debug("Description cache hit for '{}'", key)
            if cached is None:
                return FetchResult(self.source, "unavailable")
            return FetchResult(
                self.source,
                "ok",
                records=[SourceRecord(title=title, description=cached)],
            )

        try:
            response = await self._request(title)
        except httpx.TransportError as e:
            if token is not None and token.cancelled:
                return FetchResult(self.source, "cancelled")
            logger.warning("Description lookup transport failure for '{}': {}", title, e)
            self.cache.set(key, None)
            return FetchResult(self.source, "transport_error", error=str(e) or type(e).__name__)

        if token is not None and token.cancelled:
            logger.debug("Description lookup for '{}' superseded, dropping response", title)
            return FetchResult(self.source, "cancelled")

        status = classify_status(response.status_code)
        if status != "ok":
            self.cache.set(key, None)
        if status == "rate_limited":
            logger.warning("Description lookup for '{}' rate limited", title)
            return FetchResult(
                self.source,
                status,
                retry_hint=retry_hint(response.headers),
                error="HTTP 429",
            )
        if status == "server_error":
            logger.warning("Description lookup for '{}' failed: HTTP {}", title, response.status_code)
            return FetchResult(self.source, status, error=f"HTTP {response.status_code}")
        if status != "ok":
            logger.info("No description for '{}': HTTP {}", title, response.status_code)
            return FetchResult(self.source, "unavailable", error=f"HTTP {response.status_code}")

        data = response.json()
        extract = data.get("extract") or ""
        description = truncate_description(extract, self.config.max_chars) if extract.strip() else None
        self.cache.set(key, description)
        if description is None:
            return FetchResult(self.source, "empty")

        return FetchResult(
            self.source,
            "ok",
            records=[SourceRecord(title=data.get("title") or title, description=description)],
        )

    async def fetch_summary(self, name: str) -> str | None:
        """Fetch the full, untruncated extract for name. Not cached."""
        try:
            response = await self._request(name.strip())
        except httpx.TransportError as e:
            logger.warning("Summary lookup transport failure for '{}': {}", name, e)
            return None
        if response.status_code != 200:
            logger.info("Summary lookup for '{}' returned HTTP {}", name, response.status_code)
            return None
        extract = response.json().get("extract") or ""
        return extract.strip() or None

    async def _request(self, title: str) -> httpx.Response:
        url = f"{self.config.base_url.rstrip('/')}/{quote(title, safe='')}"
        async with httpx.AsyncClient() as client:
            return await client.get(
                url,
                headers={"Accept": "application/json", "User-Agent": USER_AGENT},
                timeout=self.config.timeout,
                follow_redirects=True,
            )
