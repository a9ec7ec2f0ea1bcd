"""Photo search API adapter (Unsplash-shaped)."""

from __future__ import annotations

from typing import Any

import httpx
from loguru import logger

from wego.config.loader import IMAGE_API_KEY_ENV
from wego.config.schema import DEFAULT_PLACEHOLDER_IMAGE, ImageSourceConfig
from wego.search.models import FetchResult, SourceRecord
from wego.search.tokens import SearchToken
from wego.sources.http import classify_status, retry_hint


class ImageFetcher:
    """Search photos by keyword and normalize them into source records."""

    source = "images"

    def __init__(
        self,
        config: ImageSourceConfig | None = None,
        placeholder_image: str = DEFAULT_PLACEHOLDER_IMAGE,
    ):
        self.config = config or ImageSourceConfig()
        self.placeholder_image = placeholder_image

    async def fetch(
        self,
        query: str,
        token: SearchToken | None = None,
        *,
        count: int | None = None,
    ) -> FetchResult:
        """Fetch photos for query. HTTP and transport failures are returned, not raised."""
        api_key = self.config.api_key
        if not api_key:
            return FetchResult(
                self.source,
                "auth_error",
                error=(
                    "image api key not configured "
                    f"(set sources.images.apiKey or {IMAGE_API_KEY_ENV})"
                ),
            )

        per_page = max(1, count or self.config.per_page)
        params: dict[str, Any] = {"query": query, "per_page": per_page}
        if self.config.orientation:
            params["orientation"] = self.config.orientation

        try:
            async with httpx.AsyncClient() as client:
                response = await client.get(
                    self.config.base_url,
                    params=params,
                    headers={
                        "Accept-Version": "v1",
                        "Authorization": f"Client-ID {api_key}",
                    },
                    timeout=self.config.timeout,
                )
        except httpx.TransportError as e:
            if token is not None and token.cancelled:
                return FetchResult(self.source, "cancelled")
            logger.warning("Image search transport failure for '{}': {}", query, e)
            return FetchResult(self.source, "transport_error", error=str(e) or type(e).__name__)

        if token is not None and token.cancelled:
            logger.debug("Image search for '{}' superseded, dropping response", query)
            return FetchResult(self.source, "cancelled")

        status = classify_status(response.status_code)
        if status == "rate_limited":
            hint = retry_hint(response.headers)
            logger.warning("Image search rate limit reached: {}", hint)
            return FetchResult(self.source, status, retry_hint=hint, error="HTTP 429")
        if status != "ok":
            logger.warning("Image search for '{}' failed: HTTP {}", query, response.status_code)
            return FetchResult(self.source, status, error=f"HTTP {response.status_code}")

        results = response.json().get("results") or []
        records = [self._to_record(item, query) for item in results[:per_page]]
        if not records:
            return FetchResult(self.source, "empty")
        return FetchResult(self.source, "ok", records=records)

    def _to_record(self, item: dict[str, Any], query: str) -> SourceRecord:
        urls = item.get("urls") or {}
        image_url = urls.get("regular") or urls.get("small") or self.placeholder_image
        alt = item.get("alt_description") or item.get("description")
        return SourceRecord(
            title=query,
            image_url=image_url,
            description=alt or None,
        )
