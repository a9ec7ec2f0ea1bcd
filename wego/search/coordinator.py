"""Search coordinator: validation, debounce, cancellation and result routing."""

from __future__ import annotations

import asyncio
from typing import Awaitable, Callable

from loguru import logger

from wego.search.aggregator import DEFAULT_MAX_RESULTS, ResultAggregator, build_remote_records
from wego.search.dataset import CuratedDataset
from wego.search.errors import ValidationError
from wego.search.locations import LocationIndex
from wego.search.models import (
    DisplayRecord,
    FetchResult,
    SearchOutcome,
    SearchState,
    Status,
)
from wego.search.text import validate_keyword
from wego.search.tokens import SearchToken, TokenSource
from wego.sources.descriptions import DescriptionFetcher
from wego.sources.http import DEFAULT_RETRY_HINT
from wego.sources.images import ImageFetcher

Publisher = Callable[[SearchOutcome], Awaitable[None]]

UNRECOGNIZED_MESSAGE = '"{keyword}" is not a recognized city or country.'
RATE_LIMITED_MESSAGE = "Image search rate limit reached. {hint}"
SERVER_ERROR_MESSAGE = "Image service is temporarily unavailable."
TRANSPORT_ERROR_MESSAGE = "Could not reach the image service. Check your connection."
AUTH_ERROR_MESSAGE = "Image search is not configured correctly."
SEARCH_FAILED_MESSAGE = "Search failed. Please try again later."
NO_RESULTS_MESSAGE = 'No results found for "{keyword}".'


class SearchCoordinator:
    """
    Single entry point for destination searches.

    Every call to `search()` issues a fresh token and thereby supersedes all
    earlier calls: a superseded call returns a cancelled outcome and never
    publishes, no matter when its network responses arrive.

    States: idle -> validating -> awaiting_sources -> aggregating -> idle.
    """

    def __init__(
        self,
        *,
        locations: LocationIndex,
        dataset: CuratedDataset,
        image_fetcher: ImageFetcher,
        description_fetcher: DescriptionFetcher,
        aggregator: ResultAggregator | None = None,
        publish: Publisher | None = None,
        debounce_ms: int = 300,
        max_results: int = DEFAULT_MAX_RESULTS,
    ):
        self.locations = locations
        self.dataset = dataset
        self.image_fetcher = image_fetcher
        self.description_fetcher = description_fetcher
        self.aggregator = aggregator or ResultAggregator(
            placeholder_image=image_fetcher.placeholder_image
        )
        self.publish = publish
        self.debounce_ms = debounce_ms
        self.max_results = max_results
        self.state: SearchState = "idle"
        self._tokens = TokenSource()
        self._inflight: asyncio.Task | None = None

    async def submit(self, raw_keyword: str) -> None:
        """UI entry point for discrete events (submit button, Enter key)."""
        await self.search(raw_keyword, debounce=False)

    async def search(self, raw_keyword: str, *, debounce: bool = True) -> SearchOutcome:
        """Run one search and publish its outcome unless superseded."""
        token = self._tokens.issue()
        keyword = (raw_keyword or "").strip()
        self.state = "validating"

        if debounce and self.debounce_ms > 0:
            await asyncio.sleep(self.debounce_ms / 1000)
            if token.cancelled:
                return self._superseded(keyword, token)

        try:
            keyword = validate_keyword(raw_keyword)
            if not self.locations.ready:
                self.locations.start()
            await self.locations.wait_ready()
            if token.cancelled:
                return self._superseded(keyword, token)
            if not self.locations.is_valid(keyword):
                raise ValidationError(
                    UNRECOGNIZED_MESSAGE.format(keyword=keyword),
                    clear_input=True,
                )
        except ValidationError as e:
            logger.info("Rejected search keyword '{}': {}", keyword, e)
            status = Status("warning", str(e), clear_input=e.clear_input)
            return await self._finish(token, SearchOutcome(keyword=keyword, status=status))

        self.state = "awaiting_sources"
        if self._inflight is not None and not self._inflight.done():
            self._inflight.cancel()
        task = asyncio.create_task(self._fetch_sources(keyword, token))
        self._inflight = task
        logger.info("Searching for '{}'", keyword)

        try:
            await asyncio.wait({task})
        except asyncio.CancelledError:
            task.cancel()
            raise

        if token.cancelled or task.cancelled():
            return self._superseded(keyword, token)
        try:
            images, description = task.result()
        except Exception:
            if not token.cancelled:
                self.state = "idle"
            raise
        if images.cancelled or description.cancelled:
            return self._superseded(keyword, token)

        self.state = "aggregating"
        outcome = self._aggregate(keyword, images, description)
        return await self._finish(token, outcome)

    def cancel(self) -> None:
        """Invalidate the live search, if any, without starting a new one."""
        self._tokens.invalidate()
        if self._inflight is not None and not self._inflight.done():
            self._inflight.cancel()
        self.state = "idle"

    def featured(self) -> list[DisplayRecord]:
        """Display records for the curated dataset, shown before any search."""
        return [
            self.aggregator.from_destination(dest)
            for dest in self.dataset.destinations[: self.max_results]
        ]

    async def _fetch_sources(
        self, keyword: str, token: SearchToken
    ) -> tuple[FetchResult, FetchResult]:
        results = await asyncio.gather(
            self.image_fetcher.fetch(keyword, token),
            self.description_fetcher.fetch(keyword, token),
            return_exceptions=True,
        )
        for result in results:
            if isinstance(result, BaseException):
                raise result
        images, description = results
        return images, description

    def _aggregate(
        self, keyword: str, images: FetchResult, description: FetchResult
    ) -> SearchOutcome:
        if images.status == "auth_error":
            logger.error("Image search rejected credentials: {}", images.error)
            return SearchOutcome(keyword=keyword, status=Status("error", AUTH_ERROR_MESSAGE))

        local = self.dataset.matches(keyword)
        remote = build_remote_records(
            images,
            description,
            keyword,
            self.aggregator.placeholder_image,
            self.aggregator.max_chars,
        )
        records = self.aggregator.merge(local, remote, keyword, self.max_results)
        status = self._status_for(keyword, images, description, records)
        return SearchOutcome(keyword=keyword, records=records, status=status)

    @staticmethod
    def _status_for(
        keyword: str,
        images: FetchResult,
        description: FetchResult,
        records: list[DisplayRecord],
    ) -> Status | None:
        if images.status == "rate_limited":
            hint = images.retry_hint or DEFAULT_RETRY_HINT
            return Status("warning", RATE_LIMITED_MESSAGE.format(hint=hint))
        if not records and images.failed and description.failed:
            return Status("error", SEARCH_FAILED_MESSAGE)
        if images.status == "server_error":
            return Status("warning", SERVER_ERROR_MESSAGE)
        if images.status == "transport_error":
            return Status("error", TRANSPORT_ERROR_MESSAGE)
        if not records:
            return Status("info", NO_RESULTS_MESSAGE.format(keyword=keyword))
        return None

    def _superseded(self, keyword: str, token: SearchToken) -> SearchOutcome:
        logger.debug("Search for '{}' superseded ({})", keyword, token)
        return SearchOutcome.superseded(keyword)

    async def _finish(self, token: SearchToken, outcome: SearchOutcome) -> SearchOutcome:
        if token.cancelled:
            return self._superseded(outcome.keyword, token)
        self.state = "idle"
        if outcome.status is not None:
            logger.info(
                "Search '{}' finished with {} records [{}] {}",
                outcome.keyword,
                len(outcome.records),
                outcome.status.level,
                outcome.status.message,
            )
        else:
            logger.info("Search '{}' finished with {} records", outcome.keyword, len(outcome.records))
        if self.publish is not None:
            await self.publish(outcome)
        return outcome
