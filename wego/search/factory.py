"""Build a fully wired search coordinator from configuration."""

from __future__ import annotations

from wego.config.schema import Config
from wego.search.aggregator import ResultAggregator
from wego.search.cache import DescriptionCache
from wego.search.coordinator import Publisher, SearchCoordinator
from wego.search.dataset import CuratedDataset
from wego.search.locations import LocationIndex
from wego.sources.descriptions import DescriptionFetcher
from wego.sources.images import ImageFetcher


async def build_search_coordinator(
    config: Config | None = None,
    *,
    publish: Publisher | None = None,
    cache: DescriptionCache | None = None,
) -> SearchCoordinator:
    """
    Create one coordinator per session.

    The curated dataset is loaded before returning; the location index load
    is started in the background and awaited by the first search.
    """
    config = config or Config()

    locations = LocationIndex(config.data.locations_path)
    locations.start()
    dataset = await CuratedDataset.load(config.data.destinations_path)

    image_fetcher = ImageFetcher(
        config.sources.images,
        placeholder_image=config.search.placeholder_image,
    )
    description_fetcher = DescriptionFetcher(
        config.sources.descriptions,
        cache=cache if cache is not None else DescriptionCache(),
    )
    aggregator = ResultAggregator(
        details_url_template=config.search.details_url_template,
        placeholder_image=config.search.placeholder_image,
        max_chars=config.sources.descriptions.max_chars,
    )

    return SearchCoordinator(
        locations=locations,
        dataset=dataset,
        image_fetcher=image_fetcher,
        description_fetcher=description_fetcher,
        aggregator=aggregator,
        publish=publish,
        debounce_ms=config.search.debounce_ms,
        max_results=config.search.max_results,
    )
