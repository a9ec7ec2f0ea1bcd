"""Data for the single-destination details view."""

from __future__ import annotations

import asyncio

from loguru import logger

from wego.search.models import DestinationDetails
from wego.search.text import PARAGRAPH_CHARS, split_paragraphs
from wego.sources.descriptions import DescriptionFetcher
from wego.sources.images import ImageFetcher

GALLERY_SIZE = 3
NO_DETAILS_DESCRIPTION = "No description available for this destination."
DEFAULT_GALLERY = [
    "https://images.unsplash.com/photo-1500530855697-b586d89ba3ee?auto=format&fit=crop&w=800&q=60",
    "https://images.unsplash.com/photo-1471619445258-5c9c9b13c34a?auto=format&fit=crop&w=400&q=60",
    "https://images.unsplash.com/photo-1499856871958-5b9627545d1a?auto=format&fit=crop&w=400&q=60",
]


async def load_destination_details(
    name: str,
    image_fetcher: ImageFetcher,
    description_fetcher: DescriptionFetcher,
    *,
    gallery_size: int = GALLERY_SIZE,
    paragraph_chars: int = PARAGRAPH_CHARS,
) -> DestinationDetails:
    """
    Fetch gallery images and the full summary for one destination.

    Both lookups run concurrently. A gallery with fewer than `gallery_size`
    images is replaced by the default gallery; a missing summary is replaced
    by a fixed message.
    """
    title = (name or "").strip()
    if not title:
        raise ValueError("destination name must not be empty")

    images, summary = await asyncio.gather(
        image_fetcher.fetch(title, count=gallery_size),
        description_fetcher.fetch_summary(title),
    )

    urls = [record.image_url for record in images.records if record.image_url]
    if len(urls) < gallery_size:
        if not images.ok:
            logger.info("Details gallery for '{}' uses defaults ({})", title, images.status)
        urls = DEFAULT_GALLERY[:gallery_size]

    description = summary or NO_DETAILS_DESCRIPTION
    return DestinationDetails(
        title=title,
        images=urls[:gallery_size],
        description=description,
        paragraphs=split_paragraphs(description, paragraph_chars) or [description],
    )
