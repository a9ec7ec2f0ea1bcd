"""Merge curated matches and remote source records into display records."""

from __future__ import annotations

from urllib.parse import quote

from wego.config.schema import DEFAULT_PLACEHOLDER_IMAGE
from wego.search.models import Destination, DisplayRecord, FetchResult, SourceRecord
from wego.search.text import DEFAULT_MAX_CHARS, truncate_description

DEFAULT_MAX_RESULTS = 6
NO_DESCRIPTION = "No description available."


def build_remote_records(
    images: FetchResult,
    description: FetchResult,
    keyword: str,
    placeholder_image: str = DEFAULT_PLACEHOLDER_IMAGE,
    max_chars: int = DEFAULT_MAX_CHARS,
) -> list[SourceRecord]:
    """
    Pair every photo with the shared destination description.

    The description arrives display-ready from its fetcher; photo alt text is
    raw and gets truncated here. When no photos came back but a description
    did, a single record with the placeholder image is produced so the
    description is still shown.
    """
    summary = description.records[0] if description.ok and description.records else None
    title = summary.title if summary else keyword

    if images.ok and images.records:
        return [
            SourceRecord(
                title=title,
                image_url=photo.image_url or placeholder_image,
                description=(
                    summary.description if summary else truncate_description(photo.description, max_chars)
                ),
            )
            for photo in images.records
        ]

    if summary:
        return [SourceRecord(title=title, image_url=placeholder_image, description=summary.description)]
    return []


class ResultAggregator:
    """Builds the ordered, capped list of display records for one search."""

    def __init__(
        self,
        details_url_template: str = "details.html?destination={name}",
        placeholder_image: str = DEFAULT_PLACEHOLDER_IMAGE,
        max_chars: int = DEFAULT_MAX_CHARS,
    ):
        self.details_url_template = details_url_template
        self.placeholder_image = placeholder_image
        self.max_chars = max_chars

    def merge(
        self,
        local_matches: list[Destination],
        remote_records: list[SourceRecord],
        keyword: str,
        max_results: int = DEFAULT_MAX_RESULTS,
    ) -> list[DisplayRecord]:
        """Local matches first in dataset order, then remote records in source order."""
        if max_results <= 0:
            return []

        merged = [self.from_destination(dest) for dest in local_matches[:max_results]]
        for record in remote_records:
            if len(merged) >= max_results:
                break
            merged.append(self.from_source(record, keyword))
        return merged

    def from_destination(self, dest: Destination) -> DisplayRecord:
        return DisplayRecord(
            image_url=dest.img or self.placeholder_image,
            title=dest.name,
            description=truncate_description(dest.desc, self.max_chars) or NO_DESCRIPTION,
            detail_link=self.detail_link(dest.name),
        )

    def from_source(self, record: SourceRecord, keyword: str) -> DisplayRecord:
        title = record.title or keyword
        return DisplayRecord(
            image_url=record.image_url or self.placeholder_image,
            title=title,
            description=record.description or NO_DESCRIPTION,
            detail_link=self.detail_link(title),
        )

    def detail_link(self, name: str) -> str:
        return self.details_url_template.format(name=quote(name.strip()))
