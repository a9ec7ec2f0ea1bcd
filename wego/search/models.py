"""Data models shared by the search pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal

FetchStatus = Literal[
    "ok",
    "empty",
    "unavailable",
    "rate_limited",
    "server_error",
    "transport_error",
    "auth_error",
    "cancelled",
]
StatusLevel = Literal["info", "warning", "error"]
SearchState = Literal["idle", "validating", "awaiting_sources", "aggregating"]

FAILED_STATUSES: set[FetchStatus] = {"rate_limited", "server_error", "transport_error", "auth_error"}


@dataclass(slots=True)
class SourceRecord:
    """Normalized item produced by any source fetcher."""

    title: str
    image_url: str | None = None
    description: str | None = None


@dataclass(slots=True)
class FetchResult:
    """Tagged outcome of a single source fetch."""

    source: str
    status: FetchStatus
    records: list[SourceRecord] = field(default_factory=list)
    retry_hint: str | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.status == "ok"

    @property
    def failed(self) -> bool:
        return self.status in FAILED_STATUSES

    @property
    def cancelled(self) -> bool:
        return self.status == "cancelled"


@dataclass(slots=True)
class DisplayRecord:
    """Render-ready result card."""

    image_url: str
    title: str
    description: str
    detail_link: str


@dataclass(slots=True)
class Destination:
    """Row of the locally curated dataset."""

    name: str
    country: str
    img: str
    desc: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Destination":
        if not isinstance(data, dict):
            raise ValueError("destination must be an object")
        name = str(data.get("name", "")).strip()
        if not name:
            raise ValueError("destination name is required")
        return cls(
            name=name,
            country=str(data.get("country", "")).strip(),
            img=str(data.get("img", "")).strip(),
            desc=str(data.get("desc", "")),
        )


@dataclass(slots=True)
class Status:
    """User-facing status message."""

    level: StatusLevel
    message: str
    clear_input: bool = False


@dataclass(slots=True)
class SearchOutcome:
    """Result of one search call, as delivered to the rendering layer."""

    keyword: str
    records: list[DisplayRecord] = field(default_factory=list)
    status: Status | None = None
    cancelled: bool = False

    @classmethod
    def superseded(cls, keyword: str) -> "SearchOutcome":
        return cls(keyword=keyword, cancelled=True)


@dataclass(slots=True)
class DestinationDetails:
    """Images and text for a single destination."""

    title: str
    images: list[str] = field(default_factory=list)
    description: str = ""
    paragraphs: list[str] = field(default_factory=list)
