"""HTTP helpers shared by the source fetchers and asset loaders."""

from __future__ import annotations

import asyncio
import json
from email.utils import parsedate_to_datetime
from pathlib import Path
from typing import Any, Mapping

import httpx

from wego.search.models import FetchStatus

DEFAULT_RETRY_HINT = "Please try again in a few minutes."


def classify_status(status_code: int) -> FetchStatus:
    """Map an HTTP status code to a fetch status. 2xx maps to "ok"."""
    if 200 <= status_code < 300:
        return "ok"
    if status_code == 429:
        return "rate_limited"
    if status_code in (401, 403):
        return "auth_error"
    if status_code >= 500:
        return "server_error"
    return "unavailable"


def retry_hint(headers: Mapping[str, str] | None) -> str:
    """Build a human-readable retry hint from a Retry-After header."""
    value = (headers or {}).get("Retry-After") or (headers or {}).get("retry-after")
    if not value:
        return DEFAULT_RETRY_HINT
    value = value.strip()
    if value.isdigit():
        seconds = int(value)
        if seconds < 60:
            return f"Please try again in {seconds} seconds."
        minutes = (seconds + 59) // 60
        return f"Please try again in {minutes} minutes."
    try:
        when = parsedate_to_datetime(value)
    except (TypeError, ValueError):
        return DEFAULT_RETRY_HINT
    return f"Please try again after {when.strftime('%H:%M')} UTC."


def is_remote(source: str | Path) -> bool:
    return isinstance(source, str) and source.startswith(("http://", "https://"))


async def load_json_asset(source: str | Path, timeout: float = 10.0) -> Any:
    """Load a static JSON document from a local path or an http(s) URL."""
    if is_remote(source):
        async with httpx.AsyncClient() as client:
            response = await client.get(str(source), timeout=timeout)
            response.raise_for_status()
        return response.json()

    text = await asyncio.to_thread(Path(source).read_text, encoding="utf-8")
    return json.loads(text)
