"""Pure text helpers: keyword validation, normalization and truncation."""

from __future__ import annotations

import re

from wego.search.errors import ValidationError

DEFAULT_MAX_CHARS = 150
ELLIPSIS = "..."
PARAGRAPH_CHARS = 300

_KEYWORD_RE = re.compile(r"[A-Za-z\s-]+")
_WHITESPACE_RE = re.compile(r"\s+")


def normalize_name(name: str) -> str:
    """Lower-case and trim a destination name; inner whitespace is collapsed."""
    return _WHITESPACE_RE.sub(" ", (name or "").strip()).lower()


def validate_keyword(raw: str | None) -> str:
    """Return the trimmed keyword or raise ValidationError."""
    keyword = (raw or "").strip()
    if not keyword:
        raise ValidationError("Please enter a destination to search for.")
    if not _KEYWORD_RE.fullmatch(keyword):
        raise ValidationError("Destination names may only contain letters, spaces and hyphens.")
    return keyword


def truncate_description(
    text: str | None,
    max_chars: int = DEFAULT_MAX_CHARS,
    ellipsis: str = ELLIPSIS,
) -> str | None:
    """Collapse whitespace and cut text to max_chars, appending an ellipsis when cut."""
    if text is None:
        return None
    cleaned = _WHITESPACE_RE.sub(" ", text).strip()
    if len(cleaned) <= max_chars:
        return cleaned
    return cleaned[:max_chars].rstrip() + ellipsis


def split_paragraphs(text: str, width: int = PARAGRAPH_CHARS) -> list[str]:
    """Split text into chunks of at most `width` chars, breaking on whitespace."""
    words = text.split()
    paragraphs: list[str] = []
    current = ""
    for word in words:
        candidate = f"{current} {word}" if current else word
        if len(candidate) <= width:
            current = candidate
            continue
        if current:
            paragraphs.append(current)
        # a single word longer than width is hard-wrapped
        while len(word) > width:
            paragraphs.append(word[:width])
            word = word[width:]
        current = word
    if current:
        paragraphs.append(current)
    return paragraphs
