"""In-memory description cache with negative entries."""

from __future__ import annotations

import threading

from wego.search.text import normalize_name


class _Absent:
    """Sentinel for keys that were never queried."""

    _instance: "_Absent | None" = None

    def __new__(cls) -> "_Absent":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "ABSENT"


ABSENT = _Absent()


class DescriptionCache:
    """
    Memoizes description lookups for the life of the session.

    A value of None records a confirmed-unavailable description and is
    distinct from ABSENT, which means the key was never written.
    """

    def __init__(self) -> None:
        self._entries: dict[str, str | None] = {}
        self._lock = threading.Lock()

    def get(self, name: str) -> str | None | _Absent:
        return self._entries.get(normalize_name(name), ABSENT)

    def set(self, name: str, value: str | None) -> None:
        key = normalize_name(name)
        if not key:
            return
        with self._lock:
            self._entries[key] = value

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and normalize_name(name) in self._entries

    def __len__(self) -> int:
        return len(self._entries)
