"""Generation-counter cancellation tokens."""

from __future__ import annotations

import itertools
import threading


class TokenSource:
    """Issues search tokens; only the most recently issued one is live."""

    def __init__(self) -> None:
        self._counter = itertools.count(1)
        self._lock = threading.Lock()
        self._current = 0

    @property
    def current(self) -> int:
        return self._current

    def issue(self) -> "SearchToken":
        """Issue a new live token, invalidating every earlier one."""
        with self._lock:
            self._current = next(self._counter)
            return SearchToken(self._current, self)

    def invalidate(self) -> None:
        """Invalidate the live token without issuing a replacement."""
        with self._lock:
            self._current = next(self._counter)


class SearchToken:
    """Opaque handle identifying one search attempt."""

    __slots__ = ("generation", "_source")

    def __init__(self, generation: int, source: TokenSource):
        self.generation = generation
        self._source = source

    @property
    def cancelled(self) -> bool:
        return self._source.current != self.generation

    def __repr__(self) -> str:
        state = "cancelled" if self.cancelled else "live"
        return f"SearchToken({self.generation}, {state})"
