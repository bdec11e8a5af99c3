"""In-process ordered collection for development and tests."""

from __future__ import annotations

import bisect
from collections import defaultdict
from threading import Lock

from duet.stores.base import OrderedCollection


class InMemoryOrderedCollection(OrderedCollection):
    """In-process score-ordered collection.

    Mirrors Redis sorted-set semantics: re-adding an existing member only
    updates its score, and equal scores order by member value. Useful for
    testing and development. Data is lost when the process exits.
    """

    def __init__(self) -> None:
        """Initialize an empty collection."""
        self._entries: dict[str, list[tuple[float, str]]] = defaultdict(list)
        self._scores: dict[str, dict[str, float]] = defaultdict(dict)
        self._lock = Lock()

    def add(self, key: str, member: str, score: float) -> None:
        with self._lock:
            entries = self._entries[key]
            scores = self._scores[key]
            previous = scores.get(member)
            if previous is not None:
                entries.pop(bisect.bisect_left(entries, (previous, member)))
            bisect.insort(entries, (score, member))
            scores[member] = score

    def range_by_position(self, key: str, start: int, end: int, *, reverse: bool = False) -> list[str]:
        with self._lock:
            entries = list(self._entries.get(key, ()))

        size = len(entries)
        if start < 0:
            start = max(start + size, 0)
        if end < 0:
            end += size
        end = min(end, size - 1)
        if start > end:
            return []

        if reverse:
            entries.reverse()
        return [member for _, member in entries[start : end + 1]]

