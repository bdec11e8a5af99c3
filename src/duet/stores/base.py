"""Port for the score-ordered collection that backs each room log."""

from __future__ import annotations

from abc import ABC, abstractmethod
from types import TracebackType


class OrderedCollection(ABC):
    """Abstract score-ordered collection addressed by key.

    Members of one key are ordered by score ascending, and members with
    equal scores by their string value. A key that has never been written
    behaves as an empty collection; it is created on first insert.

    Implementations raise :class:`duet.services.errors.StoreUnavailable`
    when the underlying storage cannot serve a call.
    """

    @abstractmethod
    def add(self, key: str, member: str, score: float) -> None:
        """Atomically insert a member with the given score.

        Args:
            key: Collection key (a room key)
            member: Serialized entry
            score: Ordering score
        """

    @abstractmethod
    def range_by_position(self, key: str, start: int, end: int, *, reverse: bool = False) -> list[str]:
        """Return members at positions ``start`` through ``end`` inclusive.

        Positions count from the lowest score, or from the highest when
        ``reverse`` is set. Out-of-range positions yield an empty list.
        """

    def ping(self) -> None:
        """Check that the storage is reachable."""

    def close(self) -> None:
        """Release any held connections."""

    def __enter__(self) -> OrderedCollection:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
