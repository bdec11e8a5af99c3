"""Cursor pagination over room logs.

A pull reads ``limit + 1`` positions starting at the cursor. The extra
entry is never returned; its presence is what sets ``has_more``. When it
is present the next cursor is ``cursor + limit``, the position of that
extra entry, so chaining cursors visits every position exactly once
while the log is unchanged.

Cursors are positions, not message ids. An append that lands before the
cursor's position between two pulls shifts the window by one, which can
repeat an entry at the page boundary. Pages are not snapshots.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Final

from duet.services.message_store import MessageStore
from duet.services.room_identity import RoomIdentity

# Largest position a backing collection accepts (signed 64-bit).
MAX_POSITION: Final[int] = 2**63 - 1

# Configure logger for this module
logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PageMessage:
    """A message as returned to the client, labelled with the requested chat."""

    chat: str
    sender: str
    text: str
    sent_at: int


@dataclass(frozen=True)
class Page:
    """One bounded pull result.

    ``next_cursor`` is only meaningful when ``has_more`` is set and is 0
    otherwise.
    """

    messages: tuple[PageMessage, ...] = field(default_factory=tuple)
    has_more: bool = False
    next_cursor: int = 0


@dataclass(frozen=True)
class PullQuery:
    """Fully defaulted arguments of a pull."""

    chat: str
    cursor: int = 0
    limit: int = 10
    reverse: bool = False


class PaginationEngine:
    """Turn position range reads into pages with a "more data" signal."""

    def __init__(self, store: MessageStore, identity: RoomIdentity | None = None) -> None:
        self._store = store
        self._identity = identity or RoomIdentity()

    def pull(self, handle: str, cursor: int, limit: int, reverse: bool) -> Page:
        """Read one page of a chat's log.

        Args:
            handle: Chat handle as supplied by the client
            cursor: Position to start from
            limit: Maximum number of messages in the page
            reverse: Walk newest first

        Returns:
            The page. A non-positive limit, a negative cursor, or a cursor
            past the end of the log yields an empty page.

        Raises:
            InvalidChatHandle: If the handle is malformed
            StoreUnavailable: If the log cannot be read
            SerializationFault: If a stored entry cannot be decoded
        """
        room_key = self._identity.resolve(handle)
        if limit <= 0 or cursor < 0 or cursor > MAX_POSITION:
            return Page()

        start = cursor
        end = min(start + limit, MAX_POSITION)  # one past the page, for the has_more check
        entries = self._store.range_read(room_key, start, end, reverse)

        messages: list[PageMessage] = []
        has_more = False
        next_cursor = 0
        for message in entries:
            if len(messages) == limit:
                has_more = True
                next_cursor = end
                break
            messages.append(
                PageMessage(
                    chat=handle,
                    sender=message.sender,
                    text=message.text,
                    sent_at=message.sent_at,
                )
            )

        logger.debug(
            "Pulled %d messages from room %s at cursor %d (has_more=%s)",
            len(messages),
            room_key,
            cursor,
            has_more,
        )
        return Page(messages=tuple(messages), has_more=has_more, next_cursor=next_cursor)

    def pull_query(self, query: PullQuery) -> Page:
        """Read one page described by a defaulted query."""
        return self.pull(query.chat, query.cursor, query.limit, query.reverse)
