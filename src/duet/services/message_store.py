"""Append and range-read raw room logs."""

from __future__ import annotations

import logging

from pydantic import ValidationError

from duet.models.message import Message
from duet.services.errors import SerializationFault
from duet.stores.base import OrderedCollection

# Configure logger for this module
logger = logging.getLogger(__name__)


class MessageStore:
    """Room logs kept in a score-ordered collection keyed by room key.

    A message's ``sent_at`` is its score; messages sent in the same second
    are ordered by their serialized form.
    """

    def __init__(self, collection: OrderedCollection) -> None:
        self._collection = collection

    def append(self, room_key: str, message: Message) -> None:
        """Insert a message into the room log.

        There is no deduplication and no retry: identical messages become
        distinct entries, and a storage failure surfaces to the caller.

        Raises:
            StoreUnavailable: If the collection rejects the insert
            SerializationFault: If the message cannot be encoded
        """
        try:
            entry = message.to_entry()
        except (ValueError, TypeError) as exc:
            raise SerializationFault(room_key, str(exc)) from exc

        self._collection.add(room_key, entry, float(message.sent_at))
        logger.debug("Appended message from %s to room %s", message.sender, room_key)

    def range_read(self, room_key: str, start: int, end: int, reverse: bool = False) -> list[Message]:
        """Return messages at positions ``start`` through ``end`` inclusive.

        Args:
            room_key: Canonical room key
            start: First position, 0 being the oldest (or newest if reversed)
            end: Last position, not less than ``start``
            reverse: Read newest first

        Returns:
            Messages in ascending ``sent_at`` order, descending if reversed.
            Empty when the room is empty or ``start`` is past its end.

        Raises:
            StoreUnavailable: If the collection cannot be read
            SerializationFault: If a stored entry cannot be decoded
        """
        entries = self._collection.range_by_position(room_key, start, end, reverse=reverse)

        messages: list[Message] = []
        for raw in entries:
            try:
                messages.append(Message.from_entry(raw))
            except (ValidationError, ValueError) as exc:
                logger.error("Undecodable entry in room %s: %r", room_key, raw)
                raise SerializationFault(room_key, str(exc)) from exc
        return messages
