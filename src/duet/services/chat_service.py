"""Send and pull operations for two-party chats."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable

from duet.models.message import Message
from duet.services.message_store import MessageStore
from duet.services.pagination import Page, PaginationEngine, PullQuery
from duet.services.room_identity import RoomIdentity
from duet.stores.base import OrderedCollection

# Configure logger for this module
logger = logging.getLogger(__name__)


def _epoch_seconds() -> int:
    return int(time.time())


class ChatService:
    """Entry point used by the transport layer.

    The backing collection is injected; the service never opens or closes
    connections itself.
    """

    def __init__(
        self,
        collection: OrderedCollection,
        clock: Callable[[], int] = _epoch_seconds,
    ) -> None:
        """Initialize the service.

        Args:
            collection: Ordered collection holding the room logs
            clock: Returns the current time in whole seconds since the epoch
        """
        self.identity = RoomIdentity()
        self.store = MessageStore(collection)
        self.pagination = PaginationEngine(self.store, self.identity)
        self._clock = clock

    def send(self, chat: str, sender: str, text: str) -> Message:
        """Append a message sent now by one of the chat's participants.

        Raises:
            InvalidChatHandle: If the chat handle is malformed
            SenderNotInChat: If the sender is not a participant
            StoreUnavailable: If the message cannot be stored
        """
        self.identity.validate_membership(chat, sender)
        room_key = self.identity.resolve(chat)

        message = Message(sender=sender, text=text, sent_at=self._clock())
        self.store.append(room_key, message)
        logger.debug("Stored message from %s in room %s", sender, room_key)
        return message

    def pull(self, query: PullQuery) -> Page:
        """Return one page of the chat named in the query."""
        return self.pagination.pull_query(query)
