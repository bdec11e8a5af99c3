"""Business logic services for the Duet message service."""

from .errors import (
    ChatError,
    InvalidChatHandle,
    SenderNotInChat,
    SerializationFault,
    StoreUnavailable,
)
from .room_identity import RoomIdentity
from .message_store import MessageStore
from .pagination import Page, PageMessage, PaginationEngine, PullQuery
from .chat_service import ChatService

__all__ = [
    "ChatError",
    "ChatService",
    "InvalidChatHandle",
    "MessageStore",
    "Page",
    "PageMessage",
    "PaginationEngine",
    "PullQuery",
    "RoomIdentity",
    "SenderNotInChat",
    "SerializationFault",
    "StoreUnavailable",
]
