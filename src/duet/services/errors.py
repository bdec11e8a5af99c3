"""Exception hierarchy for the chat message core.

Every error raised by the core is terminal for the operation that raised
it. The transport layer maps each class to its own status code.
"""

from __future__ import annotations


class ChatError(RuntimeError):
    """Base exception raised for chat message failures."""


class InvalidChatHandle(ChatError):
    """Raised when a chat handle is not of the form ``user1:user2``."""

    def __init__(self, handle: str) -> None:
        super().__init__(f"invalid chat handle '{handle}', should be in the format of user1:user2")
        self.handle = handle


class SenderNotInChat(ChatError):
    """Raised when the sender is not one of the two chat participants."""

    def __init__(self, handle: str, sender: str) -> None:
        super().__init__(f"sender '{sender}' not in chat '{handle}'")
        self.handle = handle
        self.sender = sender


class StoreUnavailable(ChatError):
    """Raised when the backing ordered collection is unreachable or fails.

    The original backend exception is chained as ``__cause__``.
    """

    def __init__(self, room_key: str | None = None, operation: str = "request") -> None:
        where = f" for room '{room_key}'" if room_key is not None else ""
        super().__init__(f"message store unavailable during {operation}{where}")
        self.room_key = room_key
        self.operation = operation


class SerializationFault(ChatError):
    """Raised when a stored message cannot be encoded or decoded.

    Treated as data corruption and never retried.
    """

    def __init__(self, room_key: str, detail: str) -> None:
        super().__init__(f"corrupt message entry in room '{room_key}': {detail}")
        self.room_key = room_key
        self.detail = detail
