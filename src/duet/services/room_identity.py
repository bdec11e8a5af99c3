"""Canonical room identity for two-party chats."""

from __future__ import annotations

from typing import Final

from duet.services.errors import InvalidChatHandle, SenderNotInChat

HANDLE_SEPARATOR: Final[str] = ":"


def _split_participants(handle: str) -> tuple[str, str]:
    tokens = handle.split(HANDLE_SEPARATOR)
    if len(tokens) != 2 or not all(tokens):
        raise InvalidChatHandle(handle)
    return tokens[0], tokens[1]


class RoomIdentity:
    """Resolve chat handles into room keys and check chat membership."""

    @staticmethod
    def resolve(handle: str) -> str:
        """Return the order-independent room key for a chat handle.

        Both participants are lower-cased and the smaller one is placed
        first, so ``Bob:alice`` and ``alice:bob`` share the key ``alice:bob``.

        Args:
            handle: Client-supplied chat handle of the form ``user1:user2``

        Returns:
            The canonical room key

        Raises:
            InvalidChatHandle: If the handle does not name exactly two participants
        """
        first, second = _split_participants(handle.lower())
        if first > second:
            first, second = second, first
        return f"{first}{HANDLE_SEPARATOR}{second}"

    @staticmethod
    def validate_membership(handle: str, sender: str) -> None:
        """Ensure the sender is one of the chat's two participants.

        The comparison uses the handle as supplied, so it is case-sensitive
        even though :meth:`resolve` is not.

        Raises:
            InvalidChatHandle: If the handle does not name exactly two participants
            SenderNotInChat: If the sender matches neither participant
        """
        first, second = _split_participants(handle)
        if sender not in (first, second):
            raise SenderNotInChat(handle, sender)
