"""Domain models for the Duet message service."""

from .message import Message

__all__ = ["Message"]
