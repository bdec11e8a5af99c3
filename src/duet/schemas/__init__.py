"""
Pydantic schemas for API request/response models.

These schemas define the structure of API data for serialization and validation.
"""

from .message import MessageOut, PullRequest, PullResponse, SendRequest, SendResponse

__all__ = [
    "MessageOut",
    "PullRequest", "PullResponse",
    "SendRequest", "SendResponse",
]
