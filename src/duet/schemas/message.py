"""Message-related Pydantic schemas."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from duet.services.pagination import Page, PullQuery

INT32_MIN, INT32_MAX = -(2**31), 2**31 - 1
INT64_MIN, INT64_MAX = -(2**63), 2**63 - 1


class SendRequest(BaseModel):
    """Schema for sending a message to a two-party chat."""

    chat: str = Field(..., description="Chat handle of the form user1:user2")
    sender: str = Field(..., description="Sender, one of the two chat participants")
    text: str = Field(..., description="Message text")


class SendResponse(BaseModel):
    """Acknowledgement of a stored message."""

    status: str = "message_sent"


class PullRequest(BaseModel):
    """Schema for pulling a page of a chat's messages.

    ``cursor`` and ``limit`` are optional; :meth:`to_query` applies the
    defaults once.
    """

    chat: str = Field(..., description="Chat handle of the form user1:user2")
    cursor: int | None = Field(
        None, ge=INT64_MIN, le=INT64_MAX, description="Position to resume from (default 0)"
    )
    limit: int | None = Field(
        None, ge=INT32_MIN, le=INT32_MAX, description="Maximum messages per page"
    )
    reverse: bool = Field(False, description="Return newest messages first")

    def to_query(self, default_limit: int) -> PullQuery:
        """Return the pull arguments with absent fields defaulted."""
        return PullQuery(
            chat=self.chat,
            cursor=0 if self.cursor is None else self.cursor,
            limit=default_limit if self.limit is None else self.limit,
            reverse=self.reverse,
        )


class MessageOut(BaseModel):
    """A message as returned by the pull endpoint."""

    chat: str
    sender: str
    text: str
    sent_at: int = Field(..., alias="sentAt")

    model_config = ConfigDict(populate_by_name=True)


class PullResponse(BaseModel):
    """Schema for one page of messages."""

    messages: list[MessageOut]
    has_more: bool = Field(..., alias="hasMore")
    next_cursor: int = Field(..., alias="nextCursor")

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_page(cls, page: Page) -> PullResponse:
        """Build the response payload for a page."""
        return cls(
            messages=[
                MessageOut(chat=m.chat, sender=m.sender, text=m.text, sent_at=m.sent_at)
                for m in page.messages
            ],
            has_more=page.has_more,
            next_cursor=page.next_cursor,
        )
