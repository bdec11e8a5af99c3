"""Messages as stored in a room's ordered collection."""

from __future__ import annotations

import json
import uuid

from pydantic import BaseModel, ConfigDict, Field


class Message(BaseModel):
    """A chat message, immutable once created.

    Serialized as a JSON object whose fields appear in declaration order:
    ``sender``, ``message``, ``timestamp``, ``id``. Equal timestamps are
    ordered by this encoding, so entries sort by sender and text before
    the random entry id.
    """

    sender: str
    text: str = Field(alias="message")
    sent_at: int = Field(alias="timestamp")
    # Keeps identical messages distinct members of the sorted collection.
    entry_id: str = Field(default_factory=lambda: uuid.uuid4().hex, alias="id")

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    def to_entry(self) -> str:
        """Return the stored representation of the message."""
        return self.model_dump_json(by_alias=True)

    @classmethod
    def from_entry(cls, raw: str | bytes) -> Message:
        """Decode a stored entry.

        Entries written before entry ids existed decode with an empty id,
        so repeated reads of the same entry compare equal.

        Raises:
            ValueError: If the entry is not valid JSON or not a message
        """
        payload = json.loads(raw)
        if not isinstance(payload, dict):
            raise ValueError("stored entry is not a JSON object")
        payload.setdefault("id", "")
        return cls.model_validate(payload)
