"""Tests for cursor pagination over room logs."""

from unittest.mock import MagicMock

import pytest
import redis

from duet.models import Message
from duet.services import (
    InvalidChatHandle,
    MessageStore,
    Page,
    PaginationEngine,
    PullQuery,
    StoreUnavailable,
)
from duet.services.pagination import MAX_POSITION
from duet.stores import InMemoryOrderedCollection, RedisOrderedCollection

CHAT = "alice:bob"
ROOM = "alice:bob"


def _fill(store: MessageStore, count: int, start: int = 100, step: int = 100) -> None:
    for i in range(count):
        sender = "alice" if i % 2 == 0 else "bob"
        store.append(ROOM, Message(sender=sender, text=f"m{i}", sent_at=start + i * step))


def _drain(engine: PaginationEngine, limit: int, reverse: bool = False) -> list[Page]:
    pages = [engine.pull(CHAT, 0, limit, reverse)]
    while pages[-1].has_more:
        pages.append(engine.pull(CHAT, pages[-1].next_cursor, limit, reverse))
    return pages


def test_empty_room_returns_empty_page(engine: PaginationEngine) -> None:
    page = engine.pull(CHAT, 0, 10, False)
    assert page == Page(messages=(), has_more=False, next_cursor=0)


def test_two_pages_of_three_messages(engine: PaginationEngine, message_store: MessageStore) -> None:
    _fill(message_store, 3)

    first = engine.pull(CHAT, 0, 2, False)
    assert [m.sent_at for m in first.messages] == [100, 200]
    assert [m.sender for m in first.messages] == ["alice", "bob"]
    assert first.has_more is True
    assert first.next_cursor == 2

    second = engine.pull(CHAT, 2, 2, False)
    assert [m.sent_at for m in second.messages] == [300]
    assert second.has_more is False
    assert second.next_cursor == 0


def test_page_exactly_filling_the_log_has_no_more(engine: PaginationEngine, message_store: MessageStore) -> None:
    _fill(message_store, 3)

    page = engine.pull(CHAT, 0, 3, False)
    assert len(page.messages) == 3
    assert page.has_more is False
    assert page.next_cursor == 0


@pytest.mark.parametrize("limit", [1, 3, 7, 12])
@pytest.mark.parametrize("reverse", [False, True])
def test_chained_cursors_visit_every_message_once(
    engine: PaginationEngine, message_store: MessageStore, limit: int, reverse: bool
) -> None:
    count = 7
    _fill(message_store, count)

    pages = _drain(engine, limit, reverse)
    texts = [m.text for page in pages for m in page.messages]

    assert len(texts) == count
    assert set(texts) == {f"m{i}" for i in range(count)}
    assert all(len(page.messages) <= limit for page in pages)


def test_reverse_is_newest_first(engine: PaginationEngine, message_store: MessageStore) -> None:
    _fill(message_store, 5)

    reverse = engine.pull(CHAT, 0, 10, True)
    sent = [m.sent_at for m in reverse.messages]
    assert sent == sorted(sent, reverse=True)
    assert len(set(sent)) == len(sent)

    forward = engine.pull(CHAT, 0, 10, False)
    assert list(reverse.messages) == list(forward.messages)[::-1]


def test_reverse_with_equal_timestamps_is_deterministic(
    engine: PaginationEngine, message_store: MessageStore
) -> None:
    for sender in ("bob", "alice", "bob"):
        message_store.append(ROOM, Message(sender=sender, text="same", sent_at=50))
    message_store.append(ROOM, Message(sender="alice", text="later", sent_at=60))

    page = engine.pull(CHAT, 0, 10, True)
    assert page.messages[0].text == "later"
    assert [m.sender for m in page.messages[1:]] == ["bob", "bob", "alice"]
    assert engine.pull(CHAT, 0, 10, True) == page


def test_pull_is_idempotent(engine: PaginationEngine, message_store: MessageStore) -> None:
    _fill(message_store, 6)
    for _ in range(2):
        message_store.append(ROOM, Message(sender="bob", text="tie", sent_at=300))

    assert engine.pull(CHAT, 2, 3, False) == engine.pull(CHAT, 2, 3, False)
    assert engine.pull(CHAT, 1, 4, True) == engine.pull(CHAT, 1, 4, True)


def test_messages_carry_requested_handle(engine: PaginationEngine, message_store: MessageStore) -> None:
    _fill(message_store, 2)

    page = engine.pull("Bob:Alice", 0, 10, False)
    assert len(page.messages) == 2
    assert {m.chat for m in page.messages} == {"Bob:Alice"}


@pytest.mark.parametrize(("cursor", "limit"), [(0, 0), (0, -3), (-1, 5), (3, 5), (50, 1)])
def test_out_of_range_inputs_give_empty_page(
    engine: PaginationEngine, message_store: MessageStore, cursor: int, limit: int
) -> None:
    _fill(message_store, 3)

    assert engine.pull(CHAT, cursor, limit, False) == Page()


def test_invalid_handle_is_rejected_before_reading() -> None:
    store = MessageStore(InMemoryOrderedCollection())
    engine = PaginationEngine(store)

    with pytest.raises(InvalidChatHandle):
        engine.pull("alice-bob", 0, 10, False)
    with pytest.raises(InvalidChatHandle):
        engine.pull("alice-bob", 0, 0, False)


def test_store_failure_propagates() -> None:
    class DownCollection(InMemoryOrderedCollection):
        def range_by_position(self, key, start, end, *, reverse=False):
            raise StoreUnavailable(key, "range read")

    engine = PaginationEngine(MessageStore(DownCollection()))
    with pytest.raises(StoreUnavailable):
        engine.pull(CHAT, 0, 10, False)


def test_next_cursor_is_one_past_the_page(engine: PaginationEngine, message_store: MessageStore) -> None:
    _fill(message_store, 10)

    page = engine.pull(CHAT, 4, 3, False)
    assert [m.text for m in page.messages] == ["m4", "m5", "m6"]
    assert page.next_cursor == 7


def test_pull_query_uses_its_fields(engine: PaginationEngine, message_store: MessageStore) -> None:
    _fill(message_store, 4)

    page = engine.pull_query(PullQuery(chat=CHAT, cursor=1, limit=2, reverse=True))
    assert [m.text for m in page.messages] == ["m2", "m1"]
    assert page.has_more is True
    assert page.next_cursor == 3


def _range_checking_redis(entries: list[str]) -> MagicMock:
    """Redis client double that rejects positions outside signed 64-bit, as ZRANGE does."""

    def zrange(key, start, end):
        if not (-(2**63) <= start < 2**63 and -(2**63) <= end < 2**63):
            raise redis.exceptions.ResponseError("value is not an integer or out of range")
        if start >= len(entries):
            return []
        return entries[start : end + 1]

    client = MagicMock()
    client.zrange.side_effect = zrange
    client.zrevrange.side_effect = lambda key, start, end: zrange(key, start, end)[::-1]
    return client


def test_cursor_past_64_bit_range_gives_empty_page() -> None:
    entry = Message(sender="alice", text="only", sent_at=100).to_entry()
    engine = PaginationEngine(MessageStore(RedisOrderedCollection(_range_checking_redis([entry]))))

    assert engine.pull(CHAT, 2**63, 10, False) == Page()
    assert engine.pull(CHAT, 2**63 - 1, 10, True) == Page()


def test_limit_past_64_bit_range_reads_to_the_end() -> None:
    entry = Message(sender="alice", text="only", sent_at=100).to_entry()
    client = _range_checking_redis([entry])
    engine = PaginationEngine(MessageStore(RedisOrderedCollection(client)))

    page = engine.pull(CHAT, 0, 2**63, False)
    assert [m.text for m in page.messages] == ["only"]
    assert page.has_more is False
    client.zrange.assert_called_once_with(ROOM, 0, MAX_POSITION)
