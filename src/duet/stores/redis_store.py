"""Redis sorted-set backend for room logs."""

from __future__ import annotations

import logging
from typing import Any

import redis

from duet.services.errors import StoreUnavailable
from duet.stores.base import OrderedCollection

# Configure logger for this module
logger = logging.getLogger(__name__)


class RedisOrderedCollection(OrderedCollection):
    """Room logs kept as Redis sorted sets, one key per room.

    ``ZADD`` is atomic, so concurrent appends to one room never lose
    writes. Redis orders members with equal scores by their bytes.
    Every call is bounded by the socket timeouts of the client's pool.
    """

    def __init__(self, client: redis.Redis) -> None:
        """Initialize the backend.

        Args:
            client: Redis client; closed by :meth:`close`
        """
        self._client = client

    @classmethod
    def from_url(cls, url: str, **options: Any) -> RedisOrderedCollection:
        """Create a backend with its own connection pool.

        Args:
            url: Redis connection URL
            **options: Extra connection options such as ``socket_timeout``
        """
        return cls(redis.from_url(url, decode_responses=True, **options))

    def add(self, key: str, member: str, score: float) -> None:
        try:
            self._client.zadd(key, {member: score})
        except redis.exceptions.RedisError as exc:
            logger.warning("ZADD failed for room %s: %s", key, exc)
            raise StoreUnavailable(key, "append") from exc

    def range_by_position(self, key: str, start: int, end: int, *, reverse: bool = False) -> list[str]:
        try:
            if reverse:
                # Desc order: first member is the latest message
                members = self._client.zrevrange(key, start, end)
            else:
                members = self._client.zrange(key, start, end)
        except redis.exceptions.RedisError as exc:
            logger.warning("Range read failed for room %s: %s", key, exc)
            raise StoreUnavailable(key, "range read") from exc
        return list(members)

    def ping(self) -> None:
        try:
            self._client.ping()
        except redis.exceptions.RedisError as exc:
            raise StoreUnavailable(operation="ping") from exc

    def close(self) -> None:
        self._client.close()
