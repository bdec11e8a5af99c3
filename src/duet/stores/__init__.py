"""Backing ordered collections for room logs."""

from __future__ import annotations

from duet.core.settings import Settings
from duet.stores.base import OrderedCollection
from duet.stores.in_memory import InMemoryOrderedCollection
from duet.stores.redis_store import RedisOrderedCollection


def build_collection(config: Settings) -> OrderedCollection:
    """Create the ordered collection selected by the settings."""
    if config.store_backend == "memory":
        return InMemoryOrderedCollection()
    return RedisOrderedCollection.from_url(config.redis_url, **config.redis_options)


__all__ = [
    "InMemoryOrderedCollection",
    "OrderedCollection",
    "RedisOrderedCollection",
    "build_collection",
]
