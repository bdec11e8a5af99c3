# tests/conftest.py
from __future__ import annotations

import os
from collections.abc import Iterator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

os.environ.setdefault("DUET_STORE_BACKEND", "memory")

from duet.api.endpoints import messages as messages_endpoints
from duet.main import app as fastapi_app
from duet.services import ChatService, MessageStore, PaginationEngine
from duet.stores import InMemoryOrderedCollection


class StepClock:
    """Clock returning a fixed time that tests can move forward."""

    def __init__(self, start: int = 100) -> None:
        self.now = start

    def __call__(self) -> int:
        return self.now

    def advance(self, seconds: int = 100) -> None:
        self.now += seconds


@pytest.fixture()
def collection() -> InMemoryOrderedCollection:
    """Return an empty in-process ordered collection."""
    return InMemoryOrderedCollection()


@pytest.fixture()
def message_store(collection: InMemoryOrderedCollection) -> MessageStore:
    return MessageStore(collection)


@pytest.fixture()
def engine(message_store: MessageStore) -> PaginationEngine:
    return PaginationEngine(message_store)


@pytest.fixture()
def clock() -> StepClock:
    return StepClock()


@pytest.fixture()
def chat_service(collection: InMemoryOrderedCollection, clock: StepClock) -> ChatService:
    """Return a chat service over the test collection with a controllable clock."""
    return ChatService(collection, clock=clock)


@pytest.fixture(scope="session")
def app() -> FastAPI:
    return fastapi_app


@pytest.fixture()
def client(app: FastAPI, chat_service: ChatService) -> Iterator[TestClient]:
    """Return an HTTP client whose chat service is the test service."""
    app.dependency_overrides[messages_endpoints.get_chat_service] = lambda: chat_service
    try:
        with TestClient(app, base_url="http://test") as test_client:
            yield test_client
    finally:
        app.dependency_overrides.pop(messages_endpoints.get_chat_service, None)
