# src/duet/main.py
"""Main entry point for the Duet application."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import PlainTextResponse

from duet.api import messages_router
from duet.core.settings import settings
from duet.logging_config import configure_logging
from duet.services.chat_service import ChatService
from duet.stores import build_collection

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    configure_logging(settings.log_level)

    collection = build_collection(settings)
    with collection:
        if settings.store_backend == "redis" and settings.redis_ping_on_startup:
            # Refuse to start without a reachable store.
            collection.ping()
        app.state.chat_service = ChatService(collection)
        logger.info("%s started with %s message store", settings.app_name, settings.store_backend)
        yield
    logger.info("%s stopped", settings.app_name)


# Initialize FastAPI app
app = FastAPI(
    title="Duet API",
    description="Two-party chat message store",
    version=settings.app_version,
    lifespan=lifespan,
)

app.include_router(messages_router, prefix="/api")


@app.get("/ping", response_class=PlainTextResponse)
async def ping() -> str:
    """Liveness probe kept for existing clients."""
    return "pong"


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint to verify the service is running."""
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("duet.main:app", host="0.0.0.0", port=8080, reload=settings.debug)
