"""Console logging setup for the Duet service."""

from __future__ import annotations

import logging

_NOISY_LOGGERS = ("httpx", "urllib3", "redis")


def configure_logging(level_name: str = "INFO") -> None:
    """Configure a single low-noise console handler.

    uvicorn installs its own handlers for access logs; this only sets up
    the root logger used by the ``duet`` modules.

    Args:
        level_name: Name of the log level, e.g. ``DEBUG`` or ``WARNING``
    """
    level = getattr(logging, level_name.strip().upper() or "INFO", logging.INFO)

    # Avoid double-config when the app is created more than once.
    root = logging.getLogger()
    if root.handlers:
        root.setLevel(level)
        return

    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )

    if level >= logging.INFO:
        for noisy in _NOISY_LOGGERS:
            logging.getLogger(noisy).setLevel(logging.WARNING)
