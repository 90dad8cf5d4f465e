"""Process-wide logging for the personnel app.

``create_app`` calls ``setup_logging`` with the configured ``LOG_LEVEL``;
services and repositories take a module logger from ``get_logger``.
"""
from __future__ import annotations

import logging
import os

DEFAULT_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


def setup_logging(level: str = DEFAULT_LEVEL) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def get_logger(name: str) -> logging.Logger:
    if not logging.getLogger().handlers:
        setup_logging()
    return logging.getLogger(name)
