"""Logging setup shared by the generator, matcher and CLI."""

from __future__ import annotations

import logging
from typing import Optional

LOG_FORMAT = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"
DATE_FORMAT = "%H:%M:%S"
ROOT_LOGGER_NAME = "wordsearch"


def configure_logging(level: int = logging.INFO) -> None:
    """Route all records through a single stderr handler at ``level``.

    Any handlers already on the root logger are replaced, so calling this
    twice (e.g. once per CLI run) never duplicates output.
    """

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger under the package namespace, installing a handler on first use."""

    if not logging.getLogger().handlers:
        configure_logging()
    return logging.getLogger(name or ROOT_LOGGER_NAME)
