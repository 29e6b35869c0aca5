"""Logging helpers shared by the engine and its collaborators."""

from __future__ import annotations

import logging
from typing import Optional


def configure_logging(level: int | str = logging.INFO) -> None:
    """Configure root logging with a compact formatter.

    Accepts either a numeric level or a level name such as ``"DEBUG"``.
    """

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    handler = logging.StreamHandler()
    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-7s | %(name)s | %(message)s",
        datefmt="%H:%M:%S",
    )
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a namespaced logger."""

    return logging.getLogger(name or "wordscramble")
