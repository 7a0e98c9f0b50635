"""Logging utilities tailored for crossword filling."""

from __future__ import annotations

import logging
from typing import Optional, TextIO, Union

ROOT_LOGGER_NAME = "crossfill"
LOG_FORMAT = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"


def resolve_level(level: Union[int, str]) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level '{level}'")
    return resolved


def configure_logging(level: Union[int, str] = logging.INFO, stream: Optional[TextIO] = None) -> None:
    """Configure root logging with a sensible formatter.

    The backtracking search can try a very large number of placements, so
    per-step detail is only emitted at DEBUG. Callers may configure logging
    themselves before invoking :class:`CrosswordSolver`.
    """

    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt="%H:%M:%S"))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(resolve_level(level))


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger under the ``crossfill`` namespace, configuring defaults if needed."""

    if not logging.getLogger().handlers:
        configure_logging()
    if name and name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name or ROOT_LOGGER_NAME)
