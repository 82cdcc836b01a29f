"""Console logging setup for the demo."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"
DATE_FORMAT = "%H:%M:%S"


def resolve_log_level(name: str | None) -> int:
    """Map a level name such as "debug" to its logging constant."""
    if not name:
        return logging.INFO
    level = logging.getLevelName(name.strip().upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {name}")
    return level


def configure_logging(level: int | str = logging.INFO) -> None:
    """Configure root logging with a single console handler."""
    if isinstance(level, str):
        level = resolve_log_level(level)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))

    root = logging.getLogger()
    for existing in list(root.handlers):
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(level)
