"""Logging setup for node entry points."""

from __future__ import annotations

import logging
import os
from typing import IO, TYPE_CHECKING, Optional

if TYPE_CHECKING:  # pragma: no cover - imported for type checking only
    from ..config.settings import Settings

__all__ = ["QUIET_LOGGERS", "configure_logging", "resolve_level"]

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

# httpx logs every request line at INFO.
QUIET_LOGGERS = ("httpx", "httpcore")


def resolve_level(value: str | int | None) -> int:
    """Map a level name or number to a ``logging`` level, defaulting to INFO."""

    if isinstance(value, int):
        return value
    text = (value or "").strip()
    if text.isdigit():
        return int(text)
    return logging.getLevelNamesMapping().get(text.upper(), logging.INFO)


def configure_logging(
    level: str | int | None = None,
    *,
    settings: Optional["Settings"] = None,
    stream: Optional[IO[str]] = None,
) -> int:
    """Configure the root logger for the node and return the level applied.

    The level comes from ``level``, then ``settings.log_level`` (which already
    folds in the ``LOG_LEVEL`` environment variable and the config file),
    then ``LOG_LEVEL`` directly. HTTP client loggers in :data:`QUIET_LOGGERS`
    never drop below WARNING so request lines stay out of command output.
    """

    if level is None:
        level = settings.log_level if settings is not None else os.environ.get("LOG_LEVEL")
    effective = resolve_level(level)
    logging.basicConfig(level=effective, format=LOG_FORMAT, stream=stream, force=True)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(effective, logging.WARNING))
    return effective
