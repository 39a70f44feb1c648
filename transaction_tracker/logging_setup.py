"""Logging for ``transaction_tracker``.

Modules log through ``get_logger(__name__)`` and stay silent until
``configure_logging`` installs the stderr handler. The CLI calls it on every
invocation (``--verbose`` selects DEBUG); the handler is replaced, never
stacked, so repeated runs in one process log once per record.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import IO

PACKAGE_LOGGER = "transaction_tracker"
LOG_LEVEL_ENV = "TRANSACTION_TRACKER_LOG_LEVEL"
_HANDLER_NAME = "transaction_tracker.stderr"

# stdout carries command output (JSON lines, tables); keep logs quiet by default.
_DEFAULT_LEVEL = logging.WARNING

logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())


def resolve_level(level: int | str | None = None) -> int:
    """Map ``level`` (or ``TRANSACTION_TRACKER_LOG_LEVEL``) to a numeric level."""

    raw = os.getenv(LOG_LEVEL_ENV, "") if level is None else level
    if isinstance(raw, int):
        return raw
    name = raw.strip().upper()
    if name.isdigit():
        return int(name)
    return logging.getLevelNamesMapping().get(name, _DEFAULT_LEVEL)


def configure_logging(
    level: int | str | None = None, *, stream: IO[str] | None = None
) -> logging.Handler:
    logger = logging.getLogger(PACKAGE_LOGGER)
    for h in list(logger.handlers):
        if h.get_name() == _HANDLER_NAME:
            logger.removeHandler(h)

    # Resolve sys.stderr now rather than at import; test runners swap it.
    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))

    logger.addHandler(handler)
    logger.setLevel(resolve_level(level))
    logger.propagate = False
    return handler


def get_logger(name: str) -> logging.Logger:
    """Return the package logger for ``name``; short names are prefixed."""

    if name != PACKAGE_LOGGER and not name.startswith(f"{PACKAGE_LOGGER}."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)


__all__ = ["LOG_LEVEL_ENV", "configure_logging", "get_logger", "resolve_level"]
