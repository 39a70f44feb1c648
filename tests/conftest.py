"""Pytest configuration for test isolation.

``export_to_csv`` writes into ``TT_EXPORT_DIR`` (or the current working
directory when unset). To keep tests from dropping files into the working
tree, an autouse fixture points the export directory at a per-test temporary
directory.

CLI invocations install a stderr handler on the package logger that points
at the runner's captured stream; a second autouse fixture restores the
logger afterwards so later tests never write to a closed stream.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def export_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Force a per-test export directory so tests don't share on-disk state."""

    out = tmp_path / "exports"
    out.mkdir(parents=True, exist_ok=True)
    monkeypatch.setenv("TT_EXPORT_DIR", os.fspath(out))
    return out


@pytest.fixture(autouse=True)
def pkg_logger(monkeypatch: pytest.MonkeyPatch):
    """Yield the package logger and restore its handlers/level afterwards."""

    monkeypatch.delenv("TRANSACTION_TRACKER_LOG_LEVEL", raising=False)
    logger = logging.getLogger("transaction_tracker")
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate
