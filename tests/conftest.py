from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. An autouse fixture that restores the root logger after every test, since
   installation deliberately cannot be undone through the public API.
"""

import logging
import os
import sys
from pathlib import Path
from typing import Generator

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from applog.core.registry import _INSTALLED_LOGGER_ATTR  # noqa: E402
from applog.infra.handlers import _is_our_handler  # noqa: E402


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def reset_root_logging() -> Generator[None, None, None]:
    """Detach our handlers and clear the installation slot around each test."""
    root = logging.getLogger()
    original_level = root.level

    yield

    installed = getattr(root, _INSTALLED_LOGGER_ATTR, None)
    if installed is not None:
        installed.close()
    for h in list(root.handlers):
        if _is_our_handler(h):
            root.removeHandler(h)
            h.close()
    if hasattr(root, _INSTALLED_LOGGER_ATTR):
        delattr(root, _INSTALLED_LOGGER_ATTR)
    root.setLevel(original_level)


@pytest.fixture
def log_dir(tmp_path: Path) -> Path:
    """Return a not-yet-existing directory for a directory target."""
    return tmp_path / "logs" / "session"
