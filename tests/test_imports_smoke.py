# tests/test_imports_smoke.py
# -----------------------------------------------------------------------------
# Smoke tests for the public package surface.
#
# Goals:
# - Ensure applog is importable without side effects on the root logger.
# - Validate the names hosts are expected to import from the package root.
# -----------------------------------------------------------------------------

from __future__ import annotations

import logging

import applog


def test_applog_importable():
    assert applog is not None


def test_public_api_contract():
    required = [
        "LogLevel",
        "Console",
        "Directory",
        "LogTarget",
        "Logger",
        "LoggerBuilder",
        "install",
        "installed_logger",
        "get_logger",
        "rotate_if_oversized",
        "load_builder",
        "LoggerError",
        "DirectoryCreationError",
        "RotationError",
        "FileOpenError",
        "DuplicateInstallationError",
    ]
    for name in required:
        assert hasattr(applog, name), f"applog missing: {name}"


def test_import_leaves_root_logger_alone():
    assert applog.installed_logger() is None
    assert not any(
        getattr(h, "_applog_handler", False) for h in logging.getLogger().handlers
    )
