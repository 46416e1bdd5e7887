from __future__ import annotations

"""
Configuration Loading.

Builds a LoggerBuilder from a plain mapping or a JSON file, so that hosts
can keep their logging setup next to the rest of their settings. Levels are
written either as names or as the 1..5 ordinal (TRACE=1 ... ERROR=5).

Example file:

    {
        "level": 3,
        "max_file_size": 1048576,
        "targets": ["console", {"dir": "/var/log/myapp"}]
    }
"""

import json
import logging
import os
from typing import Any, Mapping

from applog.core.builder import LoggerBuilder
from applog.core.targets import Console, Directory, LogTarget
from applog.domain.errors import ConfigurationError, PathLike

logger = logging.getLogger(__name__)

_KNOWN_KEYS = ("level", "max_file_size", "targets")


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def builder_from_mapping(data: Mapping[str, Any]) -> LoggerBuilder:
    """
    Create a LoggerBuilder from a configuration mapping.

    Missing keys keep the builder defaults. Unknown keys are ignored with a
    warning.

    Args:
        data: Mapping with optional 'level', 'max_file_size' and 'targets'.

    Returns:
        LoggerBuilder: Builder staged with the given settings.

    Raises:
        ConfigurationError: If any value is malformed.
    """
    if not isinstance(data, Mapping):
        raise ConfigurationError(f"Logger configuration must be an object, got {type(data).__name__}")

    for key in data:
        if key not in _KNOWN_KEYS:
            logger.warning(f"Ignoring unknown logger configuration key: '{key}'")

    builder = LoggerBuilder()
    if "level" in data:
        builder.level(data["level"])
    if "max_file_size" in data:
        builder.max_file_size(data["max_file_size"])
    if "targets" in data:
        raw_targets = data["targets"]
        if not isinstance(raw_targets, list):
            raise ConfigurationError("'targets' must be a list")
        builder.targets(_parse_target(item) for item in raw_targets)
    return builder


def load_builder(path: PathLike) -> LoggerBuilder:
    """
    Read a JSON configuration file into a LoggerBuilder.

    Args:
        path: Location of the JSON document.

    Returns:
        LoggerBuilder: Builder staged with the file's settings.

    Raises:
        ConfigurationError: If the file is unreadable, is not valid JSON,
            or holds malformed values.
    """
    file_path = os.fspath(path)
    try:
        with open(file_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise ConfigurationError(f"Cannot read logger configuration: {e}", path=file_path) from e
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Invalid JSON in logger configuration: {e}", path=file_path) from e

    logger.debug(f"Loaded logger configuration from {file_path}")
    return builder_from_mapping(data)


def save_builder(builder: LoggerBuilder, path: PathLike) -> None:
    """Write the staged configuration of 'builder' as a JSON document."""
    file_path = os.fspath(path)
    try:
        with open(file_path, "w", encoding="utf-8") as f:
            json.dump(builder.to_mapping(), f, indent=4)
    except OSError as e:
        raise ConfigurationError(f"Cannot write logger configuration: {e}", path=file_path) from e


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _parse_target(item: Any) -> LogTarget:
    """Convert one entry of the 'targets' list into a LogTarget."""
    if isinstance(item, str):
        if item.strip().lower() == "console":
            return Console()
        raise ConfigurationError(f"Unknown target: '{item}'")

    if isinstance(item, dict) and len(item) == 1:
        kind, options = next(iter(item.items()))
        kind = str(kind).lower()

        if kind == "console":
            if not isinstance(options, dict):
                raise ConfigurationError(f"'console' options must be an object, got {options!r}")
            colored = options.get("colored", False)
            if not isinstance(colored, bool):
                raise ConfigurationError(f"'colored' must be true or false, got {colored!r}")
            return Console(colored=colored)

        if kind == "dir":
            if not isinstance(options, str) or not options.strip():
                raise ConfigurationError(f"'dir' target needs a non-empty path, got {options!r}")
            return Directory(os.path.expanduser(options))

    raise ConfigurationError(f"Malformed target entry: {item!r}")
