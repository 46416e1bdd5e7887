from __future__ import annotations

"""
Severity Levels.

Defines the ordered severity scale used both as a per-record severity and
as the minimum-level gate of a Logger. Numeric values are aligned with the
standard 'logging' module so a LogLevel can be handed to any stdlib API.
"""

import enum
import logging
from typing import Dict, Union

from applog.domain.errors import ConfigurationError

TRACE_LEVEL_NUM = 5
logging.addLevelName(TRACE_LEVEL_NUM, "TRACE")

LevelLike = Union["LogLevel", int, str]


class LogLevel(enum.IntEnum):
    """Ordered severity: TRACE < DEBUG < INFO < WARN < ERROR."""

    TRACE = TRACE_LEVEL_NUM
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARN = logging.WARNING
    ERROR = logging.ERROR

    @property
    def ordinal(self) -> int:
        """Position on the 1..5 scale used in configuration files."""
        return _ORDER.index(self) + 1

    @classmethod
    def from_ordinal(cls, value: int) -> LogLevel:
        if not 1 <= value <= len(_ORDER):
            raise ConfigurationError(f"Level ordinal out of range (1-{len(_ORDER)}): {value}")
        return _ORDER[value - 1]

    @classmethod
    def parse(cls, value: LevelLike) -> LogLevel:
        """
        Resolve a level from its configuration representation.

        Accepts a LogLevel, the 1..5 ordinal written by configuration files,
        a stdlib level number matching a LogLevel (logging.WARNING), or a
        case-insensitive name ("warn" and "warning" are equivalent). Integers
        1..5 are always read as ordinals, so 5 means ERROR; use
        LogLevel.TRACE for the lowest level.

        Args:
            value: Raw level value.

        Returns:
            LogLevel: The resolved severity.

        Raises:
            ConfigurationError: If the value matches no known level.
        """
        if isinstance(value, LogLevel):
            return value
        # bool is an int subclass; True/False are never meaningful levels
        if isinstance(value, bool):
            raise ConfigurationError(f"Invalid log level: {value!r}")
        if isinstance(value, int):
            if value > len(_ORDER) and value in _BY_VALUE:
                return _BY_VALUE[value]
            return cls.from_ordinal(value)
        if isinstance(value, str):
            key = value.strip().upper()
            if key.isdigit():
                return cls.from_ordinal(int(key))
            if key in _NAME_ALIASES:
                return _NAME_ALIASES[key]
        raise ConfigurationError(f"Invalid log level: {value!r}")

    @classmethod
    def tag_for(cls, levelno: int) -> str:
        """
        Map a stdlib numeric level to the tag printed in a record line.

        Picks the highest LogLevel not above 'levelno', so CRITICAL renders
        as ERROR and anything below TRACE renders as TRACE.
        """
        tag = cls.TRACE
        for level in _ORDER:
            if levelno >= level:
                tag = level
        return tag.name


_ORDER = tuple(sorted(LogLevel))

_BY_VALUE: Dict[int, LogLevel] = {int(level): level for level in LogLevel}

_NAME_ALIASES: Dict[str, LogLevel] = {level.name: level for level in LogLevel}
_NAME_ALIASES["WARNING"] = LogLevel.WARN
