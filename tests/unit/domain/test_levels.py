from __future__ import annotations

"""
Unit tests for the severity scale.

Verifies ordering, alignment with the stdlib 'logging' numbers, parsing of
configuration values and the tag shown in record lines.
"""

import logging

import pytest

from applog.domain.errors import ConfigurationError
from applog.domain.levels import LogLevel


def test_levels_are_totally_ordered() -> None:
    assert LogLevel.TRACE < LogLevel.DEBUG < LogLevel.INFO < LogLevel.WARN < LogLevel.ERROR


def test_levels_match_stdlib_numbers() -> None:
    assert LogLevel.DEBUG == logging.DEBUG
    assert LogLevel.INFO == logging.INFO
    assert LogLevel.WARN == logging.WARNING
    assert LogLevel.ERROR == logging.ERROR
    assert logging.getLevelName(int(LogLevel.TRACE)) == "TRACE"


@pytest.mark.parametrize(
    "ordinal, expected",
    [
        (1, LogLevel.TRACE),
        (2, LogLevel.DEBUG),
        (3, LogLevel.INFO),
        (4, LogLevel.WARN),
        (5, LogLevel.ERROR),
    ],
)
def test_ordinal_mapping(ordinal: int, expected: LogLevel) -> None:
    """The 1..5 configuration scale resolves in both directions."""
    assert LogLevel.parse(ordinal) is expected
    assert expected.ordinal == ordinal


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("trace", LogLevel.TRACE),
        (" Info ", LogLevel.INFO),
        ("WARN", LogLevel.WARN),
        ("warning", LogLevel.WARN),
        ("4", LogLevel.WARN),
        (LogLevel.ERROR, LogLevel.ERROR),
    ],
)
def test_parse_accepts_names_and_aliases(raw: object, expected: LogLevel) -> None:
    assert LogLevel.parse(raw) is expected  # type: ignore[arg-type]


@pytest.mark.parametrize("raw", [0, 6, -1, "verbose", "", True, None, 2.5])
def test_parse_rejects_unknown_values(raw: object) -> None:
    with pytest.raises(ConfigurationError):
        LogLevel.parse(raw)  # type: ignore[arg-type]


@pytest.mark.parametrize(
    "levelno, tag",
    [
        (1, "TRACE"),
        (5, "TRACE"),
        (10, "DEBUG"),
        (25, "INFO"),
        (logging.WARNING, "WARN"),
        (logging.ERROR, "ERROR"),
        (logging.CRITICAL, "ERROR"),
    ],
)
def test_tag_for_stdlib_levels(levelno: int, tag: str) -> None:
    """Any stdlib level renders as the closest LogLevel at or below it."""
    assert LogLevel.tag_for(levelno) == tag


@pytest.mark.parametrize(
    "number, expected",
    [
        (logging.DEBUG, LogLevel.DEBUG),
        (logging.INFO, LogLevel.INFO),
        (logging.WARNING, LogLevel.WARN),
        (logging.ERROR, LogLevel.ERROR),
    ],
)
def test_parse_accepts_stdlib_numbers(number: int, expected: LogLevel) -> None:
    """Stdlib constants resolve; small integers stay ordinals."""
    assert LogLevel.parse(number) is expected


def test_small_integers_remain_ordinals() -> None:
    assert LogLevel.parse(5) is LogLevel.ERROR
    with pytest.raises(ConfigurationError):
        LogLevel.parse(logging.CRITICAL)
