from __future__ import annotations

"""
Logging Handlers and Formatters.

Provides the shared record formatter, the sink factories used by the
targets, and the internal tagging mechanism that lets the package tell its
own handlers apart from handlers injected by the host or by libraries.
"""

import logging
import sys
from typing import Dict, List, Optional, TextIO

import colorlog

from applog.domain.constants import (
    COLORED_RECORD_FORMAT,
    DATE_FORMAT,
    FILE_ENCODING,
    RECORD_FORMAT,
)
from applog.domain.errors import FileOpenError
from applog.domain.levels import LogLevel

# Internal attribute used to tag and identify our own handlers
_HANDLER_TAG_ATTR: str = "_applog_handler"

_TAG_COLORS: Dict[str, str] = {
    "TRACE": "white",
    "DEBUG": "cyan",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "bold_red",
}


# ==============================================================================
# FORMATTERS
# ==============================================================================

class _SeverityTagMixin:
    """Expose the short severity tag (TRACE..ERROR) as 'severity_tag'."""

    def format(self, record: logging.LogRecord) -> str:
        record.severity_tag = LogLevel.tag_for(record.levelno)
        return super().format(record)  # type: ignore[misc]


class RecordFormatter(_SeverityTagMixin, logging.Formatter):
    """
    Plain formatter producing the byte-stable record line:

        [YYYY-MM-DD HH:MM:SS]<LEVEL>[<name>:<line>] <message>

    Timestamps use the local wall clock at second granularity.
    """

    def __init__(self) -> None:
        super().__init__(fmt=RECORD_FORMAT, datefmt=DATE_FORMAT)


class ColoredRecordFormatter(_SeverityTagMixin, colorlog.ColoredFormatter):
    """Same layout as RecordFormatter with the severity tag in ANSI colors."""

    def __init__(self) -> None:
        super().__init__(
            fmt=COLORED_RECORD_FORMAT,
            datefmt=DATE_FORMAT,
            log_colors=_TAG_COLORS,
            reset=False,
        )


# ==============================================================================
# HANDLER FACTORIES
# ==============================================================================

def create_console_handler(
        level_int: int,
        formatter: logging.Formatter,
        stream: Optional[TextIO] = None,
) -> logging.StreamHandler:
    """
    Build a handler writing to standard output.

    Args:
        level_int: Minimum numeric level accepted by the handler.
        formatter: Formatter shared by the whole dispatch.
        stream: Explicit stream; defaults to the current sys.stdout.

    Returns:
        logging.StreamHandler: Tagged console handler.
    """
    sh = logging.StreamHandler(stream if stream is not None else sys.stdout)
    sh.setLevel(level_int)
    sh.setFormatter(formatter)
    _tag_handler(sh)
    return sh


def create_append_file_handler(
        log_file: str,
        level_int: int,
        formatter: logging.Formatter,
) -> logging.FileHandler:
    """
    Open 'log_file' for appending and wrap it in a tagged handler.

    The file is opened eagerly so that permission problems surface while
    the Logger is being built rather than on the first record.

    Args:
        log_file: Path of the active log file.
        level_int: Minimum numeric level accepted by the handler.
        formatter: Formatter shared by the whole dispatch.

    Returns:
        logging.FileHandler: Tagged file handler.

    Raises:
        FileOpenError: If the file cannot be created or opened.
    """
    try:
        fh = logging.FileHandler(log_file, mode="a", encoding=FILE_ENCODING, delay=False)
    except OSError as e:
        raise FileOpenError(f"Cannot open log file '{log_file}' for append: {e}", path=log_file) from e

    fh.setLevel(level_int)
    fh.setFormatter(formatter)
    _tag_handler(fh)
    return fh


# ==============================================================================
# INTERNAL LOGGING UTILITIES
# ==============================================================================

def _tag_handler(handler: logging.Handler) -> None:
    """
    Mark a handler as managed by this package.

    Args:
        handler: The logging handler instance to tag.
    """
    setattr(handler, _HANDLER_TAG_ATTR, True)


def _is_our_handler(handler: logging.Handler) -> bool:
    """
    Verify if a handler was created by this package.

    Args:
        handler: The handler to inspect.

    Returns:
        bool: True if the handler carries our internal tag.
    """
    return bool(getattr(handler, _HANDLER_TAG_ATTR, False))


def close_handlers(handlers: List[logging.Handler]) -> None:
    """Flush and close handlers, leaving shared streams such as stdout open."""
    for h in handlers:
        try:
            h.flush()
        except (OSError, ValueError):
            # Stream already closed by its owner
            pass
        h.close()
