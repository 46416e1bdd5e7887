from __future__ import annotations

"""
Logger Builder and Dispatch Handle.

LoggerBuilder stages the configuration through chained calls; build()
performs the one-time setup (directories, rotation, file handles) and
returns an immutable Logger. The Logger owns a private dispatcher that is
not part of the process-wide 'logging' hierarchy, so it can be created and
tested without touching global state. Use install() to route the standard
'logging' calls of the whole process through it.
"""

import logging
import os
import sys
import threading
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

from applog.core import registry
from applog.core.targets import LogTarget
from applog.domain.constants import DEFAULT_MAX_FILE_SIZE, DISPATCHER_NAME
from applog.domain.errors import ConfigurationError, LoggerError
from applog.domain.levels import LevelLike, LogLevel
from applog.infra.handlers import RecordFormatter, _tag_handler, close_handlers

logger = logging.getLogger(__name__)

# Frames from this file are skipped when locating the caller
_SRC_FILE = os.path.normcase(__file__)

# Record severity: a LogLevel, a stdlib level number or a level name
RecordLevel = Union[LogLevel, int, str]


# =============================================================================
# Logger Handle
# =============================================================================

@dataclass(frozen=True)
class Logger:
    """
    Immutable result of LoggerBuilder.build().

    Attributes:
        level: Minimum severity; records below it reach no sink.
        max_file_size: Rotation threshold applied when the Logger was built.
        targets: Destinations in registration order.
        dispatcher: Private stdlib logger feeding every sink.
        handlers: One handler per target, in the same order.
    """
    level: LogLevel
    max_file_size: int
    targets: Tuple[LogTarget, ...]
    dispatcher: logging.Logger = field(repr=False, compare=False)
    handlers: Tuple[logging.Handler, ...] = field(repr=False, compare=False)
    _children: Dict[str, logging.Logger] = field(
        default_factory=dict, init=False, repr=False, compare=False
    )
    _children_lock: threading.Lock = field(
        default_factory=threading.Lock, init=False, repr=False, compare=False
    )

    # -------------------------------------------------------------------------
    # Emission
    # -------------------------------------------------------------------------

    def log(
            self,
            level: RecordLevel,
            message: str,
            *args: Any,
            target: Optional[str] = None,
            line: Optional[int] = None,
            exc_info: Any = None,
    ) -> None:
        """
        Emit one record through the dispatcher.

        Args:
            level: LogLevel, stdlib level number, or level name.
            message: Message, optionally with %-style placeholders.
            *args: Values merged into 'message'.
            target: Source name shown in the record; defaults to the
                calling module.
            line: Source line shown in the record; defaults to the calling
                line, 0 when it cannot be determined.
            exc_info: Forwarded to the stdlib record (exception traceback).
        """
        levelno = _record_levelno(level)
        if not self.dispatcher.isEnabledFor(levelno):
            return
        if exc_info:
            if isinstance(exc_info, BaseException):
                exc_info = (type(exc_info), exc_info, exc_info.__traceback__)
            elif not isinstance(exc_info, tuple):
                exc_info = sys.exc_info()
        caller_name, caller_file, caller_line = _find_caller()
        record = self.dispatcher.makeRecord(
            target or caller_name or self.dispatcher.name,
            levelno,
            caller_file,
            line if line is not None else caller_line,
            message,
            args,
            exc_info,
        )
        self.dispatcher.handle(record)

    def trace(self, message: str, *args: Any, **kwargs: Any) -> None:
        self.log(LogLevel.TRACE, message, *args, **kwargs)

    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        self.log(LogLevel.DEBUG, message, *args, **kwargs)

    def info(self, message: str, *args: Any, **kwargs: Any) -> None:
        self.log(LogLevel.INFO, message, *args, **kwargs)

    def warn(self, message: str, *args: Any, **kwargs: Any) -> None:
        self.log(LogLevel.WARN, message, *args, **kwargs)

    def error(self, message: str, *args: Any, **kwargs: Any) -> None:
        self.log(LogLevel.ERROR, message, *args, **kwargs)

    def is_enabled_for(self, level: RecordLevel) -> bool:
        return self.dispatcher.isEnabledFor(_record_levelno(level))

    def get_logger(self, name: str) -> logging.Logger:
        """
        Return a stdlib logger that routes into this Logger only.

        The child is not registered with logging.getLogger(), so records
        carry the real module name and line number without involving the
        root logger.

        Args:
            name: Hierarchical name for the logger (usually __name__).

        Returns:
            logging.Logger: Cached child logger for 'name'.
        """
        with self._children_lock:
            child = self._children.get(name)
            if child is None:
                child = logging.Logger(name)
                child.parent = self.dispatcher
                self._children[name] = child
            return child

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    def close(self) -> None:
        """
        Flush and release every sink of this Logger.

        Console output is flushed but standard output stays open. If this
        Logger is the installed one, its sinks are detached from the root
        logger; the process-wide slot stays occupied.
        """
        for h in self.handlers:
            self.dispatcher.removeHandler(h)
        # Keeps late records away from logging.lastResort
        self.dispatcher.addHandler(_null_handler())
        registry.detach_handlers(self)
        close_handlers(list(self.handlers))


# =============================================================================
# Builder
# =============================================================================

class LoggerBuilder:
    """
    Fluent staging object for a Logger.

    Defaults: level TRACE (everything passes), 1 MiB rotation threshold,
    no targets.
    """

    def __init__(self) -> None:
        self._level: LogLevel = LogLevel.TRACE
        self._max_file_size: int = DEFAULT_MAX_FILE_SIZE
        self._targets: List[LogTarget] = []

    def level(self, level: LevelLike) -> LoggerBuilder:
        """
        Set the minimum severity.

        Accepts a LogLevel, a name, a stdlib level number such as
        logging.WARNING, or the 1..5 ordinal. Integers 1..5 are ordinals,
        unlike Logger.log() where every integer is a stdlib level number.
        """
        self._level = LogLevel.parse(level)
        return self

    def max_file_size(self, max_file_size: int) -> LoggerBuilder:
        """
        Set the rotation threshold in bytes.

        Zero is accepted: every non-empty file then rotates on the next
        build.
        """
        if isinstance(max_file_size, bool) or not isinstance(max_file_size, int):
            raise ConfigurationError(f"max_file_size must be an integer: {max_file_size!r}")
        if max_file_size < 0:
            raise ConfigurationError(f"max_file_size cannot be negative: {max_file_size}")
        self._max_file_size = max_file_size
        return self

    def targets(self, targets: Iterable[LogTarget]) -> LoggerBuilder:
        """Append targets, keeping call order as sink registration order."""
        for target in targets:
            if not isinstance(target, LogTarget):
                raise ConfigurationError(f"Not a log target: {target!r}")
            self._targets.append(target)
        return self

    def to_mapping(self) -> Dict[str, Any]:
        """Serialize the staged configuration (level stored as its ordinal)."""
        return {
            "level": self._level.ordinal,
            "max_file_size": self._max_file_size,
            "targets": [t.to_config() for t in self._targets],
        }

    def build(self, *, install: bool = False) -> Logger:
        """
        Assemble the Logger and set up every destination.

        Setup is all-or-nothing: when any target fails, sinks already opened
        by this call are closed and nothing is installed.

        Args:
            install: Also register the Logger as the process-wide dispatcher.

        Returns:
            Logger: The ready-to-use handle.

        Raises:
            DirectoryCreationError: A directory target could not be created.
            RotationError: An oversized log file could not be rotated.
            FileOpenError: A log file could not be opened for append.
            DuplicateInstallationError: 'install' was requested but another
                Logger is already installed.
        """
        level_int = int(self._level)
        formatter = RecordFormatter()

        handlers: List[logging.Handler] = []
        try:
            for target in self._targets:
                handlers.append(target.attach(formatter, level_int, self._max_file_size))
        except Exception:
            close_handlers(handlers)
            raise

        if not handlers:
            handlers.append(_null_handler())

        dispatcher = logging.Logger(DISPATCHER_NAME, level_int)
        dispatcher.propagate = False
        for h in handlers:
            dispatcher.addHandler(h)

        result = Logger(
            level=self._level,
            max_file_size=self._max_file_size,
            targets=tuple(self._targets),
            dispatcher=dispatcher,
            handlers=tuple(handlers),
        )

        logger.debug(f"Logger built: level={self._level.name}, targets={len(self._targets)}")

        if install:
            try:
                registry.install(result)
            except LoggerError:
                result.close()
                raise

        return result


# =============================================================================
# Private Helpers
# =============================================================================

def _null_handler() -> logging.NullHandler:
    """Tagged sink that drops records, for Loggers with nowhere to write."""
    null = logging.NullHandler()
    _tag_handler(null)
    return null


def _find_caller() -> Tuple[Optional[str], str, int]:
    """Locate the first frame outside this module: (module name, file, line)."""
    frame = sys._getframe(1)
    while frame is not None:
        if os.path.normcase(frame.f_code.co_filename) != _SRC_FILE:
            return frame.f_globals.get("__name__"), frame.f_code.co_filename, frame.f_lineno
        frame = frame.f_back
    return None, "(unknown file)", 0


def _record_levelno(level: RecordLevel) -> int:
    """Resolve a record severity; plain ints are stdlib level numbers."""
    if isinstance(level, str):
        return int(LogLevel.parse(level))
    if isinstance(level, bool) or not isinstance(level, int):
        raise ConfigurationError(f"Invalid record level: {level!r}")
    return int(level)
