from __future__ import annotations

"""
Log Targets.

Each target kind knows how to turn itself into a ready-to-use sink through
the same 'attach' operation, so the builder never branches on the kind of
destination and every kind reports failures the same way.
"""

import abc
import logging
import os
from dataclasses import dataclass
from typing import Any, Dict, Union

from applog.domain.errors import PathLike
from applog.infra.fs import ensure_directory, get_log_path
from applog.infra.handlers import (
    ColoredRecordFormatter,
    create_append_file_handler,
    create_console_handler,
)
from applog.infra.rotation import rotate_if_oversized


class LogTarget(abc.ABC):
    """A destination that receives fully formatted record lines."""

    @abc.abstractmethod
    def attach(
            self,
            formatter: logging.Formatter,
            level_int: int,
            max_file_size: int,
    ) -> logging.Handler:
        """
        Prepare the destination and return the handler feeding it.

        Args:
            formatter: Formatter shared by every sink of the Logger.
            level_int: Minimum numeric level of the Logger.
            max_file_size: Rotation threshold in bytes.

        Returns:
            logging.Handler: Tagged handler ready to receive records.

        Raises:
            LoggerError: Subclass describing why the sink could not be set up.
        """

    @abc.abstractmethod
    def to_config(self) -> Union[str, Dict[str, Any]]:
        """Return the JSON-compatible representation of this target."""


@dataclass(frozen=True)
class Console(LogTarget):
    """
    Standard output sink.

    Attributes:
        colored: Render the severity tag with ANSI colors. The surrounding
            delimiters are unchanged; leave disabled when the output is
            parsed by other tools.
    """
    colored: bool = False

    def attach(
            self,
            formatter: logging.Formatter,
            level_int: int,
            max_file_size: int,
    ) -> logging.Handler:
        if self.colored:
            formatter = ColoredRecordFormatter()
        return create_console_handler(level_int, formatter)

    def to_config(self) -> Union[str, Dict[str, Any]]:
        if self.colored:
            return {"console": {"colored": True}}
        return "console"


@dataclass(frozen=True)
class Directory(LogTarget):
    """
    Directory sink holding 'app.log' and its single backup 'app.log.old'.

    Attributes:
        path: Directory to write into; created with its ancestors if missing.
    """
    path: PathLike

    def attach(
            self,
            formatter: logging.Formatter,
            level_int: int,
            max_file_size: int,
    ) -> logging.Handler:
        directory = ensure_directory(self.path)
        rotate_if_oversized(directory, max_file_size)
        return create_append_file_handler(get_log_path(directory), level_int, formatter)

    def to_config(self) -> Union[str, Dict[str, Any]]:
        return {"dir": os.fspath(self.path)}
