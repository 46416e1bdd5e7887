from __future__ import annotations

"""
Error Taxonomy.

Every failure surfaced by the builder derives from LoggerError so that
hosts can guard a whole setup call with a single except clause.
"""

import os
from typing import Optional, Union

PathLike = Union[str, "os.PathLike[str]"]


class LoggerError(Exception):
    """Base class for every error raised while configuring a Logger."""

    def __init__(self, message: str, path: Optional[PathLike] = None) -> None:
        super().__init__(message)
        self.path = os.fspath(path) if path is not None else None


class ConfigurationError(LoggerError):
    """A level, size, target or configuration file could not be interpreted."""


class DirectoryCreationError(LoggerError):
    """The directory of a directory target could not be created."""


class RotationError(LoggerError):
    """The backup could not be removed or the active file could not be moved."""


class FileOpenError(LoggerError):
    """The active log file could not be opened for appending."""


class DuplicateInstallationError(LoggerError):
    """A Logger has already been installed as the process-wide dispatcher."""
