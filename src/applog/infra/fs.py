from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Resolves the fixed file locations inside a directory target and makes sure
the directory hierarchy exists before anything is written to it.
"""

import logging
import os

from applog.domain.constants import BACKUP_FILE_NAME, LOG_FILE_NAME
from applog.domain.errors import DirectoryCreationError, PathLike

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_log_path(directory: PathLike) -> str:
    """Return the active log file path inside 'directory'."""
    return os.path.join(os.fspath(directory), LOG_FILE_NAME)


def get_backup_path(directory: PathLike) -> str:
    """Return the single rotated backup path inside 'directory'."""
    return os.path.join(os.fspath(directory), BACKUP_FILE_NAME)


# -----------------------------------------------------------------------------
# DIRECTORY MANAGEMENT API
# -----------------------------------------------------------------------------

def ensure_directory(directory: PathLike) -> str:
    """
    Create 'directory' and every missing ancestor.

    Args:
        directory: Target directory of a log destination.

    Returns:
        str: Absolute path of the (now existing) directory.

    Raises:
        DirectoryCreationError: If the hierarchy cannot be created, or if
            the path exists but is not a directory.
    """
    try:
        path = os.path.abspath(os.fspath(directory))
    except TypeError as e:
        raise DirectoryCreationError(f"Invalid log directory {directory!r}: {e}") from e

    if os.path.isdir(path):
        return path

    try:
        os.makedirs(path, exist_ok=True)
    except (OSError, ValueError) as e:
        raise DirectoryCreationError(
            f"Cannot create log directory '{path}': {e}", path=path
        ) from e

    logger.debug(f"Created log directory: {path}")
    return path
