from __future__ import annotations

"""
Single-Generation Rotation.

Archives the active log file of a directory target once it has grown past
the configured threshold. The check runs only when a Logger is built, just
before the file is reopened for appending; files that outgrow the limit
mid-session are rotated on the next build.
"""

import logging
import os

from applog.domain.errors import PathLike, RotationError
from applog.infra.fs import get_backup_path, get_log_path

logger = logging.getLogger(__name__)


def rotate_if_oversized(directory: PathLike, max_file_size: int) -> bool:
    """
    Move '<dir>/app.log' to '<dir>/app.log.old' when it exceeds the limit.

    A file of exactly 'max_file_size' bytes is kept. Only one backup is
    retained: an existing backup is deleted before the move. A missing
    active file is the normal first-run case and is not an error.

    Args:
        directory: Directory holding the active log file.
        max_file_size: Threshold in bytes; rotation requires size > threshold.

    Returns:
        bool: True if the active file was moved aside.

    Raises:
        RotationError: If the old backup cannot be removed or the active
            file cannot be renamed.
    """
    log_path = get_log_path(directory)
    backup_path = get_backup_path(directory)

    # Size is read from disk on every call, never cached
    try:
        size = os.stat(log_path).st_size
    except FileNotFoundError:
        return False
    except (OSError, ValueError) as e:
        raise RotationError(f"Cannot inspect log file '{log_path}': {e}", path=log_path) from e

    if size <= max_file_size:
        return False

    if os.path.lexists(backup_path):
        try:
            os.remove(backup_path)
        except OSError as e:
            raise RotationError(
                f"Cannot remove previous backup '{backup_path}': {e}", path=backup_path
            ) from e

    try:
        os.rename(log_path, backup_path)
    except OSError as e:
        raise RotationError(
            f"Cannot move '{log_path}' to '{backup_path}': {e}", path=log_path
        ) from e

    logger.debug(f"Rotated {log_path} ({size} bytes > {max_file_size}) to {backup_path}")
    return True
