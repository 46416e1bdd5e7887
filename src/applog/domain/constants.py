from __future__ import annotations

"""
Domain Constants.

Centralizes the fixed file names, size thresholds and line layout shared
by the builder, the rotation check and the formatters.
"""

# -----------------------------------------------------------------------------
# FILESYSTEM LAYOUT
# -----------------------------------------------------------------------------
LOG_FILE_NAME = "app.log"
BACKUP_FILE_NAME = "app.log.old"

# -----------------------------------------------------------------------------
# ROTATION
# -----------------------------------------------------------------------------
DEFAULT_MAX_FILE_SIZE = 1024 * 1024  # 1 MiB

# -----------------------------------------------------------------------------
# RECORD LAYOUT
# -----------------------------------------------------------------------------
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
RECORD_FORMAT = "[%(asctime)s]<%(severity_tag)s>[%(name)s:%(lineno)d] %(message)s"
COLORED_RECORD_FORMAT = (
    "[%(asctime)s]<%(log_color)s%(severity_tag)s%(reset)s>[%(name)s:%(lineno)d] %(message)s"
)

DISPATCHER_NAME = "applog"
FILE_ENCODING = "utf-8"
