from __future__ import annotations

from applog.config import builder_from_mapping, load_builder, save_builder
from applog.core.builder import Logger, LoggerBuilder
from applog.core.registry import get_logger, install, installed_logger
from applog.core.targets import Console, Directory, LogTarget
from applog.domain.errors import (
    ConfigurationError,
    DirectoryCreationError,
    DuplicateInstallationError,
    FileOpenError,
    LoggerError,
    RotationError,
)
from applog.domain.levels import LogLevel
from applog.infra.fs import get_backup_path, get_log_path
from applog.infra.rotation import rotate_if_oversized

__all__ = [
    "LogLevel",
    "LogTarget",
    "Console",
    "Directory",
    "Logger",
    "LoggerBuilder",
    "install",
    "installed_logger",
    "get_logger",
    "rotate_if_oversized",
    "get_log_path",
    "get_backup_path",
    "builder_from_mapping",
    "load_builder",
    "save_builder",
    "LoggerError",
    "ConfigurationError",
    "DirectoryCreationError",
    "RotationError",
    "FileOpenError",
    "DuplicateInstallationError",
]
