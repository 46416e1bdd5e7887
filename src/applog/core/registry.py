from __future__ import annotations

"""
Process-Wide Registration.

Optional bridge between an explicit Logger handle and the standard
'logging' module: once installed, every logging.getLogger(...) call in the
process is routed to the Logger's sinks. The slot can be filled once per
process; it is never replaced.
"""

import logging
import threading
from typing import TYPE_CHECKING, Optional

from applog.domain.errors import DuplicateInstallationError
from applog.infra.handlers import _is_our_handler

if TYPE_CHECKING:
    from applog.core.builder import Logger

# The installed Logger is stored on the root logger itself
_INSTALLED_LOGGER_ATTR: str = "_applog_installed_logger"

_INSTALL_LOCK = threading.Lock()


# ==============================================================================
# PUBLIC API
# ==============================================================================

def install(handle: Logger) -> logging.Logger:
    """
    Register 'handle' as the process-wide dispatcher.

    Attaches the Logger's sinks to the root logger and aligns the root
    level with the Logger's minimum level.

    Args:
        handle: Logger returned by LoggerBuilder.build().

    Returns:
        logging.Logger: The root logger now feeding the sinks.

    Raises:
        DuplicateInstallationError: If a Logger is already installed. The
            existing installation is left untouched.
    """
    root = logging.getLogger()

    with _INSTALL_LOCK:
        if getattr(root, _INSTALLED_LOGGER_ATTR, None) is not None:
            raise DuplicateInstallationError("A logger is already installed for this process")

        root.setLevel(int(handle.level))
        for h in handle.handlers:
            root.addHandler(h)
        setattr(root, _INSTALLED_LOGGER_ATTR, handle)
    return root


def installed_logger() -> Optional[Logger]:
    """Return the installed Logger, or None when nothing is installed."""
    return getattr(logging.getLogger(), _INSTALLED_LOGGER_ATTR, None)


def get_logger(name: str) -> logging.Logger:
    """
    Acquire a named logger from the process-wide hierarchy.

    Args:
        name: Hierarchical name for the logger (usually __name__).

    Returns:
        logging.Logger: The requested logger instance.
    """
    return logging.getLogger(name)


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def detach_handlers(handle: Logger) -> None:
    """Remove the sinks of 'handle' from the root logger if it is installed."""
    root = logging.getLogger()
    with _INSTALL_LOCK:
        if getattr(root, _INSTALLED_LOGGER_ATTR, None) is not handle:
            return
        for h in list(root.handlers):
            if _is_our_handler(h) and h in handle.handlers:
                root.removeHandler(h)
