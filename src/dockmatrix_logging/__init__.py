"""Logging setup shared by the dockmatrix packages.

Library modules call :func:`get_logger` and stay silent until an application
(the CLI) calls :func:`configure_logger` for the package loggers.
"""

from dockmatrix_logging.config import (
    DEFAULT_LOG_FORMAT,
    configure_logger,
    get_cli_logger,
    get_log_level,
    get_logger,
)
from dockmatrix_logging.formatters import ColoredFormatter, SafeFormatter

__all__ = [
    "DEFAULT_LOG_FORMAT",
    "ColoredFormatter",
    "SafeFormatter",
    "configure_logger",
    "get_cli_logger",
    "get_log_level",
    "get_logger",
]
