"""Logger configuration for dockmatrix."""

import logging
import os
import sys
from pathlib import Path

from dockmatrix_logging.formatters import ColoredFormatter, SafeFormatter

LOG_LEVEL_ENV_VAR = "DOCKMATRIX_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_FORMAT = "%(asctime)s %(levelname)-5s %(name)s: %(message)s"
CONSOLE_LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def get_log_level(default: str = DEFAULT_LOG_LEVEL) -> str:
    """Return the log level name from the environment, falling back to ``default``."""
    level = os.environ.get(LOG_LEVEL_ENV_VAR, "").strip().upper()
    if level and level in logging.getLevelNamesMapping():
        return level
    return default


def configure_logger(
    name: str,
    level: str | None = None,
    to_console: bool = True,
    log_file: str | Path | None = None,
    verbose_debug: bool = False,
) -> logging.Logger:
    """Configure a package logger.

    Existing handlers and filters on the logger are replaced, so calling this
    twice does not duplicate output.

    Parameters
    ----------
    name : str
        Logger name, usually a top-level package name
    level : str | None
        Level name; defaults to ``DOCKMATRIX_LOG_LEVEL`` or ``INFO``
    to_console : bool
        Attach a stderr handler with colored output
    log_file : str | Path | None
        Attach a file handler writing to this path
    verbose_debug : bool
        Also lower the root logger to DEBUG so third-party libraries log

    Returns
    -------
    logging.Logger
        The configured logger
    """
    logger = logging.getLogger(name)

    for handler in logger.handlers[:]:
        handler.close()
        logger.removeHandler(handler)
    logger.filters.clear()

    effective_level = (level or get_log_level()).upper()
    logger.setLevel(effective_level)

    if to_console:
        console = logging.StreamHandler(sys.stderr)
        console.setFormatter(ColoredFormatter(CONSOLE_LOG_FORMAT))
        logger.addHandler(console)

    if log_file is not None:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(SafeFormatter(DEFAULT_LOG_FORMAT))
        logger.addHandler(file_handler)

    if not logger.handlers:
        logger.addHandler(logging.NullHandler())

    logger.propagate = False

    if verbose_debug:
        logging.basicConfig(level=logging.DEBUG)
        logging.getLogger().setLevel(logging.DEBUG)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Return a module logger that stays silent until configured."""
    logger = logging.getLogger(name)
    root_package = logging.getLogger(name.split(".", 1)[0])
    if not root_package.handlers:
        root_package.addHandler(logging.NullHandler())
    return logger


def get_cli_logger(name: str) -> logging.Logger:
    """Return a logger for CLI modules."""
    return get_logger(name)
