"""Log formatters for console and file output."""

import logging
import os
import sys


class SafeFormatter(logging.Formatter):
    """Formatter that never raises on a bad record.

    ``WARNING`` is shortened to ``WARN`` to keep columns aligned. If the message
    cannot be interpolated with its arguments, the raw message and arguments are
    logged instead of losing the record.
    """

    def format(self, record: logging.LogRecord) -> str:
        if record.levelname == "WARNING":
            record.levelname = "WARN"
        try:
            return super().format(record)
        except (TypeError, ValueError):
            record.msg = f"{record.msg} (unformatted args: {record.args!r})"
            record.args = ()
            return super().format(record)


class ColoredFormatter(SafeFormatter):
    """Console formatter that colors the level name with ANSI codes."""

    COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARN": "\033[33m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
    }
    RESET = "\033[0m"

    def __init__(
        self,
        fmt: str | None = None,
        datefmt: str | None = None,
        use_colors: bool = True,
    ) -> None:
        super().__init__(fmt, datefmt)
        self.use_colors = use_colors and self._should_use_colors()

    @staticmethod
    def _should_use_colors() -> bool:
        if os.environ.get("NO_COLOR"):
            return False
        return hasattr(sys.stderr, "isatty") and sys.stderr.isatty()

    def format(self, record: logging.LogRecord) -> str:
        if not self.use_colors:
            return super().format(record)

        original_levelname = record.levelname
        label = "WARN" if original_levelname == "WARNING" else original_levelname
        color = self.COLORS.get(label, "")
        record.levelname = f"{color}{label}{self.RESET}"
        try:
            return super().format(record)
        finally:
            record.levelname = original_levelname
