"""Console output for dockmatrix commands.

Human-facing messages respect the ``-v``/``-vvv`` flags. Machine-readable
output (pipeline YAML, matrix JSON) goes through :meth:`OutputStrategy.raw`
and is never styled, so it can be piped into files or ``$GITHUB_OUTPUT``.
"""

from __future__ import annotations

import os
import shutil
from enum import IntEnum

import click

from dockmatrix_cli.core.constants import EnvVars, Icons

SEPARATOR_WIDTH_CI = 60


class Verbosity(IntEnum):
    """How much a command prints besides its result."""

    NORMAL = 0
    VERBOSE = 1
    DEBUG = 2

    @classmethod
    def from_flags(cls, verbose: bool = False, verbose_debug: bool = False) -> Verbosity:
        """Map the ``-v`` and ``-vvv`` flags to a level; ``-vvv`` wins."""
        if verbose_debug:
            return cls.DEBUG
        return cls.VERBOSE if verbose else cls.NORMAL


class OutputStrategy:
    """Writes command output through ``click.echo``.

    ``error``, ``success``, ``plain``, ``section`` and ``subsection`` always
    print. ``detail`` needs ``-v``. Consecutive blank lines are collapsed into
    one.

    Parameters
    ----------
    verbosity : Verbosity
        Current verbosity level
    is_ci : bool | None
        Running under a CI provider; detected from the environment when None
    """

    def __init__(
        self,
        verbosity: Verbosity = Verbosity.NORMAL,
        is_ci: bool | None = None,
    ) -> None:
        self.verbosity = verbosity
        self.is_ci = self.detect_ci() if is_ci is None else is_ci
        self._last_was_blank = False

    @staticmethod
    def detect_ci() -> bool:
        """Check the environment variables CI providers set."""
        return any(os.environ.get(name) for name in EnvVars.CI_ENVIRONMENT_VARS)

    @classmethod
    def from_click_context(cls, ctx: click.Context) -> OutputStrategy:
        """Build an output strategy from the flags stored on ``ctx.obj``."""
        app_ctx = ctx.obj
        return cls(
            verbosity=Verbosity.from_flags(
                getattr(app_ctx, "verbose", False),
                getattr(app_ctx, "verbose_debug", False),
            ),
        )

    def _echo(self, message: str, *, err: bool = False, **style) -> None:
        if not message.strip():
            if not self._last_was_blank:
                click.echo("", err=err)
            self._last_was_blank = True
            return
        click.echo(click.style(message, **style) if style else message, err=err)
        self._last_was_blank = False

    def error(self, message: str, to_stderr: bool = True) -> None:
        """Print an error in red, to stderr unless told otherwise."""
        self._echo(f"{Icons.ERROR} {message}", err=to_stderr, fg="red")

    def success(self, message: str) -> None:
        self._echo(message, fg="green")

    def plain(self, message: str, err: bool = False) -> None:
        self._echo(message, err=err)

    def detail(self, message: str) -> None:
        """Print an indented, dimmed line when ``-v`` is set."""
        if self.verbosity >= Verbosity.VERBOSE:
            self._echo(f"  {message}", dim=True)

    def raw(self, text: str) -> None:
        """Print ``text`` exactly, adding a newline only if it lacks one."""
        click.echo(text, nl=not text.endswith("\n"))
        self._last_was_blank = False

    def section(self, title: str, icon: str | None = None) -> None:
        """Print a title between two separator rules."""
        rule = "-" * self.separator_width()
        heading = f"{icon} {title}" if icon else title
        click.echo(rule)
        click.echo(f"{heading}:")
        click.echo(rule)
        self._last_was_blank = False

    def subsection(self, title: str, icon: str | None = None) -> None:
        heading = f"{icon} {title}" if icon else title
        click.echo(f"\n{heading}:")
        self._last_was_blank = False

    def separator_width(self) -> int:
        """Rule width: fixed in CI logs, else the terminal width clamped to 40..100."""
        if self.is_ci:
            return SEPARATOR_WIDTH_CI
        columns = shutil.get_terminal_size(fallback=(SEPARATOR_WIDTH_CI + 2, 24)).columns
        return max(40, min(columns - 2, 100))
