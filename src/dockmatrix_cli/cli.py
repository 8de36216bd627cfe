"""Main CLI entry point for dockmatrix.

This module provides the main Click command group and shares state with the
subcommands through :class:`Context`.
"""

import sys
from pathlib import Path

import click

from dockmatrix_cli.commands import generate, matrix
from dockmatrix_cli.core.constants import ALL_LOG_LEVELS, Icons, LogLevel
from dockmatrix_cli.core.output import OutputStrategy, Verbosity
from dockmatrix_cli.core.paths import ProjectPaths, detect_project_root
from dockmatrix_cli.services import PipelineGenerationService
from dockmatrix_logging import configure_logger, get_cli_logger

logger = get_cli_logger(__name__)

LOGGING_PACKAGES = ("dockmatrix_cli", "dockmatrix")


def _effective_log_level(
    verbose: bool,
    verbose_debug: bool,
    log_level: str | None,
) -> str | None:
    """Resolve the log level from CLI flags.

    Parameters
    ----------
    verbose : bool
        Whether -v verbose mode is enabled
    verbose_debug : bool
        Whether -vvv verbose debug mode is enabled
    log_level : str | None
        Explicit log level if provided

    Returns
    -------
    str | None
        The level to configure, or None to leave logging silent
    """
    if log_level:
        return log_level
    if verbose_debug or verbose:
        return LogLevel.DEBUG.value
    return None


def _configure_package_loggers(effective_level: str, verbose_debug: bool) -> None:
    """Send package logs to stderr at the given level."""
    for pkg_name in LOGGING_PACKAGES:
        configure_logger(
            pkg_name,
            level=effective_level,
            to_console=True,
            verbose_debug=verbose_debug,
        )


class Context:
    """CLI context object for sharing state between commands."""

    def __init__(
        self,
        repo_root: Path | None = None,
        config_path: Path | None = None,
    ) -> None:
        """Initialize CLI context.

        Parameters
        ----------
        repo_root : Path, optional
            Project root. If not provided, will be auto-detected.
        config_path : Path, optional
            Configuration file, defaults to ``<repo_root>/versions.yml``
        """
        self.verbose: bool = False
        self.verbose_debug: bool = False
        self.repo_root: Path = repo_root or detect_project_root()
        self.config_path: Path = config_path or self.repo_root / ProjectPaths.VERSIONS_YAML

        self._generation_service: PipelineGenerationService | None = None
        self._output: OutputStrategy | None = None

    @property
    def generation_service(self) -> PipelineGenerationService:
        """Get generation service singleton instance.

        Returns
        -------
        PipelineGenerationService
            Service bound to the project root and configuration file
        """
        if self._generation_service is None:
            self._generation_service = PipelineGenerationService(
                self.repo_root,
                self.config_path,
            )
        return self._generation_service

    @property
    def output(self) -> OutputStrategy:
        """Get output strategy singleton instance.

        Returns
        -------
        OutputStrategy
            Output strategy configured with current verbosity
        """
        if self._output is None:
            verbosity = Verbosity.from_flags(self.verbose, self.verbose_debug)
            self._output = OutputStrategy(verbosity=verbosity)
        return self._output


pass_context = click.make_pass_decorator(Context, ensure=True)


@click.group()
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output",
)
@click.option(
    "--verbose-debug",
    "-vvv",
    is_flag=True,
    help="Enable verbose output with global debug logging",
)
@click.option(
    "--log-level",
    type=click.Choice([level.value for level in ALL_LOG_LEVELS]),
    help="Set logging level",
)
@click.option(
    "--root",
    type=click.Path(file_okay=False, path_type=Path),
    help="Project root (default: auto-detected from the current directory)",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Versions file (default: <root>/versions.yml)",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    verbose_debug: bool,
    log_level: str | None,
    root: Path | None,
    config_path: Path | None,
) -> None:
    """dockmatrix - Docker image matrix pipeline generator.

    \b
    Generates CircleCI and GitHub Actions pipelines that build one image per
    combination of the two version axes listed in versions.yml.
    """  # noqa: W605
    ctx.obj = Context(
        repo_root=root.resolve() if root else None,
        config_path=config_path,
    )
    app_ctx: Context = ctx.obj
    app_ctx.verbose = verbose
    app_ctx.verbose_debug = verbose_debug

    effective_level = _effective_log_level(verbose, verbose_debug, log_level)
    if effective_level:
        _configure_package_loggers(effective_level, verbose_debug)
        logger.info("dockmatrix starting with project root: %s", app_ctx.repo_root)


cli.add_command(generate.command)
cli.add_command(matrix.group)


@cli.command()
@click.pass_context
def info(ctx: click.Context) -> None:
    """Show dockmatrix CLI information."""
    from dockmatrix_cli import __version__

    app_ctx: Context = ctx.obj
    output = app_ctx.output

    output.section("dockmatrix Information", Icons.INFO)
    output.plain(f"dockmatrix v{__version__}")
    output.plain(f"Project root: {app_ctx.repo_root}")
    output.plain(f"Versions file: {app_ctx.config_path}")
    output.plain(f"Python executable: {sys.executable}")


def main() -> None:
    """Serve as the main entry point for the CLI."""
    cli(prog_name="dockmatrix")


if __name__ == "__main__":
    main()
