"""Custom Click decorators for common CLI patterns."""

import functools
import traceback
from collections.abc import Callable
from typing import Any, TypeVar

import click

from dockmatrix import DockmatrixError
from dockmatrix_cli.core.constants import ExitCode, Provider
from dockmatrix_cli.core.output import OutputStrategy
from dockmatrix_cli.core.yaml import YamlOperationError
from dockmatrix_logging import get_cli_logger

logger = get_cli_logger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def _output_for(ctx: click.Context) -> OutputStrategy:
    output = getattr(ctx.obj, "output", None)
    if isinstance(output, OutputStrategy):
        return output
    return OutputStrategy.from_click_context(ctx)


def handle_exceptions(func: F) -> F:
    """Handle exceptions and convert to appropriate exit codes.

    Parameters
    ----------
    func : Callable
        Function to wrap

    Returns
    -------
    Callable
        Wrapped function
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs) -> Any:
        try:
            return func(*args, **kwargs)
        except click.exceptions.Exit:
            raise
        except KeyboardInterrupt:
            ctx = click.get_current_context()
            _output_for(ctx).error("Interrupted")
            ctx.exit(ExitCode.GENERAL_ERROR)
        except (DockmatrixError, YamlOperationError) as e:
            ctx = click.get_current_context()
            logger.debug("Configuration error: %s", e)
            _output_for(ctx).error(str(e))
            ctx.exit(ExitCode.CONFIG_ERROR)
        except FileNotFoundError as e:
            ctx = click.get_current_context()
            _output_for(ctx).error(f"File not found: {e}")
            ctx.exit(ExitCode.NOT_FOUND)
        except PermissionError as e:
            ctx = click.get_current_context()
            _output_for(ctx).error(f"Permission denied: {e}")
            ctx.exit(ExitCode.PERMISSION_ERROR)
        except Exception as e:
            ctx = click.get_current_context()
            output = _output_for(ctx)
            logger.exception("Unexpected error")
            output.error(f"Unexpected error: {e}")
            # Show full traceback only in verbose-debug mode
            if getattr(ctx.obj, "verbose_debug", False):
                output.error("Full traceback:")
                output.error(traceback.format_exc())
            else:
                output.plain("Re-run with -vvv for full traceback", err=True)
            ctx.exit(ExitCode.GENERAL_ERROR)

    return wrapper  # type: ignore[return-value]


def provider_option(func: F) -> F:
    """Add the ``--provider`` option (``all`` selects every provider).

    Parameters
    ----------
    func : Callable
        Function to wrap

    Returns
    -------
    Callable
        Wrapped function receiving ``providers: list[Provider]``
    """

    def _to_providers(
        _ctx: click.Context,
        _param: click.Parameter,
        value: str,
    ) -> list[Provider]:
        if value == "all":
            return list(Provider)
        return [Provider(value)]

    return click.option(
        "--provider",
        "-p",
        "providers",
        type=click.Choice([*(p.value for p in Provider), "all"]),
        default="all",
        show_default=True,
        callback=_to_providers,
        help="CI provider to generate for",
    )(func)
