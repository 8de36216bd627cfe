"""Pipeline generation command for dockmatrix CLI."""

from typing import TYPE_CHECKING

import click

from dockmatrix_cli.core.constants import ExitCode, Icons, Provider
from dockmatrix_cli.core.decorators import handle_exceptions, provider_option

if TYPE_CHECKING:
    from dockmatrix_cli.cli import Context


@click.command(name="generate")
@provider_option
@click.option(
    "--check",
    is_flag=True,
    help="Only verify that the generated files are up to date",
)
@click.option(
    "--stdout",
    "to_stdout",
    is_flag=True,
    help="Print the pipelines instead of writing them",
)
@click.pass_context
@handle_exceptions
def command(
    ctx: click.Context,
    providers: list[Provider],
    check: bool,
    to_stdout: bool,
) -> None:
    """Generate CI pipeline definitions from versions.yml.

    \b
    Writes .circleci/config.yml and/or .github/workflows/docker-hub.yml. Nothing
    is written if the configuration is invalid.
    """  # noqa: W605
    app_ctx: Context = ctx.obj
    output = app_ctx.output
    service = app_ctx.generation_service

    if check:
        stale = service.find_stale(providers)
        if not stale:
            output.success("Generated pipelines are up to date")
            return
        for pipeline in stale:
            output.error(
                f"{pipeline.path} is out of date for {pipeline.provider.value}",
                to_stderr=False,
            )
        output.plain("Run `dockmatrix generate` to regenerate.")
        ctx.exit(ExitCode.GENERAL_ERROR)

    if to_stdout:
        for pipeline in service.render(providers):
            output.raw(pipeline.content)
        return

    output.section("Generating pipelines", Icons.BUILD)
    for pipeline in service.generate(providers):
        output.success(f"{pipeline.provider.value}: {pipeline.path}")
