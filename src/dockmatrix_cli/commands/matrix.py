"""Build matrix inspection commands for dockmatrix CLI."""

import json
from typing import TYPE_CHECKING

import click

from dockmatrix_cli.core.constants import Icons, OutputFormat
from dockmatrix_cli.core.decorators import handle_exceptions
from dockmatrix_cli.core.yaml import dump_yaml

if TYPE_CHECKING:
    from dockmatrix import SemanticVersion
    from dockmatrix_cli.cli import Context
    from dockmatrix_cli.core.output import OutputStrategy


@click.group(name="matrix")
@click.pass_context
def group(ctx: click.Context) -> None:
    """Inspect the image build matrix."""


@group.command(name="show")
@click.option(
    "--format",
    "fmt",
    type=click.Choice([f.value for f in OutputFormat]),
    default=OutputFormat.TEXT.value,
    help="Output format for the matrix",
)
@click.pass_context
@handle_exceptions
def show_matrix(ctx: click.Context, fmt: str) -> None:
    """Display every image of the matrix with its tags.

    \b
    The github format prints a single matrix=<json> line for $GITHUB_OUTPUT.
    """  # noqa: W605
    app_ctx: Context = ctx.obj
    output = app_ctx.output
    cells = app_ctx.generation_service.build_matrix()
    entries = [cell.to_dict() for cell in cells]

    if fmt == OutputFormat.JSON.value:
        output.raw(json.dumps(entries, indent=2))
    elif fmt == OutputFormat.YAML.value:
        output.raw(dump_yaml(entries))
    elif fmt == OutputFormat.GITHUB.value:
        matrix_json = json.dumps({"include": entries}, separators=(",", ":"))
        output.raw(f"matrix={matrix_json}")
    else:
        config = app_ctx.generation_service.config
        output.section(f"Build matrix for {config.image}", Icons.DOCKER)
        for cell in cells:
            output.plain(cell.job_identifier)
            for tag in cell.tags:
                output.plain(f"  {Icons.ARROW_RIGHT} {config.image}:{tag}")
        output.plain("")
        output.plain(f"{len(cells)} image(s)")


def _describe_axis(
    output: "OutputStrategy",
    name: str,
    versions: list["SemanticVersion"],
) -> None:
    latest = next(v for v in versions if v.is_latest)
    majors = [v.full for v in versions if v.is_major_representative]
    minors = [v.full for v in versions if v.is_minor_representative]

    output.subsection(f"{name} ({len(versions)} versions)", Icons.LIST)
    output.plain(f"  latest: {latest.full}")
    output.plain(f"  major lines: {', '.join(majors)}")
    output.plain(f"  minor lines: {', '.join(minors)}")
    output.detail(f"all: {', '.join(v.full for v in versions)}")


@group.command(name="validate")
@click.pass_context
@handle_exceptions
def validate_matrix(ctx: click.Context) -> None:
    """Validate versions.yml and show how each axis is categorized."""
    app_ctx: Context = ctx.obj
    output = app_ctx.output
    service = app_ctx.generation_service
    config = service.config

    primary, secondary = service.categorized_axes()

    output.section("Version Configuration Validation", Icons.CHECK)
    _describe_axis(output, config.primary.name, primary)
    _describe_axis(output, config.secondary.name, secondary)
    output.plain("")
    output.success(
        f"Configuration is valid: {len(primary) * len(secondary)} image(s) to build",
    )
