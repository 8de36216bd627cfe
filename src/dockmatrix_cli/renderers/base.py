"""Base class shared by the CI pipeline renderers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING, Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from dockmatrix_cli.core.constants import GENERATED_HEADER, Provider
from dockmatrix_cli.core.paths import ProjectPaths

if TYPE_CHECKING:
    from dockmatrix import MatrixCell
    from dockmatrix_cli.config import ProjectConfig

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"


def create_template_environment(templates_dir: Path = TEMPLATES_DIR) -> Environment:
    """Create the Jinja2 environment used for shell command bodies.

    Parameters
    ----------
    templates_dir : Path
        Directory holding the ``*.j2`` templates

    Returns
    -------
    Environment
        Configured Jinja2 environment
    """
    return Environment(
        loader=FileSystemLoader(templates_dir),
        autoescape=select_autoescape(),
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=StrictUndefined,
    )


class PipelineRenderer(ABC):
    """Turns matrix cells into a provider-specific pipeline document.

    Subclasses set :attr:`provider` and implement :meth:`render`. The returned
    mapping is serialized as-is, so its key order is the order in the file.
    """

    provider: Provider

    def __init__(self, templates: Environment | None = None) -> None:
        self.templates = templates or create_template_environment()

    @property
    def output_path(self) -> Path:
        """Output path relative to the project root."""
        return ProjectPaths.pipeline_output(self.provider)

    def header(self, config_path: Path | str) -> str:
        """Return the "generated file" comment for the output file.

        Parameters
        ----------
        config_path : Path | str
            Configuration file path as it should appear in the comment

        Returns
        -------
        str
            Single comment line
        """
        return GENERATED_HEADER.format(config=config_path)

    def render_template(self, name: str, **context: Any) -> str:
        """Render a command template and strip surrounding whitespace."""
        return self.templates.get_template(name).render(**context).strip()

    @staticmethod
    def image_refs(cell: MatrixCell, config: ProjectConfig) -> list[str]:
        """Return ``<image>:<tag>`` for every tag of a cell, in tag order."""
        return [f"{config.image}:{tag}" for tag in cell.tags]

    def dockerfile_command(self, cell: MatrixCell, config: ProjectConfig) -> str:
        """Return the shell command that writes the cell's Dockerfile."""
        return self.render_template(
            "dockerfile.sh.j2",
            placeholder=config.dockerfile.placeholder,
            base_image=config.base_image(self.provider),
            version=cell.primary.full,
            template=config.dockerfile.template,
        )

    def job_key(self, cell: MatrixCell) -> str:
        """Return the job name used for a cell."""
        return cell.job_identifier

    @abstractmethod
    def render_job(self, cell: MatrixCell, config: ProjectConfig) -> dict[str, Any]:
        """Render the job definition for one cell."""

    @abstractmethod
    def render(
        self,
        cells: Sequence[MatrixCell],
        config: ProjectConfig,
    ) -> dict[str, Any]:
        """Render the whole pipeline document.

        Parameters
        ----------
        cells : Sequence[MatrixCell]
            Matrix cells in declaration order
        config : ProjectConfig
            Project configuration

        Returns
        -------
        dict[str, Any]
            Pipeline document ready for YAML serialization
        """
