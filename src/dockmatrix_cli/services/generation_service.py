"""Pipeline generation service.

Loads ``versions.yml``, builds the image matrix and renders it for each
requested CI provider. Every pipeline is rendered before anything is written,
so a configuration error never leaves a half-updated set of files behind.
"""

import os
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from dockmatrix import MatrixCell, SemanticVersion, categorize, generate_matrix
from dockmatrix_cli.config import ProjectConfig, load_project_config
from dockmatrix_cli.core.constants import Provider
from dockmatrix_cli.core.paths import ProjectPaths
from dockmatrix_cli.core.yaml import dump_yaml, safe_write_text
from dockmatrix_cli.renderers import get_renderer
from dockmatrix_logging import get_cli_logger

logger = get_cli_logger(__name__)


@dataclass(frozen=True)
class GeneratedPipeline:
    """Rendered pipeline file content for one provider."""

    provider: Provider
    path: Path
    content: str

    def is_current(self) -> bool:
        """Check whether the file on disk already has this content."""
        if not self.path.exists():
            return False
        return self.path.read_text(encoding="utf-8") == self.content


class PipelineGenerationService:
    """Service for generating CI pipeline files from ``versions.yml``."""

    def __init__(self, repo_root: Path, config_path: Path | None = None) -> None:
        """Initialize the generation service.

        Parameters
        ----------
        repo_root : Path
            Project root; pipeline paths are resolved against it
        config_path : Path | None
            Configuration file, defaults to ``<repo_root>/versions.yml``
        """
        self.repo_root = repo_root
        self.config_path = config_path or repo_root / ProjectPaths.VERSIONS_YAML
        self._config: ProjectConfig | None = None

    @property
    def config(self) -> ProjectConfig:
        """Loaded project configuration (read once)."""
        if self._config is None:
            self._config = load_project_config(self.config_path)
        return self._config

    def categorized_axes(self) -> tuple[list[SemanticVersion], list[SemanticVersion]]:
        """Categorize both axes of the configuration.

        Returns
        -------
        tuple[list[SemanticVersion], list[SemanticVersion]]
            Primary and secondary versions, newest first
        """
        config = self.config
        return (
            categorize(config.primary.versions, axis=config.primary.name),
            categorize(config.secondary.versions, axis=config.secondary.name),
        )

    def build_matrix(self) -> list[MatrixCell]:
        """Build the image matrix for the configuration.

        Returns
        -------
        list[MatrixCell]
            Matrix cells in job declaration order
        """
        config = self.config
        cells = generate_matrix(
            config.primary.versions,
            config.secondary.versions,
            config.prefixes,
            axis_names=(config.primary.name, config.secondary.name),
        )
        logger.info(
            "Matrix for %s: %d images from %d %s x %d %s versions",
            config.image,
            len(cells),
            len(set(config.primary.versions)),
            config.primary.name,
            len(set(config.secondary.versions)),
            config.secondary.name,
        )
        return cells

    def _header_reference(self, output_path: Path) -> str:
        """Return the config path relative to the generated file's directory."""
        return Path(
            os.path.relpath(self.config_path.resolve(), output_path.parent.resolve()),
        ).as_posix()

    def render(self, providers: Iterable[Provider]) -> list[GeneratedPipeline]:
        """Render pipelines for the given providers without writing them.

        Parameters
        ----------
        providers : Iterable[Provider]
            Providers to render, in output order

        Returns
        -------
        list[GeneratedPipeline]
            Rendered pipelines
        """
        cells = self.build_matrix()
        pipelines = []
        for provider in providers:
            renderer = get_renderer(provider)
            path = self.repo_root / renderer.output_path
            document = renderer.render(cells, self.config)
            header = renderer.header(self._header_reference(path))
            pipelines.append(
                GeneratedPipeline(
                    provider=renderer.provider,
                    path=path,
                    content=dump_yaml(document, header=header),
                ),
            )
            logger.debug("Rendered %s pipeline for %s", renderer.provider.value, path)
        return pipelines

    def find_stale(self, providers: Iterable[Provider]) -> list[GeneratedPipeline]:
        """Return the pipelines whose files are missing or out of date."""
        return [p for p in self.render(providers) if not p.is_current()]

    def write(self, pipelines: Iterable[GeneratedPipeline]) -> list[Path]:
        """Write rendered pipelines to disk.

        Parameters
        ----------
        pipelines : Iterable[GeneratedPipeline]
            Pipelines to write

        Returns
        -------
        list[Path]
            Paths that were written
        """
        written = []
        for pipeline in pipelines:
            safe_write_text(pipeline.path, pipeline.content)
            logger.info("Wrote %s pipeline to %s", pipeline.provider.value, pipeline.path)
            written.append(pipeline.path)
        return written

    def generate(self, providers: Iterable[Provider]) -> list[GeneratedPipeline]:
        """Render and write pipelines for the given providers.

        Parameters
        ----------
        providers : Iterable[Provider]
            Providers to generate

        Returns
        -------
        list[GeneratedPipeline]
            The pipelines that were written
        """
        pipelines = self.render(providers)
        self.write(pipelines)
        return pipelines
