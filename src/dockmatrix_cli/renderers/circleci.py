"""CircleCI ``config.yml`` renderer."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from dockmatrix_cli.core.constants import Provider
from dockmatrix_cli.renderers.base import PipelineRenderer

if TYPE_CHECKING:
    from dockmatrix import MatrixCell
    from dockmatrix_cli.config import ProjectConfig

EXECUTOR_IMAGE = "circleci/buildpack-deps"


class CircleCIRenderer(PipelineRenderer):
    """Renders one build-and-publish job per cell plus a branch-filtered workflow."""

    provider = Provider.CIRCLECI

    def build_command(self, cell: MatrixCell, config: ProjectConfig) -> str:
        return self.render_template(
            "circleci_build.sh.j2",
            dockerfile_command=self.dockerfile_command(cell, config),
            image_refs=self.image_refs(cell, config),
            build_arg=config.secondary_build_arg,
            build_version=cell.secondary.full,
        )

    def publish_command(self, cell: MatrixCell, config: ProjectConfig) -> str:
        return self.render_template(
            "circleci_publish.sh.j2",
            image_refs=self.image_refs(cell, config),
        )

    def render_job(self, cell: MatrixCell, config: ProjectConfig) -> dict[str, Any]:
        return {
            "docker": [{"image": EXECUTOR_IMAGE}],
            "steps": [
                "checkout",
                "setup_remote_docker",
                {
                    "run": {
                        "name": "Build Docker image",
                        "command": self.build_command(cell, config),
                    },
                },
                {
                    "run": {
                        "name": "Publish Docker image to Docker Hub",
                        "command": self.publish_command(cell, config),
                    },
                },
            ],
        }

    def render(
        self,
        cells: Sequence[MatrixCell],
        config: ProjectConfig,
    ) -> dict[str, Any]:
        branch_filter = {"filters": {"branches": {"only": config.branch}}}
        return {
            "version": 2,
            "jobs": {self.job_key(cell): self.render_job(cell, config) for cell in cells},
            "workflows": {
                "version": 2,
                f"build-{config.branch}": {
                    "jobs": [
                        {self.job_key(cell): dict(branch_filter)} for cell in cells
                    ],
                },
            },
        }
