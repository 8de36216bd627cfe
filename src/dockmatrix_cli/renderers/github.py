"""GitHub Actions workflow renderer."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from dockmatrix_cli.core.constants import Provider
from dockmatrix_cli.renderers.base import PipelineRenderer

if TYPE_CHECKING:
    from dockmatrix import MatrixCell
    from dockmatrix_cli.config import ProjectConfig

WORKFLOW_NAME = "build"
RUNNER = "ubuntu-latest"


class GitHubActionsRenderer(PipelineRenderer):
    """Renders a push-triggered workflow using the docker/* actions.

    Job ids may not contain dots, so they are replaced with underscores.
    """

    provider = Provider.GITHUB

    def job_key(self, cell: MatrixCell) -> str:
        return cell.job_identifier.replace(".", "_")

    def render_job(self, cell: MatrixCell, config: ProjectConfig) -> dict[str, Any]:
        return {
            "runs-on": RUNNER,
            "concurrency": f"{config.primary.name}-{cell.primary.full}-concurrency-group",
            "steps": [
                {"uses": "actions/checkout@v3"},
                {"uses": "docker/setup-qemu-action@v2"},
                {"uses": "docker/setup-buildx-action@v2"},
                {
                    "uses": "docker/login-action@v2",
                    "with": {
                        "username": "${{ secrets.DOCKERHUB_USERNAME }}",
                        "password": "${{ secrets.DOCKERHUB_TOKEN }}",
                    },
                },
                {
                    "name": "Generate dockerfile",
                    "run": self.dockerfile_command(cell, config),
                },
                {
                    "uses": "docker/build-push-action@v3",
                    "with": {
                        "context": ".",
                        "push": True,
                        "tags": ",".join(self.image_refs(cell, config)),
                        "build-args": (
                            f"{config.secondary_build_arg}={cell.secondary.full}"
                        ),
                    },
                },
            ],
        }

    def render(
        self,
        cells: Sequence[MatrixCell],
        config: ProjectConfig,
    ) -> dict[str, Any]:
        return {
            "name": WORKFLOW_NAME,
            "on": {"push": {"branches": [config.branch]}},
            "jobs": {self.job_key(cell): self.render_job(cell, config) for cell in cells},
        }
