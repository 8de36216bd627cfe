"""Project configuration for dockmatrix CLI."""

from .loader import (
    AxisConfig,
    DockerfileConfig,
    ProjectConfig,
    load_project_config,
    parse_project_config,
)

__all__ = [
    "AxisConfig",
    "DockerfileConfig",
    "ProjectConfig",
    "load_project_config",
    "parse_project_config",
]
