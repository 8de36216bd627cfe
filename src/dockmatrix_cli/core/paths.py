"""Path constants and project root discovery for dockmatrix CLI."""

import os
from pathlib import Path

from dockmatrix_cli.core.constants import EnvVars, Provider


class ProjectPaths:
    """Standard project paths relative to the project root."""

    VERSIONS_YAML = Path("versions.yml")
    CIRCLECI_CONFIG = Path(".circleci/config.yml")
    GITHUB_WORKFLOW = Path(".github/workflows/docker-hub.yml")

    @staticmethod
    def pipeline_output(provider: Provider) -> Path:
        """Get the generated pipeline path for a provider.

        Parameters
        ----------
        provider : Provider
            CI provider

        Returns
        -------
        Path
            Output path relative to the project root
        """
        if provider is Provider.CIRCLECI:
            return ProjectPaths.CIRCLECI_CONFIG
        return ProjectPaths.GITHUB_WORKFLOW


def detect_project_root(start: Path | None = None) -> Path:
    """Locate the project root.

    ``DOCKMATRIX_ROOT`` wins when set. Otherwise the directory tree is walked up
    from ``start`` (default: cwd) to the first directory holding a
    ``versions.yml`` or a ``.git`` entry. Falls back to ``start``.

    Parameters
    ----------
    start : Path | None
        Directory to start searching from

    Returns
    -------
    Path
        Resolved project root
    """
    env_root = os.environ.get(EnvVars.ROOT)
    if env_root:
        return Path(env_root).expanduser().resolve()

    origin = (start or Path.cwd()).resolve()
    for candidate in (origin, *origin.parents):
        if (candidate / ProjectPaths.VERSIONS_YAML).exists():
            return candidate
        if (candidate / ".git").exists():
            return candidate
    return origin
