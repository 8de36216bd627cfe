"""Loader for the ``versions.yml`` project configuration."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from dockmatrix import AxisPrefixes, ConfigurationError
from dockmatrix_cli.core.constants import Defaults, Provider
from dockmatrix_cli.core.yaml import safe_read_yaml
from dockmatrix_logging import get_cli_logger

logger = get_cli_logger(__name__)


@dataclass(frozen=True)
class AxisConfig:
    """One version axis of the build matrix."""

    name: str
    prefix: str
    versions: tuple[str, ...]
    build_arg: str | None = None


@dataclass(frozen=True)
class DockerfileConfig:
    """Dockerfile template and the placeholder replaced with the base image."""

    template: str = Defaults.DOCKERFILE_TEMPLATE
    placeholder: str = Defaults.DOCKERFILE_PLACEHOLDER


@dataclass(frozen=True)
class ProjectConfig:
    """Parsed ``versions.yml``."""

    image: str
    primary: AxisConfig
    secondary: AxisConfig
    branch: str = Defaults.BRANCH
    dockerfile: DockerfileConfig = field(default_factory=DockerfileConfig)
    base_images: dict[Provider, str] = field(
        default_factory=lambda: dict(Defaults.BASE_IMAGES),
    )
    source: Path | None = None

    @property
    def prefixes(self) -> AxisPrefixes:
        """Tag prefixes of both axes."""
        return AxisPrefixes(primary=self.primary.prefix, secondary=self.secondary.prefix)

    @property
    def secondary_build_arg(self) -> str:
        """Docker build argument receiving the secondary axis version."""
        return self.secondary.build_arg or f"{self.secondary.name}_version"

    def base_image(self, provider: Provider) -> str:
        """Get the primary-axis base image used by a provider.

        Parameters
        ----------
        provider : Provider
            CI provider

        Returns
        -------
        str
            Image repository, without tag

        Raises
        ------
        ConfigurationError
            If no base image is configured for the provider
        """
        try:
            return self.base_images[provider]
        except KeyError:
            msg = f"No base image configured for provider '{provider.value}'"
            raise ConfigurationError(msg) from None


def _require_mapping(value: Any, where: str) -> dict[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        msg = f"'{where}' must be a mapping, got {type(value).__name__}"
        raise ConfigurationError(msg)
    return value


def _require_str(value: Any, where: str) -> str:
    if not isinstance(value, str) or not value.strip():
        msg = f"'{where}' must be a non-empty string"
        raise ConfigurationError(msg)
    return value.strip()


def _parse_axis(
    data: dict[str, Any],
    versions: dict[str, Any],
    role: str,
    default_name: str,
    default_prefix: str,
    default_build_arg: str | None = None,
) -> AxisConfig:
    """Build an :class:`AxisConfig` from the ``axes.<role>`` and ``versions`` sections."""
    axis_data = _require_mapping(data.get(role), f"axes.{role}")
    name = _require_str(axis_data.get("name", default_name), f"axes.{role}.name")
    prefix = axis_data.get("prefix", default_prefix if name == default_name else name)
    if not isinstance(prefix, str):
        msg = f"'axes.{role}.prefix' must be a string"
        raise ConfigurationError(msg)

    build_arg = axis_data.get("build_arg")
    if build_arg is None and name == default_name:
        build_arg = default_build_arg
    if build_arg is not None:
        build_arg = _require_str(build_arg, f"axes.{role}.build_arg")

    if name not in versions:
        msg = f"Missing 'versions.{name}' list for the {role} axis"
        raise ConfigurationError(msg)
    raw = versions[name]
    if not isinstance(raw, list):
        msg = f"'versions.{name}' must be a list of version strings"
        raise ConfigurationError(msg)

    return AxisConfig(
        name=name,
        prefix=prefix,
        versions=tuple(raw),
        build_arg=build_arg,
    )


def parse_project_config(data: Any, source: Path | None = None) -> ProjectConfig:
    """Validate raw ``versions.yml`` data and build a :class:`ProjectConfig`.

    Version strings are kept as-is; they are parsed by the categorizer so its
    errors can name the axis and the offending entry.

    Parameters
    ----------
    data : Any
        Parsed YAML document
    source : Path | None
        File the data came from

    Returns
    -------
    ProjectConfig
        Validated configuration

    Raises
    ------
    ConfigurationError
        If a required key is missing or has the wrong shape
    """
    if not isinstance(data, dict):
        msg = "versions configuration must be a mapping at the top level"
        raise ConfigurationError(msg)

    image = _require_str(data.get("image"), "image")
    branch = _require_str(data.get("branch", Defaults.BRANCH), "branch")
    versions = _require_mapping(data.get("versions"), "versions")
    axes = _require_mapping(data.get("axes"), "axes")

    primary = _parse_axis(
        axes,
        versions,
        "primary",
        Defaults.PRIMARY_AXIS,
        Defaults.PRIMARY_PREFIX,
    )
    secondary = _parse_axis(
        axes,
        versions,
        "secondary",
        Defaults.SECONDARY_AXIS,
        Defaults.SECONDARY_PREFIX,
        Defaults.SECONDARY_BUILD_ARG,
    )
    if primary.name == secondary.name:
        msg = f"Both axes are named '{primary.name}'"
        raise ConfigurationError(msg)

    dockerfile_data = _require_mapping(data.get("dockerfile"), "dockerfile")
    dockerfile = DockerfileConfig(
        template=_require_str(
            dockerfile_data.get("template", Defaults.DOCKERFILE_TEMPLATE),
            "dockerfile.template",
        ),
        placeholder=_require_str(
            dockerfile_data.get("placeholder", Defaults.DOCKERFILE_PLACEHOLDER),
            "dockerfile.placeholder",
        ),
    )

    base_images = dict(Defaults.BASE_IMAGES)
    for key, value in _require_mapping(data.get("base_images"), "base_images").items():
        try:
            provider = Provider(key)
        except ValueError:
            msg = f"Unknown provider '{key}' in base_images"
            raise ConfigurationError(msg) from None
        base_images[provider] = _require_str(value, f"base_images.{key}")

    return ProjectConfig(
        image=image,
        primary=primary,
        secondary=secondary,
        branch=branch,
        dockerfile=dockerfile,
        base_images=base_images,
        source=source,
    )


def load_project_config(path: Path) -> ProjectConfig:
    """Load and validate a ``versions.yml`` file.

    Parameters
    ----------
    path : Path
        Path to the configuration file

    Returns
    -------
    ProjectConfig
        Validated configuration

    Raises
    ------
    YamlOperationError
        If the file is missing, unreadable or not valid YAML
    ConfigurationError
        If the content is structurally invalid
    """
    logger.debug("Loading versions configuration from %s", path)
    return parse_project_config(safe_read_yaml(path), source=path)
