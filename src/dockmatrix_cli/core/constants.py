"""Constants and enums for dockmatrix CLI."""

from enum import Enum

from dockmatrix_logging.config import LOG_LEVEL_ENV_VAR


class LogLevel(str, Enum):
    """Supported log levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


ALL_LOG_LEVELS = [LogLevel.DEBUG, LogLevel.INFO, LogLevel.WARNING, LogLevel.ERROR]


class ExitCode:
    """Exit codes for CLI operations."""

    SUCCESS = 0
    GENERAL_ERROR = 1
    NOT_FOUND = 2
    CONFIG_ERROR = 3
    PERMISSION_ERROR = 4


class Icons:
    """Unicode icons for CLI output headers and status lines."""

    ERROR = "❌"
    INFO = "📄"

    BUILD = "🔨"
    DOCKER = "🐳"
    CHECK = "✓"
    LIST = "📋"
    ARROW_RIGHT = "→"


class EnvVars:
    """Environment variable names."""

    LOG_LEVEL = LOG_LEVEL_ENV_VAR
    ROOT = "DOCKMATRIX_ROOT"

    # CI/CD environment detection variables
    CI_ENVIRONMENT_VARS: tuple[str, ...] = (
        "CI",
        "GITHUB_ACTIONS",
        "GITLAB_CI",
        "JENKINS_HOME",
        "CIRCLECI",
        "TRAVIS",
        "BUILDKITE",
        "DRONE",
        "TEAMCITY_VERSION",
        "TF_BUILD",
    )


class Provider(str, Enum):
    """CI providers that pipelines can be generated for."""

    CIRCLECI = "circleci"
    GITHUB = "github"


class OutputFormat(str, Enum):
    """Output format options for matrix listings."""

    TEXT = "text"
    JSON = "json"
    YAML = "yaml"
    GITHUB = "github"


class Defaults:
    """Default values for ``versions.yml`` keys."""

    BRANCH = "master"
    DOCKERFILE_TEMPLATE = "Dockerfile.template"
    DOCKERFILE_PLACEHOLDER = "REPLACE_ME_WITH_RIGHT_CIRCLE_IMAGE"

    PRIMARY_AXIS = "ruby"
    PRIMARY_PREFIX = "rb"
    SECONDARY_AXIS = "rust"
    SECONDARY_PREFIX = "rs"
    SECONDARY_BUILD_ARG = "rust_version"

    BASE_IMAGES = {
        Provider.CIRCLECI: "circleci/ruby",
        Provider.GITHUB: "cimg/ruby",
    }


GENERATED_HEADER = (
    "# THIS IS A GENERATED FILE. DO NOT EDIT MANUALLY. "
    "EDIT {config} & RUN `dockmatrix generate` TO REGENERATE."
)
