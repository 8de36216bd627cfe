"""Docker image matrix core for dockmatrix.

Categorizes the versions of two independent axes and derives the build matrix
and per-image tag sets that the pipeline renderers consume. This package has no
YAML or CLI dependency.
"""

from dockmatrix.errors import (
    ConfigurationError,
    DockmatrixError,
    EmptyAxisError,
    MalformedVersionError,
)
from dockmatrix.matrix import build_matrix, generate_matrix
from dockmatrix.models import AxisPrefixes, MatrixCell, SemanticVersion
from dockmatrix.tags import generate_tags, qualified_name
from dockmatrix.versions import categorize, parse_version

__version__ = "0.3.0"

__all__ = [
    "AxisPrefixes",
    "ConfigurationError",
    "DockmatrixError",
    "EmptyAxisError",
    "MalformedVersionError",
    "MatrixCell",
    "SemanticVersion",
    "build_matrix",
    "categorize",
    "generate_matrix",
    "generate_tags",
    "parse_version",
    "qualified_name",
]
