"""Build matrix construction."""

from collections.abc import Iterable, Sequence

from dockmatrix.errors import EmptyAxisError
from dockmatrix.models import AxisPrefixes, MatrixCell, SemanticVersion
from dockmatrix.tags import generate_tags, qualified_name
from dockmatrix.versions import categorize
from dockmatrix_logging import get_logger

logger = get_logger(__name__)


def build_matrix(
    primary_versions: Sequence[SemanticVersion],
    secondary_versions: Sequence[SemanticVersion],
    prefixes: AxisPrefixes,
) -> list[MatrixCell]:
    """Pair every primary version with every secondary version.

    Iteration is primary-major: the outer loop walks ``primary_versions`` in the
    given order and the inner loop walks ``secondary_versions``. That order is the
    job declaration order of the generated pipelines.

    Parameters
    ----------
    primary_versions : Sequence[SemanticVersion]
        Categorized primary-axis versions
    secondary_versions : Sequence[SemanticVersion]
        Categorized secondary-axis versions
    prefixes : AxisPrefixes
        Tag prefixes for both axes

    Returns
    -------
    list[MatrixCell]
        ``len(primary_versions) * len(secondary_versions)`` cells

    Raises
    ------
    EmptyAxisError
        If either axis is empty
    """
    if not primary_versions:
        raise EmptyAxisError("primary")
    if not secondary_versions:
        raise EmptyAxisError("secondary")

    cells = [
        MatrixCell(
            primary=primary,
            secondary=secondary,
            job_identifier=qualified_name(primary, secondary, prefixes),
            tags=tuple(generate_tags(primary, secondary, prefixes)),
        )
        for primary in primary_versions
        for secondary in secondary_versions
    ]

    logger.debug(
        "Built matrix of %d cells (%d x %d)",
        len(cells),
        len(primary_versions),
        len(secondary_versions),
    )
    return cells


def generate_matrix(
    primary_raw: Iterable[str],
    secondary_raw: Iterable[str],
    prefixes: AxisPrefixes,
    axis_names: tuple[str, str] = ("primary", "secondary"),
) -> list[MatrixCell]:
    """Categorize both axes and build their matrix.

    Both axes are fully validated before the first cell is built, so a bad
    configuration never yields a partial matrix.
    """
    primary_versions = categorize(primary_raw, axis=axis_names[0])
    secondary_versions = categorize(secondary_raw, axis=axis_names[1])
    return build_matrix(primary_versions, secondary_versions, prefixes)
