"""Version parsing and categorization for a single matrix axis.

Categorization decides which version of an axis stands for its major line, its
minor line and the axis as a whole. Those flags drive the short-form image tags
produced by :mod:`dockmatrix.tags`.
"""

import re
from collections.abc import Callable, Iterable

from dockmatrix.errors import EmptyAxisError, MalformedVersionError
from dockmatrix.models import SemanticVersion
from dockmatrix_logging import get_logger

logger = get_logger(__name__)

VERSION_PATTERN = re.compile(r"([0-9]+)\.([0-9]+)\.([0-9]+)")

VersionKey = tuple[int, int, int]


def parse_version(raw: object, axis: str | None = None) -> VersionKey:
    """Parse a ``major.minor.patch`` string into an integer triple.

    Parameters
    ----------
    raw : object
        Version string from the configuration
    axis : str | None
        Axis name, used in the error message

    Returns
    -------
    tuple[int, int, int]
        The (major, minor, patch) triple

    Raises
    ------
    MalformedVersionError
        If ``raw`` is not a string of three dot-separated non-negative integers
    """
    if not isinstance(raw, str):
        raise MalformedVersionError(raw, axis)

    match = VERSION_PATTERN.fullmatch(raw)
    if match is None:
        raise MalformedVersionError(raw, axis)

    major, minor, patch = (int(part) for part in match.groups())
    return (major, minor, patch)


def _representatives(
    keys: list[VersionKey],
    group_of: Callable[[VersionKey], tuple[int, ...]],
) -> set[VersionKey]:
    """Return the maximum key of every group, grouping in first-seen order."""
    groups: dict[tuple[int, ...], list[VersionKey]] = {}
    for key in keys:
        groups.setdefault(group_of(key), []).append(key)
    return {max(members) for members in groups.values()}


def categorize(
    raw_versions: Iterable[str],
    axis: str | None = None,
) -> list[SemanticVersion]:
    """Categorize the versions of one axis.

    Parameters
    ----------
    raw_versions : Iterable[str]
        Version strings; duplicates are ignored
    axis : str | None
        Axis name, used in log and error messages

    Returns
    -------
    list[SemanticVersion]
        Versions sorted newest first. The newest is flagged latest, the newest of
        every major line is flagged major-representative and the newest of every
        minor line is flagged minor-representative.

    Raises
    ------
    EmptyAxisError
        If no versions were given
    MalformedVersionError
        If any version string does not parse
    """
    raw_list = list(raw_versions)
    if not raw_list:
        raise EmptyAxisError(axis)

    # Parse everything before deciding anything so a bad entry aborts the run
    keys = sorted({parse_version(raw, axis) for raw in raw_list}, reverse=True)

    latest = keys[0]
    major_reps = _representatives(keys, lambda key: key[:1])
    minor_reps = _representatives(keys, lambda key: key[:2])

    logger.debug(
        "Categorized axis %s: %d versions, latest=%s, %d major lines, %d minor lines",
        axis or "<unnamed>",
        len(keys),
        ".".join(map(str, latest)),
        len(major_reps),
        len(minor_reps),
    )

    return [
        SemanticVersion(
            *key,
            is_major_representative=key in major_reps,
            is_minor_representative=key in minor_reps,
            is_latest=key == latest,
        )
        for key in keys
    ]
