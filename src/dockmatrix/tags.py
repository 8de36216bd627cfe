"""Docker tag derivation for a single matrix cell."""

from dockmatrix.models import AxisPrefixes, SemanticVersion

LATEST_TAG = "latest"


def _tag(
    prefixes: AxisPrefixes,
    primary_label: str,
    secondary_label: str,
) -> str:
    return f"{prefixes.primary}{primary_label}-{prefixes.secondary}{secondary_label}"


def qualified_name(
    primary: SemanticVersion,
    secondary: SemanticVersion,
    prefixes: AxisPrefixes,
) -> str:
    """Return the fully-qualified ``<pA>M.m.p-<pB>M.m.p`` name of a cell."""
    return _tag(prefixes, primary.full, secondary.full)


def generate_tags(
    primary: SemanticVersion,
    secondary: SemanticVersion,
    prefixes: AxisPrefixes,
) -> list[str]:
    """Return the ordered tag list for the image built from a version pair.

    The order is fixed: fully-qualified, primary truncated, secondary truncated,
    both truncated, ``latest``. Tags are not de-duplicated.

    Parameters
    ----------
    primary : SemanticVersion
        Categorized primary-axis version
    secondary : SemanticVersion
        Categorized secondary-axis version
    prefixes : AxisPrefixes
        Tag prefixes for both axes

    Returns
    -------
    list[str]
        Between one and five tags
    """
    tags = [qualified_name(primary, secondary, prefixes)]

    if primary.is_minor_representative:
        tags.append(_tag(prefixes, primary.major_minor, secondary.full))
    if secondary.is_minor_representative:
        tags.append(_tag(prefixes, primary.full, secondary.major_minor))
    if primary.is_minor_representative and secondary.is_minor_representative:
        tags.append(_tag(prefixes, primary.major_minor, secondary.major_minor))

    if primary.is_latest and secondary.is_latest:
        tags.append(LATEST_TAG)

    return tags
