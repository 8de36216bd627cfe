"""Value types shared by the categorizer, tag generator and matrix builder."""

from dataclasses import dataclass


@dataclass(frozen=True)
class SemanticVersion:
    """A parsed ``major.minor.patch`` version and its tagging flags.

    The flags are decided once by :func:`dockmatrix.versions.categorize` and
    only make sense relative to the axis the version was categorized in.
    """

    major: int
    minor: int
    patch: int
    is_major_representative: bool = False
    is_minor_representative: bool = False
    is_latest: bool = False

    @property
    def is_patch_representative(self) -> bool:
        """Every version stands for its own exact patch."""
        return True

    @property
    def key(self) -> tuple[int, int, int]:
        """Numeric ordering key."""
        return (self.major, self.minor, self.patch)

    @property
    def full(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"

    @property
    def major_minor(self) -> str:
        return f"{self.major}.{self.minor}"

    def __str__(self) -> str:
        return self.full


@dataclass(frozen=True)
class AxisPrefixes:
    """Tag prefixes for the primary and secondary axis (e.g. ``rb`` and ``rs``)."""

    primary: str
    secondary: str


@dataclass(frozen=True)
class MatrixCell:
    """One image of the build matrix.

    ``tags`` is ordered and is never de-duplicated; renderers rely on the
    position of each tag.
    """

    primary: SemanticVersion
    secondary: SemanticVersion
    job_identifier: str
    tags: tuple[str, ...]

    def to_dict(self) -> dict[str, object]:
        """Return a plain mapping suitable for JSON/YAML output."""
        return {
            "job": self.job_identifier,
            "primary": self.primary.full,
            "secondary": self.secondary.full,
            "tags": list(self.tags),
        }
