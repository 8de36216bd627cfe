"""Exception hierarchy for dockmatrix."""


class DockmatrixError(Exception):
    """Base class for all dockmatrix errors."""


class ConfigurationError(DockmatrixError):
    """Raised when the versions configuration is structurally invalid."""


class MalformedVersionError(DockmatrixError):
    """Raised when a version string is not ``<major>.<minor>.<patch>``.

    Parameters
    ----------
    raw : str
        The offending version string
    axis : str | None
        Name of the axis the string belongs to, if known
    """

    def __init__(self, raw: object, axis: str | None = None) -> None:
        self.raw = raw
        self.axis = axis
        where = f" in axis '{axis}'" if axis else ""
        super().__init__(
            f"Malformed version {raw!r}{where}: expected <major>.<minor>.<patch>",
        )


class EmptyAxisError(DockmatrixError):
    """Raised when an axis has no versions to build."""

    def __init__(self, axis: str | None = None) -> None:
        self.axis = axis
        name = f"'{axis}'" if axis else "(unnamed)"
        super().__init__(f"Axis {name} has no versions; the build matrix would be empty")
