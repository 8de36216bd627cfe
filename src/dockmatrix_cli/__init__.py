"""Command line interface for dockmatrix."""

from dockmatrix import __version__

__all__ = ["__version__"]
