"""Command groups for dockmatrix CLI."""
