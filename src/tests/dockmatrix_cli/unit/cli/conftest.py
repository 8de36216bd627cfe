"""Fixtures for CLI unit tests."""

import pytest
from click.testing import CliRunner

from dockmatrix_cli.cli import cli


@pytest.fixture
def cli_runner():
    """Provide Click CLI runner for testing commands."""
    return CliRunner()


@pytest.fixture
def run_cli(cli_runner, project_root):
    """Invoke the CLI against the sample project root.

    Returns
    -------
    Callable[..., Result]
        Runner taking the command-line arguments after ``--root``
    """

    def _run(*args: str, root=None):
        target = root if root is not None else project_root
        return cli_runner.invoke(cli, ["--root", str(target), *args])

    return _run
