"""Root pytest configuration and shared fixtures for the dockmatrix test suite."""

import logging
import sys
from pathlib import Path

import pytest

# Add src directory to path for imports
src_path = Path(__file__).parent.parent
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from dockmatrix import AxisPrefixes  # noqa: E402
from dockmatrix_cli.core.constants import EnvVars  # noqa: E402


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: fast isolated tests")
    config.addinivalue_line(
        "markers",
        "integration: tests that exercise several packages together",
    )


@pytest.fixture
def prefixes() -> AxisPrefixes:
    """Generic axis prefixes used by the core tests."""
    return AxisPrefixes(primary="prefA", secondary="prefB")


@pytest.fixture
def ruby_rust_prefixes() -> AxisPrefixes:
    """Prefixes of the default ruby/rust project layout."""
    return AxisPrefixes(primary="rb", secondary="rs")


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch):
    """Keep host environment variables from leaking into tests."""
    monkeypatch.delenv(EnvVars.ROOT, raising=False)
    monkeypatch.delenv(EnvVars.LOG_LEVEL, raising=False)


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers installed by CLI invocations once a test finishes."""
    root = logging.getLogger()
    root_handlers = root.handlers[:]
    root_level = root.level
    yield
    for name in ("dockmatrix", "dockmatrix_cli"):
        package_logger = logging.getLogger(name)
        for handler in package_logger.handlers[:]:
            package_logger.removeHandler(handler)
        package_logger.setLevel(logging.NOTSET)
        package_logger.propagate = True
    root.handlers[:] = root_handlers
    root.setLevel(root_level)
