"""Fixtures for dockmatrix CLI tests."""

from pathlib import Path
from typing import Any

import pytest
import yaml

SAMPLE_VERSIONS: dict[str, Any] = {
    "image": "anirbanmu/circleci-ruby-rust",
    "versions": {
        "ruby": ["2.7.0", "2.7.1", "3.0.0"],
        "rust": ["1.50.0"],
    },
}


@pytest.fixture
def sample_versions() -> dict[str, Any]:
    """Return a fresh copy of the sample versions configuration."""
    return yaml.safe_load(yaml.safe_dump(SAMPLE_VERSIONS))


@pytest.fixture
def write_versions(tmp_path):
    """Write a versions.yml into a temporary project root.

    Returns
    -------
    Callable[[dict | str], Path]
        Writer taking a mapping (dumped as YAML) or raw YAML text
    """

    def _write(content: dict[str, Any] | str, name: str = "versions.yml") -> Path:
        path = tmp_path / name
        if isinstance(content, str):
            path.write_text(content, encoding="utf-8")
        else:
            path.write_text(yaml.safe_dump(content, sort_keys=False), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def project_root(tmp_path, write_versions, sample_versions) -> Path:
    """Temporary project root holding the sample versions.yml."""
    write_versions(sample_versions)
    return tmp_path
