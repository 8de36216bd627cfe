"""Safe YAML file operations for dockmatrix CLI.

The core dockmatrix package does not depend on PyYAML; all YAML reading and
writing goes through this module.
"""

import contextlib
import tempfile
from pathlib import Path
from typing import Any

import yaml


class YamlOperationError(Exception):
    """Raised when YAML file operations fail."""


class _PipelineDumper(yaml.SafeDumper):
    """Safe dumper that writes multi-line strings as literal blocks."""


def _represent_str(dumper: yaml.SafeDumper, data: str) -> yaml.ScalarNode:
    if "\n" in data:
        return dumper.represent_scalar("tag:yaml.org,2002:str", data, style="|")
    return dumper.represent_scalar("tag:yaml.org,2002:str", data)


_PipelineDumper.add_representer(str, _represent_str)
# Pipelines are small documents; anchors only make them harder to read
_PipelineDumper.ignore_aliases = lambda self, data: True  # type: ignore[method-assign]


def safe_read_yaml(path: Path) -> dict[str, Any]:
    """Safely read YAML file with error handling.

    Parameters
    ----------
    path : Path
        Path to YAML file

    Returns
    -------
    dict[str, Any]
        Parsed YAML data

    Raises
    ------
    YamlOperationError
        If file cannot be read or parsed
    """
    try:
        if not path.exists():
            msg = f"YAML file does not exist: {path}"
            raise YamlOperationError(msg)

        with path.open(encoding="utf-8") as f:
            data = yaml.safe_load(f)
            return data if data is not None else {}

    except yaml.YAMLError as e:
        msg = f"Invalid YAML in {path}: {e}"
        raise YamlOperationError(msg) from e
    except OSError as e:
        msg = f"Cannot read YAML file {path}: {e}"
        raise YamlOperationError(msg) from e


def dump_yaml(data: Any, header: str | None = None) -> str:
    """Serialize ``data`` to a YAML document, keeping mapping order.

    Parameters
    ----------
    data : Any
        Data to serialize
    header : str | None
        Comment line(s) placed before the document

    Returns
    -------
    str
        YAML text ending with a newline
    """
    body = yaml.dump(
        data,
        Dumper=_PipelineDumper,
        default_flow_style=False,
        sort_keys=False,
        allow_unicode=True,
        width=120,
    )
    if header:
        return f"{header.rstrip()}\n{body}"
    return body


def safe_write_text(path: Path, content: str) -> None:
    """Atomically write text content, creating parent directories.

    Parameters
    ----------
    path : Path
        Destination path
    content : str
        Text to write

    Raises
    ------
    YamlOperationError
        If file cannot be written
    """
    temp_path = None
    try:
        path.parent.mkdir(parents=True, exist_ok=True)

        # Use atomic write to prevent corruption
        with tempfile.NamedTemporaryFile(
            mode="w",
            encoding="utf-8",
            suffix=".yaml",
            dir=path.parent,
            delete=False,
        ) as temp_file:
            temp_path = Path(temp_file.name)
            temp_file.write(content)

        # Atomic move
        temp_path.replace(path)

    except OSError as e:
        # Clean up temp file if it exists
        if temp_path is not None:
            with contextlib.suppress(OSError):
                temp_path.unlink(missing_ok=True)
        msg = f"Cannot write YAML file {path}: {e}"
        raise YamlOperationError(msg) from e


def safe_write_yaml(path: Path, data: Any, header: str | None = None) -> None:
    """Safely write YAML file with atomic operation.

    Parameters
    ----------
    path : Path
        Path to YAML file
    data : Any
        Data to write
    header : str | None
        Comment line(s) placed before the document

    Raises
    ------
    YamlOperationError
        If file cannot be serialized or written
    """
    try:
        content = dump_yaml(data, header=header)
    except yaml.YAMLError as e:
        msg = f"Cannot serialize YAML for {path}: {e}"
        raise YamlOperationError(msg) from e
    safe_write_text(path, content)
