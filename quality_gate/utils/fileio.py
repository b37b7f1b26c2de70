"""Basic file IO helpers."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Union

import yaml

from quality_gate.errors import ConfigurationError, ReadError


def read_yaml_file(path: Path) -> Any:
    """Return the parsed YAML (or JSON) document, or ``None`` if the file is missing."""

    if not path.exists():
        return None
    try:
        with path.open("r", encoding="utf-8") as handle:
            return yaml.safe_load(handle)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Cannot parse {path}: {exc}") from exc
    except OSError as exc:
        raise ConfigurationError(f"Cannot read {path}: {exc.strerror or exc}") from exc


def read_source_file(path: Union[str, Path], encoding: str = "utf-8") -> str:
    """Return the raw file contents with line endings left untouched."""

    try:
        with open(path, "r", encoding=encoding, newline="") as handle:
            return handle.read()
    except UnicodeDecodeError as exc:
        raise ReadError(str(path), f"not valid {encoding} ({exc.reason})") from exc
    except OSError as exc:
        raise ReadError(str(path), exc.strerror or str(exc)) from exc
