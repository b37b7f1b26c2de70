"""Load gate settings from ``.analyzerrc``."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

from .errors import ConfigurationError
from .reporters import DEFAULT_OUTPUT_FILE
from .utils import read_yaml_file
from .walker import DEFAULT_EXTENSION, DEFAULT_MAX_DEPTH, normalize_extension

DEFAULT_CONFIG_FILE = ".analyzerrc"
DEFAULT_RULES = ("noAny", "noEval")
DEFAULT_REPORTERS = ("console",)


@dataclass(frozen=True)
class GateConfig:
    rules: Tuple[str, ...] = DEFAULT_RULES
    reporters: Tuple[str, ...] = DEFAULT_REPORTERS
    output_file: str = DEFAULT_OUTPUT_FILE
    extension: str = DEFAULT_EXTENSION
    max_workers: Optional[int] = None
    max_depth: int = DEFAULT_MAX_DEPTH


def load_config(path: Union[str, Path, None] = None) -> GateConfig:
    """Read the config file at ``path``.

    Without an explicit ``path`` a missing ``.analyzerrc`` yields the
    defaults; an explicit path that does not exist is an error.
    """

    config_path = Path(path) if path is not None else Path(DEFAULT_CONFIG_FILE)
    raw = read_yaml_file(config_path)
    if raw is None:
        if path is not None and not config_path.exists():
            raise ConfigurationError(f"Config file not found: {config_path}")
        return GateConfig()
    if not isinstance(raw, dict):
        raise ConfigurationError(f"Config at {config_path} must be a mapping")
    return parse_config(raw)


def parse_config(raw: Dict[str, Any]) -> GateConfig:
    rules = _rule_names(raw.get("rules", list(DEFAULT_RULES)))
    reporters = _ensure_string_list(raw.get("reporters", list(DEFAULT_REPORTERS)), "reporters")

    output_file = _optional_str(_first(raw, "outputFile", "output_file")) or DEFAULT_OUTPUT_FILE
    extension = _optional_str(raw.get("extension")) or DEFAULT_EXTENSION
    try:
        extension = normalize_extension(extension)
    except ValueError as exc:
        raise ConfigurationError(str(exc)) from exc

    max_workers = _optional_positive_int(_first(raw, "maxWorkers", "max_workers"), "maxWorkers")
    max_depth = _optional_positive_int(_first(raw, "maxDepth", "max_depth"), "maxDepth") or DEFAULT_MAX_DEPTH

    return GateConfig(
        rules=tuple(rules),
        reporters=tuple(reporters),
        output_file=output_file,
        extension=extension,
        max_workers=max_workers,
        max_depth=max_depth,
    )


def _rule_names(value: object) -> List[str]:
    """Accept plain names or ``{name, enabled}`` objects; drop disabled entries."""

    if not isinstance(value, list):
        raise ConfigurationError("'rules' must be a list")
    names: List[str] = []
    for item in value:
        if isinstance(item, dict):
            name = _optional_str(item.get("name"))
            if not name:
                raise ConfigurationError("Rule entry is missing 'name'")
            if not bool(item.get("enabled", True)):
                continue
            names.append(name)
        elif isinstance(item, str) and item.strip():
            names.append(item.strip())
        else:
            raise ConfigurationError(f"Invalid rule entry: {item!r}")
    return names


def _first(raw: Dict[str, Any], *keys: str) -> object:
    for key in keys:
        if key in raw:
            return raw[key]
    return None


def _optional_str(value: object) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _optional_positive_int(value: object, key: str) -> Optional[int]:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ConfigurationError(f"'{key}' must be a positive integer")
    return value


def _ensure_string_list(value: object, key: str) -> List[str]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise ConfigurationError(f"'{key}' must be a list of strings")
    return [str(item).strip() for item in value]
