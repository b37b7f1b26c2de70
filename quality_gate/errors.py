"""Error taxonomy shared by the engine, the configuration layer and the CLI."""

from __future__ import annotations

from typing import Optional


class QualityGateError(Exception):
    """Base class for every error raised by the engine."""


class ConfigurationError(QualityGateError, ValueError):
    """Unusable configuration. Fatal: raised before any file is processed."""


class RuleNotFound(ConfigurationError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Rule '{name}' is not registered")
        self.name = name


class ReporterNotFound(ConfigurationError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Reporter '{name}' is not registered")
        self.name = name


class DiscoveryError(QualityGateError):
    """A directory could not be listed; its subtree is left out of the run."""

    kind = "discovery"

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Cannot list directory {path}: {reason}")
        self.path = path
        self.reason = reason
        self.rule_name: Optional[str] = None


class ReadError(QualityGateError):
    """A discovered file could not be read or decoded."""

    kind = "read"

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Cannot read {path}: {reason}")
        self.path = path
        self.reason = reason
        self.rule_name: Optional[str] = None


class RuleExecutionError(QualityGateError):
    """A rule failed on one file. Other rules and files are unaffected."""

    kind = "rule"

    def __init__(self, rule_name: str, path: str, reason: str) -> None:
        super().__init__(f"Rule '{rule_name}' failed on {path}: {reason}")
        self.rule_name: Optional[str] = rule_name
        self.path = path
        self.reason = reason


class ParseError(RuleExecutionError):
    """The file could not be parsed, so the rule had nothing to inspect."""

    kind = "parse"

    def __init__(self, rule_name: str, path: str, reason: str = "source is not syntactically valid") -> None:
        super().__init__(rule_name, path, reason)
