"""Read-only lookup table from rule identifier to rule instance."""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Iterable, Iterator, Mapping, Optional, Tuple

from quality_gate.errors import ConfigurationError, RuleNotFound
from quality_gate.syntax import AstProvider

from . import Rule
from .no_any import NoAnyRule
from .no_eval import NoEvalRule


class RuleRegistry:
    """Immutable ``name -> Rule`` mapping, built once at startup.

    There is no runtime registration; construct a new registry to change the
    available rules (tests pass their own fakes this way).
    """

    def __init__(self, rules: Mapping[str, Rule]) -> None:
        self._rules: Mapping[str, Rule] = MappingProxyType(dict(rules))

    @classmethod
    def from_rules(cls, rules: Iterable[Rule]) -> "RuleRegistry":
        table: Dict[str, Rule] = {}
        for rule in rules:
            if rule.name in table:
                raise ConfigurationError(f"Duplicate rule name: {rule.name}")
            table[rule.name] = rule
        return cls(table)

    def get(self, name: str) -> Rule:
        try:
            return self._rules[name]
        except KeyError:
            raise RuleNotFound(name) from None

    def resolve(self, names: Iterable[str]) -> Tuple[Rule, ...]:
        """Return the rules for ``names`` in the requested order."""

        return tuple(self.get(name) for name in names)

    def names(self) -> Tuple[str, ...]:
        return tuple(self._rules)

    def __contains__(self, name: object) -> bool:
        return name in self._rules

    def __iter__(self) -> Iterator[str]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)


def default_registry(provider: Optional[AstProvider] = None) -> RuleRegistry:
    """Registry holding every rule shipped with the package."""

    return RuleRegistry.from_rules(
        [
            NoAnyRule(provider),
            NoEvalRule(provider),
        ]
    )
