"""Rule registry — loads built-in and custom rules, builds ordered rule sets."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

import yaml

from fizzrail.config.schema import FizzRailConfig
from fizzrail.rules.models import Rule, RuleError, RuleLike, guarded

CUSTOM_RULES_DIRNAME = ".fizzrail-rules"


def merge_rules(base: Iterable[RuleLike], extra: Iterable[RuleLike]) -> Tuple[RuleLike, ...]:
    """Order-preserving union: *base* first, then unseen rules from *extra*."""
    merged: List[RuleLike] = []
    for rule in (*base, *extra):
        if rule not in merged:
            merged.append(rule)
    return tuple(merged)


def _key(rule_id: str) -> str:
    """Registry key for *rule_id*; ids are matched case-insensitively."""
    return rule_id.strip().upper()


class RuleRegistry:
    """Catalog of named rules, in registration order."""

    def __init__(self) -> None:
        self._rules: Dict[str, Rule] = {}

    # ---- registration ----

    def register(self, rule: Rule) -> None:
        self._rules[_key(rule.id)] = rule

    def register_many(self, rules: Iterable[Rule]) -> None:
        for r in rules:
            self.register(r)

    # ---- queries ----

    @property
    def all_rules(self) -> List[Rule]:
        return list(self._rules.values())

    def get(self, rule_id: str) -> Optional[Rule]:
        return self._rules.get(_key(rule_id))

    def select(self, rule_ids: Sequence[str]) -> Tuple[Rule, ...]:
        """Return the rules named by *rule_ids*, in exactly that order."""
        selected: List[Rule] = []
        for rid in rule_ids:
            rule = self.get(rid)
            if rule is None:
                raise RuleError(f"Unknown rule: {rid}")
            selected.append(rule)
        return tuple(selected)

    # ---- config ----

    def build_rule_set(self, config: FizzRailConfig) -> Tuple[RuleLike, ...]:
        """Ordered rule set for a game: ``rules.use`` minus ``rules.disable``."""
        from fizzrail.rules.builtin import extended_game

        if config.rules.use:
            rules: Tuple[RuleLike, ...] = self.select(config.rules.use)
        else:
            rules = extended_game()

        unknown = [rid for rid in config.rules.disable if self.get(rid) is None]
        if unknown:
            raise RuleError(f"Cannot disable unknown rule(s): {', '.join(unknown)}")
        disabled = {_key(rid) for rid in config.rules.disable}
        rules = tuple(r for r in rules if _key(r.id) not in disabled)

        if config.rules.guard:
            rules = tuple(guarded(r) for r in rules)
        return rules

    # ---- custom rule loading ----

    def load_custom_rules(self, directory: Path) -> int:
        """Load YAML rule files from *directory*. Returns count loaded."""
        count = 0
        if not directory.is_dir():
            return 0
        for path in sorted(directory.iterdir()):
            if path.suffix in (".yaml", ".yml"):
                count += self._load_yaml_rules(path)
        return count

    def _load_yaml_rules(self, path: Path) -> int:
        with open(path) as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as exc:
                raise RuleError(f"Invalid rule file {path.name}: {exc}") from exc
        if data is None:
            return 0
        if not isinstance(data, list):
            data = [data]
        count = 0
        for entry in data:
            try:
                rule = Rule(
                    id=entry["id"],
                    kind=entry.get("kind", "divisible"),
                    target=int(entry["target"]),
                    output=str(entry["output"]),
                    name=entry.get("name", ""),
                )
            except (KeyError, TypeError, ValueError) as exc:
                raise RuleError(f"Malformed rule in {path.name}: {exc!r}") from exc
            self.register(rule)
            count += 1
        return count


def build_registry(root: Path) -> RuleRegistry:
    """Create a registry holding the built-in rules plus ``.fizzrail-rules/``."""
    from fizzrail.rules.builtin import ALL_BUILTIN_RULES

    registry = RuleRegistry()
    registry.register_many(ALL_BUILTIN_RULES)
    registry.load_custom_rules(root / CUSTOM_RULES_DIRNAME)
    return registry
