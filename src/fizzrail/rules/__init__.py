"""Rule engine — models, registry, built-in rules."""

from fizzrail.rules.models import Rule, RuleError, divisible, exact_match, guarded
from fizzrail.rules.registry import RuleRegistry, build_registry, merge_rules

__all__ = [
    "Rule",
    "RuleError",
    "RuleRegistry",
    "build_registry",
    "divisible",
    "exact_match",
    "guarded",
    "merge_rules",
]
