"""Rule data model — a pure, stateless ``int -> Outcome`` function.

Whether a rule continues or terminates is fixed by its ``kind`` when it is
built, never discovered at evaluation time.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Literal, Optional, Union

from fizzrail.outcome.models import EMPTY, Continuing, Outcome, Terminal
from fizzrail.outcome.railway import attempt

RuleKind = Literal["divisible", "exact"]

RULE_KINDS: tuple[str, ...] = ("divisible", "exact")


class RuleError(Exception):
    """Raised when a rule is malformed or cannot be found."""


@dataclass(frozen=True)
class Rule:
    """A catalog rule.

    ``divisible`` rules emit ``Continuing(output)`` when ``target`` divides the
    number; ``exact`` rules emit ``Terminal(output)`` when the number equals
    ``target``. Anything else yields ``EMPTY``.

    Equality is structural, so two rules built from the same parameters
    collapse into one when rule sets are merged.
    """

    id: str
    kind: RuleKind
    target: int
    output: str
    name: str = ""

    def __post_init__(self) -> None:
        if self.kind not in RULE_KINDS:
            raise RuleError(f"Rule {self.id}: unknown kind {self.kind!r}")
        if self.kind == "divisible" and self.target == 0:
            raise RuleError(f"Rule {self.id}: divisor must not be zero")
        if not self.name:
            object.__setattr__(self, "name", self.id.replace("_", " ").title())

    @property
    def is_terminal(self) -> bool:
        return self.kind == "exact"

    def __call__(self, number: int) -> Outcome:
        if self.kind == "divisible":
            return Continuing(self.output) if number % self.target == 0 else EMPTY
        return Terminal(self.output) if number == self.target else EMPTY

    def describe(self) -> str:
        if self.kind == "divisible":
            return f"divisible by {self.target} → {self.output!r}"
        return f"exactly {self.target} → stop with {self.output!r}"


@dataclass(frozen=True)
class GuardedRule:
    """Wraps a rule so that any exception it raises becomes a terminal outcome."""

    inner: "RuleLike"

    @property
    def id(self) -> str:
        return rule_id(self.inner)

    def __call__(self, number: int) -> Outcome:
        return attempt(lambda: self.inner(number))


RuleLike = Union[Rule, GuardedRule, Callable[[int], Outcome]]


def divisible(divisor: int, output: str, *, id: Optional[str] = None) -> Rule:
    """Continue with *output* whenever the number is divisible by *divisor*."""
    return Rule(id=id or f"DIVISIBLE_{divisor}", kind="divisible", target=divisor, output=output)


def exact_match(target: int, output: str, *, id: Optional[str] = None) -> Rule:
    """Stop with *output* when the number is exactly *target*."""
    return Rule(id=id or f"EXACT_{target}", kind="exact", target=target, output=output)


def guarded(rule: RuleLike) -> GuardedRule:
    return GuardedRule(rule)


def rule_id(rule: RuleLike) -> str:
    """Best-effort display id for catalog rules and plain callables alike."""
    return getattr(rule, "id", None) or getattr(rule, "__name__", repr(rule))
