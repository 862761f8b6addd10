"""Core evaluator — folds rule outcomes for one number into one string.

Rules are applied strictly in the order given. The first terminal outcome
wins and replaces anything accumulated before it; rules after it are never
invoked. When no rule contributes anything the number itself is returned.

Exceptions raised by a rule propagate unchanged; wrap the rule with
``fizzrail.rules.guarded`` to turn them into terminal outcomes instead.
"""

from __future__ import annotations

import time
from typing import Callable, Iterable, Iterator, Optional, Sequence

from fizzrail.engine.models import GameResult, Verdict
from fizzrail.outcome.models import Continuing, Outcome, Terminal
from fizzrail.outcome.railway import (
    combine,
    fold_fragments,
    take_until_terminal,
    terminal_output,
)
from fizzrail.rules.models import RuleLike, rule_id

Resolver = Callable[[Iterable[RuleLike], int], Outcome]


class EvaluatorError(Exception):
    """Raised when an evaluator is built without rules or with a bad strategy."""


def resolve(rules: Iterable[RuleLike], number: int) -> Outcome:
    """Fold *rules* over *number* without applying the fallback.

    Returns the first terminal outcome, or ``Continuing`` with every fragment
    concatenated in rule order.
    """
    accumulated = ""
    for rule in rules:
        outcome = rule(number)
        if outcome.is_terminal:
            return outcome
        accumulated += outcome.value
    return Continuing(accumulated)


def resolve_pipeline(rules: Iterable[RuleLike], number: int) -> Outcome:
    """``resolve`` expressed with the sequence operators."""
    outcomes = list(take_until_terminal(rule(number) for rule in rules))
    final = terminal_output(outcomes)
    if final is not None:
        return Terminal(final)
    return Continuing(fold_fragments(outcomes))


def finish(outcome: Outcome, number: int) -> str:
    """Collapse a resolved outcome to text, falling back to the number."""
    return outcome.match(
        lambda fragments: fragments or str(number),
        lambda output: output,
    )


def evaluate(rules: Iterable[RuleLike], number: int) -> str:
    """Evaluate *number* against *rules*; the number itself is the fallback."""
    return finish(resolve(rules, number), number)


def evaluate_pipeline(rules: Iterable[RuleLike], number: int) -> str:
    """Same result as ``evaluate``, built from ``take_until_terminal`` + ``combine``.

    Rules are mapped lazily, so nothing after the first terminal runs.
    """
    outcomes = (rule(number) for rule in rules)
    return combine(take_until_terminal(outcomes), fallback=str(number))


_RESOLVERS: dict[str, Resolver] = {
    "fold": resolve,
    "pipeline": resolve_pipeline,
}


def process_range(start: int, count: int, evaluator: Callable[[int], str]) -> Iterator[str]:
    """Apply *evaluator* to ``count`` consecutive numbers from *start*."""
    return (evaluator(n) for n in range(start, start + count))


class Evaluator:
    """An immutable, ordered rule set with a single evaluation entry point.

    Holds no mutable state, so one instance may be shared across threads.
    """

    def __init__(self, rules: Optional[Iterable[RuleLike]], *, strategy: str = "fold") -> None:
        if rules is None:
            raise EvaluatorError("An evaluator needs a rule sequence, got None")
        if strategy not in _RESOLVERS:
            raise EvaluatorError(
                f"Unknown strategy {strategy!r}; expected one of {', '.join(_RESOLVERS)}"
            )
        self._rules: tuple[RuleLike, ...] = tuple(rules)
        self._strategy = strategy
        self._resolve = _RESOLVERS[strategy]

    # ---- factories ----

    @classmethod
    def standard(cls) -> "Evaluator":
        from fizzrail.rules.builtin import standard_game

        return cls(standard_game())

    @classmethod
    def extended(cls, extra_rules: Iterable[RuleLike]) -> "Evaluator":
        """Standard game plus *extra_rules*; rules already present are skipped."""
        from fizzrail.rules.builtin import standard_game
        from fizzrail.rules.registry import merge_rules

        return cls(merge_rules(standard_game(), extra_rules))

    @classmethod
    def new_set(cls, rules: Iterable[RuleLike]) -> "Evaluator":
        return cls(rules)

    # ---- queries ----

    @property
    def rules(self) -> Sequence[RuleLike]:
        return self._rules

    @property
    def strategy(self) -> str:
        return self._strategy

    @property
    def rule_ids(self) -> list[str]:
        return [rule_id(r) for r in self._rules]

    # ---- evaluation ----

    def resolve(self, number: int) -> Outcome:
        return self._resolve(self._rules, number)

    def evaluate(self, number: int) -> str:
        return finish(self.resolve(number), number)

    def __call__(self, number: int) -> str:
        return self.evaluate(number)

    def verdict(self, number: int) -> Verdict:
        outcome = self.resolve(number)
        return Verdict(
            number=number,
            output=finish(outcome, number),
            terminal=outcome.is_terminal,
            fallback=outcome.match(lambda fragments: not fragments, lambda _: False),
        )

    def evaluate_range(self, start: int, count: int) -> Iterator[Verdict]:
        """Lazily yield a verdict for each of ``count`` numbers from *start*."""
        for number in range(start, start + count):
            yield self.verdict(number)

    def play(self, start: int, count: int) -> GameResult:
        """Evaluate a whole range and time it."""
        t0 = time.perf_counter()
        verdicts = list(self.evaluate_range(start, count))
        elapsed = (time.perf_counter() - t0) * 1000
        return GameResult(
            verdicts=verdicts,
            rule_ids=self.rule_ids,
            strategy=self._strategy,
            duration_ms=round(elapsed, 2),
        )

    def __repr__(self) -> str:
        return f"Evaluator(rules={self.rule_ids!r}, strategy={self._strategy!r})"
