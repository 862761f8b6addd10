"""Shared test fixtures — rule catalogs, counting rules, temp workspaces."""

from __future__ import annotations

import textwrap
from pathlib import Path
from typing import Callable, List

import pytest

from fizzrail.outcome.models import EMPTY, Outcome
from fizzrail.rules.builtin import BANG, BUZZ, FIZZ, MEH
from fizzrail.rules.models import Rule, exact_match


class CountingRule:
    """Wraps a rule and counts how many times it was invoked."""

    def __init__(self, inner: Callable[[int], Outcome] = lambda _: EMPTY) -> None:
        self.inner = inner
        self.calls: List[int] = []

    @property
    def count(self) -> int:
        return len(self.calls)

    def __call__(self, number: int) -> Outcome:
        self.calls.append(number)
        return self.inner(number)


@pytest.fixture
def make_counting_rule() -> Callable[..., CountingRule]:
    """Factory for rules that record every number they are called with."""
    return CountingRule


@pytest.fixture
def answer_rule() -> Rule:
    """Terminal rule used in the end-to-end scenarios."""
    return exact_match(42, "The answer", id="ANSWER")


@pytest.fixture
def scenario_rules(answer_rule: Rule) -> tuple:
    """Fizz, Buzz, Bang, then a terminal 42."""
    return (FIZZ, BUZZ, BANG, answer_rule)


@pytest.fixture
def catalog() -> tuple:
    return (FIZZ, BUZZ, BANG, MEH)


@pytest.fixture
def workspace(tmp_path: Path, monkeypatch) -> Path:
    """An empty working directory the CLI runs from."""
    monkeypatch.chdir(tmp_path)
    for var in (
        "FIZZRAIL_START",
        "FIZZRAIL_COUNT",
        "FIZZRAIL_FORMAT",
        "FIZZRAIL_RULES",
        "FIZZRAIL_STRATEGY",
    ):
        monkeypatch.delenv(var, raising=False)
    return tmp_path


@pytest.fixture
def custom_rules_yaml() -> str:
    return textwrap.dedent("""\
        - id: PING
          name: Ping
          kind: divisible
          target: 11
          output: Ping
        - id: UNLUCKY
          kind: exact
          target: 13
          output: Unlucky
    """)
