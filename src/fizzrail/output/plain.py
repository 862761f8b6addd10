"""Plain reporter — one output line per evaluated number."""

from __future__ import annotations

from typing import Iterable

from fizzrail.engine.models import GameResult, Verdict


def lines(verdicts: Iterable[Verdict]) -> list[str]:
    return [v.output for v in verdicts]


def render(result: GameResult) -> str:
    return "\n".join(lines(result.verdicts))
