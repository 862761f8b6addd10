"""Game result data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True, slots=True)
class Verdict:
    """One evaluated number."""

    number: int
    output: str
    terminal: bool = False  # True when a terminal outcome ended evaluation
    fallback: bool = False  # True when no rule contributed and the number was printed


@dataclass
class GameResult:
    """Complete result of a game run over a range of numbers."""

    verdicts: List[Verdict] = field(default_factory=list)
    rule_ids: List[str] = field(default_factory=list)
    strategy: str = "fold"
    duration_ms: float = 0.0

    @property
    def total(self) -> int:
        return len(self.verdicts)

    @property
    def terminal_verdicts(self) -> List[Verdict]:
        return [v for v in self.verdicts if v.terminal]

    @property
    def fallback_verdicts(self) -> List[Verdict]:
        return [v for v in self.verdicts if v.fallback]
