"""Outcome algebra — the two-track result type and its combinators."""

from fizzrail.outcome.models import (
    EMPTY,
    Continuing,
    Outcome,
    OutcomeError,
    Terminal,
    continuing,
    terminal,
)
from fizzrail.outcome.railway import (
    attempt,
    combine,
    compose,
    concat,
    fold_fragments,
    lift,
    merge,
    take_until_terminal,
    terminal_output,
    through_stations,
)

__all__ = [
    "EMPTY",
    "Continuing",
    "Outcome",
    "OutcomeError",
    "Terminal",
    "attempt",
    "combine",
    "compose",
    "concat",
    "continuing",
    "fold_fragments",
    "lift",
    "merge",
    "take_until_terminal",
    "terminal",
    "terminal_output",
    "through_stations",
]
