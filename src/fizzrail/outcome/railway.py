"""Railway combinators — operators over outcomes and outcome sequences.

Two tracks: the continuing track accumulates fragments, the terminal track
carries a final output and bypasses everything after it.
"""

from __future__ import annotations

from typing import Callable, Iterable, Iterator, Optional

from fizzrail.outcome.models import EMPTY, Continuing, Outcome, Terminal

Station = Callable[[str], Outcome]


def _identity(text: str) -> str:
    return text


def _nothing(_: str) -> str:
    return ""


# ---- sequence operators ----


def take_until_terminal(outcomes: Iterable[Outcome]) -> Iterator[Outcome]:
    """Yield outcomes up to and including the first terminal one.

    The source is consumed lazily and never advanced past the terminal, so
    rules mapped into *outcomes* by a generator are not invoked after it.
    """
    for outcome in outcomes:
        yield outcome
        if outcome.is_terminal:
            return


def fold_fragments(outcomes: Iterable[Outcome], seed: str = "") -> str:
    """Concatenate the fragments of every continuing outcome, in order."""
    fragments = [o.match(_identity, _nothing) for o in outcomes]
    return seed + "".join(fragments)


def terminal_output(outcomes: Iterable[Outcome]) -> Optional[str]:
    """Return the payload of the first terminal outcome, or None."""
    for outcome in outcomes:
        final = outcome.match(lambda _: None, _identity)
        if final is not None:
            return final
    return None


def combine(outcomes: Iterable[Outcome], fallback: str) -> str:
    """Reduce a (truncated) outcome sequence to one string.

    Terminal payload if one is present, otherwise the concatenated fragments,
    otherwise *fallback*.
    """
    collected = list(outcomes)
    final = terminal_output(collected)
    if final is not None:
        return final
    accumulated = fold_fragments(collected)
    return accumulated or fallback


def merge(first: Outcome, second: Outcome) -> Outcome:
    """Pairwise combination: a terminal on the left wins, then one on the right.

    ``EMPTY`` is the identity element.
    """
    if first.is_terminal:
        return first
    if second.is_terminal:
        return second
    return Continuing(first.value + second.value)


# ---- composition helpers ----


def lift(f: Callable[[str], str]) -> Station:
    """Turn a plain string function into a station that always continues."""

    def station(text: str) -> Outcome:
        return Continuing(f(text))

    return station


def compose(rule: Callable[[int], Outcome], station: Station) -> Callable[[int], Outcome]:
    """Chain *station* after *rule*; the station only sees continuing fragments."""

    def composed(number: int) -> Outcome:
        return rule(number).bind(station)

    return composed


def through_stations(initial: Outcome, *stations: Station) -> Outcome:
    """Bind *initial* through each station, stopping at the first terminal."""
    current = initial
    for station in stations:
        current = current.bind(station)
        if current.is_terminal:
            break
    return current


def attempt(func: Callable[[], Outcome]) -> Outcome:
    """Call *func*; an exception is turned into a terminal ``Error: ...`` outcome."""
    try:
        return func()
    except Exception as exc:
        return Terminal(f"Error: {exc}")


def concat(outcomes: Iterable[Outcome]) -> Outcome:
    """Merge a whole sequence left to right, starting from ``EMPTY``."""
    result = EMPTY
    for outcome in outcomes:
        result = merge(result, outcome)
    return result
