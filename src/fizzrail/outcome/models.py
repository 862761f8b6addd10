"""Outcome data model — the two-track result of applying one rule to one number.

An outcome is exactly one of:

* ``Continuing(fragment)``: keep evaluating, append ``fragment`` to the result.
* ``Terminal(output)``: stop evaluating, the final result is ``output``.

Only these two variants exist; ``Outcome`` itself cannot be instantiated and
refuses subclasses defined anywhere else.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, TypeVar

T = TypeVar("T")

_VARIANTS = ("Continuing", "Terminal")


class OutcomeError(Exception):
    """Raised when a value claims to be an outcome but is neither variant."""


class Outcome:
    """Base of the closed ``Continuing`` / ``Terminal`` sum type."""

    __slots__ = ()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if cls.__module__ != __name__ or cls.__name__ not in _VARIANTS:
            raise TypeError(
                f"Outcome is closed: {cls.__qualname__} cannot be added as a variant"
            )

    def __new__(cls, *args: Any, **kwargs: Any) -> "Outcome":
        if cls is Outcome:
            raise TypeError("Use continuing() or terminal() to build an Outcome")
        return super().__new__(cls)

    # ---- queries ----

    @property
    def is_terminal(self) -> bool:
        return self.match(lambda _: False, lambda _: True)

    @property
    def value(self) -> str:
        """Payload of whichever track this outcome is on."""
        return self.match(_identity, _identity)

    # ---- dispatch ----

    def match(
        self,
        on_continuing: Callable[[str], T],
        on_terminal: Callable[[str], T],
    ) -> T:
        """Call exactly one of the two handlers with this outcome's payload."""
        if isinstance(self, Continuing):
            return on_continuing(self.fragment)
        if isinstance(self, Terminal):
            return on_terminal(self.output)
        raise OutcomeError(f"Unknown outcome variant: {type(self).__name__}")

    # ---- railway operators ----

    def map(self, f: Callable[[str], str]) -> "Outcome":
        """Transform the fragment of a continuing outcome; terminals pass through."""
        return self.match(lambda fragment: Continuing(f(fragment)), lambda _: self)

    def bind(self, f: Callable[[str], "Outcome"]) -> "Outcome":
        """Chain a function that may switch to the terminal track.

        ``f`` is never called for a terminal outcome.
        """
        return self.match(f, lambda _: self)

    def tee(self, side_effect: Callable[[str], Any]) -> "Outcome":
        """Run *side_effect* on a continuing fragment and return self unchanged."""
        self.match(side_effect, lambda _: None)
        return self

    def double_map(
        self,
        on_continuing: Callable[[str], str],
        on_terminal: Callable[[str], str],
    ) -> "Outcome":
        """Transform the payload on either track, keeping the variant."""
        return self.match(
            lambda fragment: Continuing(on_continuing(fragment)),
            lambda output: Terminal(on_terminal(output)),
        )

    def either(
        self,
        on_continuing: Callable[[str], Any],
        on_terminal: Callable[[str], Any],
    ) -> "Outcome":
        """Run the side effect matching this track and return self unchanged."""
        self.match(on_continuing, on_terminal)
        return self


@dataclass(frozen=True)
class Continuing(Outcome):
    """Non-terminal outcome carrying a (possibly empty) fragment."""

    fragment: str = ""


@dataclass(frozen=True)
class Terminal(Outcome):
    """Terminal outcome; ``output`` replaces everything accumulated so far."""

    output: str


def _identity(text: str) -> str:
    return text


def continuing(fragment: str) -> Outcome:
    return Continuing(fragment)


def terminal(output: str) -> Outcome:
    return Terminal(output)


EMPTY: Outcome = Continuing("")
