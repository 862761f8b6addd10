"""Built-in rules — aggregate all categories and the stock game rule sets."""

from fizzrail.rules.builtin.divisibility import ALL_DIVISIBILITY_RULES, BANG, BUZZ, FIZZ, MEH
from fizzrail.rules.builtin.exact import ALL_EXACT_RULES, THE_ANSWER
from fizzrail.rules.models import Rule

ALL_BUILTIN_RULES: list[Rule] = [
    *ALL_DIVISIBILITY_RULES,
    *ALL_EXACT_RULES,
]


def standard_game() -> tuple[Rule, ...]:
    """Classic FizzBuzz. A fresh tuple on every call."""
    return (FIZZ, BUZZ)


def extended_game() -> tuple[Rule, ...]:
    return (FIZZ, BUZZ, BANG, THE_ANSWER)


__all__ = [
    "ALL_BUILTIN_RULES",
    "BANG",
    "BUZZ",
    "FIZZ",
    "MEH",
    "THE_ANSWER",
    "extended_game",
    "standard_game",
]
