"""Exact-match rules — stop evaluation with a final output."""

from fizzrail.rules.models import Rule

THE_ANSWER = Rule(
    id="THE_ANSWER",
    name="The Answer",
    kind="exact",
    target=42,
    output="The answer to the meaning of life, the universe, and everything",
)

ALL_EXACT_RULES = [THE_ANSWER]
