"""Divisibility rules — contribute a fragment and let evaluation continue."""

from fizzrail.rules.models import Rule

FIZZ = Rule(id="FIZZ", name="Fizz", kind="divisible", target=3, output="Fizz")

BUZZ = Rule(id="BUZZ", name="Buzz", kind="divisible", target=5, output="Buzz")

BANG = Rule(id="BANG", name="Bang", kind="divisible", target=7, output="Bang")

# Shares Fizz's divisor; used to show that order alone decides concatenation.
MEH = Rule(id="MEH", name="Meh", kind="divisible", target=3, output="Meh")

ALL_DIVISIBILITY_RULES = [FIZZ, BUZZ, BANG, MEH]
