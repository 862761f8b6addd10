"""FizzRail — ordered integer rules folded on two tracks."""

from fizzrail.engine import Evaluator, evaluate
from fizzrail.outcome import EMPTY, Continuing, Outcome, Terminal, continuing, terminal

__version__ = "0.1.0"

__all__ = [
    "EMPTY",
    "Continuing",
    "Evaluator",
    "Outcome",
    "Terminal",
    "__version__",
    "continuing",
    "evaluate",
    "terminal",
]
