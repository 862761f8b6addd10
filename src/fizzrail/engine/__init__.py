"""Engine — evaluator, range processing, game results."""

from fizzrail.engine.evaluator import (
    Evaluator,
    EvaluatorError,
    evaluate,
    evaluate_pipeline,
    process_range,
    resolve,
)
from fizzrail.engine.models import GameResult, Verdict

__all__ = [
    "Evaluator",
    "EvaluatorError",
    "GameResult",
    "Verdict",
    "evaluate",
    "evaluate_pipeline",
    "process_range",
    "resolve",
]
