"""JSON reporter for scripted use."""

from __future__ import annotations

import json
from typing import Any, Dict, List

from fizzrail.engine.models import GameResult


def to_dict(result: GameResult) -> Dict[str, Any]:
    """Convert GameResult to a JSON-serialisable dict."""
    verdicts: List[Dict[str, Any]] = []
    for v in result.verdicts:
        verdicts.append({
            "number": v.number,
            "output": v.output,
            **({"terminal": True} if v.terminal else {}),
        })

    return {
        "version": "1.0",
        "rules": result.rule_ids,
        "strategy": result.strategy,
        "total": result.total,
        "terminal": len(result.terminal_verdicts),
        "fallback": len(result.fallback_verdicts),
        "verdicts": verdicts,
        "duration_ms": result.duration_ms,
    }


def render(result: GameResult) -> str:
    """Return formatted JSON string."""
    return json.dumps(to_dict(result), indent=2)
