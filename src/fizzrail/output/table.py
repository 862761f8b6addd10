"""Rich table reporter — terminal verdicts highlighted."""

from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.table import Table
from rich.text import Text

from fizzrail.engine.models import GameResult, Verdict

_TERMINAL_STYLE = "bold white on red"
_FALLBACK_STYLE = "dim"
_FRAGMENT_STYLE = "bold cyan"


def _styled_output(verdict: Verdict) -> Text:
    if verdict.terminal:
        return Text(f" ⏹ {verdict.output} ", style=_TERMINAL_STYLE)
    if verdict.fallback:
        return Text(verdict.output, style=_FALLBACK_STYLE)
    return Text(verdict.output, style=_FRAGMENT_STYLE)


def render(
    result: GameResult,
    *,
    show_summary: bool = True,
    console: Optional[Console] = None,
) -> None:
    """Print the game run as a table."""
    console = console or Console()

    table = Table(
        title="FizzRail",
        title_style="bold",
        border_style="dim",
    )
    table.add_column("Number", justify="right", style="green")
    table.add_column("Output", min_width=12)

    for verdict in result.verdicts:
        table.add_row(str(verdict.number), _styled_output(verdict))

    console.print(table)

    if show_summary:
        _print_summary(console, result)


def _print_summary(console: Console, result: GameResult) -> None:
    console.print()
    console.print(f"[dim]Rules:[/dim]      {' → '.join(result.rule_ids) or '(none)'}")
    console.print(f"[dim]Strategy:[/dim]   {result.strategy}")
    console.print(f"[dim]Numbers:[/dim]    {result.total}")
    console.print(f"[dim]Terminal:[/dim]   {len(result.terminal_verdicts)}")
    console.print(f"[dim]Fallback:[/dim]   {len(result.fallback_verdicts)}")
    console.print(f"[dim]Duration:[/dim]   {result.duration_ms:.0f}ms")
