"""FizzRail CLI — Typer application with play, say, rules, and init commands."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Tuple

import typer
from rich.console import Console
from rich.table import Table

from fizzrail import __version__

app = typer.Typer(
    name="fizzrail",
    help="Evaluate integers against an ordered set of rules.",
    add_completion=False,
    no_args_is_help=True,
)

console = Console(stderr=True)


def _load(config: Optional[str]):
    """Load config from the working directory, exit 2 on failure."""
    from fizzrail.config.loader import ConfigError, load_config

    try:
        return load_config(Path.cwd(), config)
    except ConfigError as exc:
        console.print(f"[bold red]Config error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc


def _build_evaluator(cfg, rules: Optional[str], strategy: Optional[str]):
    """Apply CLI overrides to *cfg* and build the evaluator, exit 2 on failure."""
    from fizzrail.config.schema import STRATEGIES
    from fizzrail.engine.evaluator import Evaluator
    from fizzrail.rules.models import RuleError
    from fizzrail.rules.registry import build_registry

    if rules:
        cfg.rules.use = [r.strip() for r in rules.split(",") if r.strip()]
    if strategy:
        if strategy not in STRATEGIES:
            console.print(f"[bold red]Invalid strategy:[/bold red] {strategy}")
            raise typer.Exit(code=2)
        cfg.engine.strategy = strategy  # type: ignore[assignment]

    try:
        registry = build_registry(Path.cwd())
        rule_set = registry.build_rule_set(cfg)
    except RuleError as exc:
        console.print(f"[bold red]Rule error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc

    return Evaluator(rule_set, strategy=cfg.engine.strategy)


def _parse_range(start: Optional[str], count: Optional[str], cfg) -> Tuple[int, int]:
    """Parse START/COUNT; anything malformed falls back to the configured range."""
    if start is None and count is None:
        return cfg.game.start, cfg.game.count
    try:
        parsed_start = int(start) if start is not None else cfg.game.start
        parsed_count = int(count) if count is not None else cfg.game.count
        if parsed_count < 0:
            raise ValueError(f"count must not be negative: {parsed_count}")
    except ValueError as exc:
        console.print(
            f"[yellow]⚠[/yellow]  Not a valid range ({exc}); "
            f"using defaults start={cfg.game.start} count={cfg.game.count}"
        )
        return cfg.game.start, cfg.game.count
    return parsed_start, parsed_count


# ── play ──────────────────────────────────────────────────────────────────────


@app.command()
def play(
    start: Optional[str] = typer.Argument(None, help="First number (default from config)"),
    count: Optional[str] = typer.Argument(None, help="How many numbers (default from config)"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .fizzrail.toml"),
    format: Optional[str] = typer.Option(None, "--format", "-f", help="Output format: plain | table | json"),
    rules: Optional[str] = typer.Option(None, "--rules", "-r", help="Comma-separated rule ids, in order"),
    strategy: Optional[str] = typer.Option(None, "--strategy", help="Evaluation strategy: fold | pipeline"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
) -> None:
    """Evaluate a range of numbers, one output line per number."""
    from fizzrail.config.schema import OUTPUT_FORMATS
    from fizzrail.output import json_report, plain, table

    cfg = _load(config)

    if format:
        if format not in OUTPUT_FORMATS:
            console.print(f"[bold red]Invalid format:[/bold red] {format}")
            raise typer.Exit(code=2)
        cfg.output.format = format  # type: ignore[assignment]

    evaluator = _build_evaluator(cfg, rules, strategy)
    first, how_many = _parse_range(start, count, cfg)

    if verbose:
        console.print(f"[dim]Rules loaded: {', '.join(evaluator.rule_ids) or '(none)'}[/dim]")
        console.print(f"[dim]Strategy: {evaluator.strategy}[/dim]")
        console.print(f"[dim]Range: {first}..{first + how_many - 1}[/dim]")

    result = evaluator.play(first, how_many)

    if verbose:
        console.print(f"[dim]Evaluated {result.total} numbers in {result.duration_ms:.0f}ms[/dim]")

    if cfg.output.format == "plain":
        if result.verdicts:
            print(plain.render(result))
    elif cfg.output.format == "table":
        table.render(result, show_summary=cfg.output.show_summary)
    elif cfg.output.format == "json":
        print(json_report.render(result))


# ── say ───────────────────────────────────────────────────────────────────────


@app.command()
def say(
    number: int = typer.Argument(..., help="Number to evaluate"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .fizzrail.toml"),
    rules: Optional[str] = typer.Option(None, "--rules", "-r", help="Comma-separated rule ids, in order"),
    strategy: Optional[str] = typer.Option(None, "--strategy", help="Evaluation strategy: fold | pipeline"),
) -> None:
    """Evaluate a single number."""
    cfg = _load(config)
    evaluator = _build_evaluator(cfg, rules, strategy)
    print(evaluator.evaluate(number))


# ── rules ─────────────────────────────────────────────────────────────────────


@app.command(name="rules")
def list_rules(
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .fizzrail.toml"),
    all_: bool = typer.Option(False, "--all", "-a", help="Show every registered rule, not just the active set"),
) -> None:
    """List the active rule set in evaluation order."""
    from fizzrail.rules.models import Rule, RuleError, rule_id
    from fizzrail.rules.registry import build_registry

    cfg = _load(config)
    try:
        registry = build_registry(Path.cwd())
        rule_set = registry.all_rules if all_ else registry.build_rule_set(cfg)
    except RuleError as exc:
        console.print(f"[bold red]Rule error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc

    out = Console()
    grid = Table(title="Rules" if all_ else "Active rules (in order)", border_style="dim")
    grid.add_column("#", justify="right", style="green")
    grid.add_column("Id", style="cyan", no_wrap=True)
    grid.add_column("Behaviour")
    for position, rule in enumerate(rule_set, start=1):
        inner = getattr(rule, "inner", rule)
        behaviour = inner.describe() if isinstance(inner, Rule) else "custom callable"
        if inner is not rule:
            behaviour += " [dim](guarded)[/dim]"
        grid.add_row(str(position), rule_id(rule), behaviour)
    out.print(grid)


# ── init ──────────────────────────────────────────────────────────────────────


@app.command()
def init() -> None:
    """Generate a starter .fizzrail.toml in the current directory."""
    from fizzrail.config.defaults import DEFAULT_TOML
    from fizzrail.config.loader import CONFIG_FILENAME

    config_path = Path.cwd() / CONFIG_FILENAME

    if config_path.exists():
        console.print(f"[yellow]⚠[/yellow]  {CONFIG_FILENAME} already exists at {config_path}")
        raise typer.Exit(code=1)

    config_path.write_text(DEFAULT_TOML, encoding="utf-8")
    console.print(f"[green]✓[/green] Created {config_path}")


# ── version ───────────────────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        print(f"fizzrail {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", "-V", callback=_version_callback,
        is_eager=True, help="Show version and exit",
    ),
) -> None:
    """FizzRail — ordered integer rules folded on two tracks."""
