"""Configuration schema — dataclasses for every config section."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Literal

OutputFormat = Literal["plain", "table", "json"]
Strategy = Literal["fold", "pipeline"]

OUTPUT_FORMATS: tuple[str, ...] = ("plain", "table", "json")
STRATEGIES: tuple[str, ...] = ("fold", "pipeline")


@dataclass
class GameConfig:
    start: int = 1
    count: int = 100


@dataclass
class RulesConfig:
    use: List[str] = field(default_factory=list)  # ordered ids; empty = extended game
    disable: List[str] = field(default_factory=list)
    guard: bool = False  # for embedders: wrap every rule so exceptions become terminal outcomes


@dataclass
class EngineConfig:
    strategy: Strategy = "fold"


@dataclass
class OutputConfig:
    format: OutputFormat = "plain"
    show_summary: bool = True


@dataclass
class FizzRailConfig:
    version: str = "1.0"
    game: GameConfig = field(default_factory=GameConfig)
    rules: RulesConfig = field(default_factory=RulesConfig)
    engine: EngineConfig = field(default_factory=EngineConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
