"""Load and merge configuration from .fizzrail.toml and env vars."""

from __future__ import annotations

import dataclasses
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from fizzrail.config.schema import (
    OUTPUT_FORMATS,
    STRATEGIES,
    EngineConfig,
    FizzRailConfig,
    GameConfig,
    OutputConfig,
    RulesConfig,
)

CONFIG_FILENAME = ".fizzrail.toml"


class ConfigError(Exception):
    """Raised when config is malformed or unreadable."""


def find_config_file(root: Path, override: Optional[str] = None) -> Optional[Path]:
    """Locate the config file. *override* takes precedence."""
    if override:
        p = Path(override)
        if not p.is_file():
            raise ConfigError(f"Config file not found: {override}")
        return p
    candidate = root / CONFIG_FILENAME
    return candidate if candidate.is_file() else None


def _parse_toml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Failed to parse {path}: {exc}") from exc


def _env_int(name: str) -> Optional[int]:
    val = os.environ.get(name)
    if not val:
        return None
    try:
        return int(val)
    except ValueError:
        return None


def _merge_env_overrides(cfg: FizzRailConfig) -> None:
    """Apply FIZZRAIL_* environment variable overrides."""
    if (start := _env_int("FIZZRAIL_START")) is not None:
        cfg.game.start = start
    if (count := _env_int("FIZZRAIL_COUNT")) is not None and count >= 0:
        cfg.game.count = count
    if val := os.environ.get("FIZZRAIL_FORMAT"):
        if val in OUTPUT_FORMATS:
            cfg.output.format = val  # type: ignore[assignment]
    if val := os.environ.get("FIZZRAIL_STRATEGY"):
        if val in STRATEGIES:
            cfg.engine.strategy = val  # type: ignore[assignment]
    if val := os.environ.get("FIZZRAIL_RULES"):
        cfg.rules.use = [r.strip() for r in val.split(",") if r.strip()]


def _build_section(data: Dict[str, Any], cls: type, section: str):
    """Build a dataclass from a TOML section dict, ignoring unknown keys."""
    raw = data.get(section, {})
    if not isinstance(raw, dict):
        raise ConfigError(f"[{section}] must be a table, got {type(raw).__name__}")
    valid_fields = {f.name for f in dataclasses.fields(cls)}
    filtered = {k: v for k, v in raw.items() if k in valid_fields}
    return cls(**filtered)


def _validate(cfg: FizzRailConfig) -> None:
    if not isinstance(cfg.game.start, int) or not isinstance(cfg.game.count, int):
        raise ConfigError("[game] start and count must be integers")
    if cfg.game.count < 0:
        raise ConfigError(f"[game] count must not be negative: {cfg.game.count}")
    if cfg.output.format not in OUTPUT_FORMATS:
        raise ConfigError(f"[output] unknown format: {cfg.output.format}")
    if cfg.engine.strategy not in STRATEGIES:
        raise ConfigError(f"[engine] unknown strategy: {cfg.engine.strategy}")


def load_config(
    root: Path,
    config_override: Optional[str] = None,
) -> FizzRailConfig:
    """Load, validate, and return a FizzRailConfig."""
    config_path = find_config_file(root, config_override)

    if config_path is None:
        cfg = FizzRailConfig()
    else:
        raw = _parse_toml(config_path)
        cfg = FizzRailConfig(
            version=raw.get("version", "1.0"),
            game=_build_section(raw, GameConfig, "game"),
            rules=_build_section(raw, RulesConfig, "rules"),
            engine=_build_section(raw, EngineConfig, "engine"),
            output=_build_section(raw, OutputConfig, "output"),
        )
        _validate(cfg)

    _merge_env_overrides(cfg)
    return cfg
