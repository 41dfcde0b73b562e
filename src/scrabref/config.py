"""Referee configuration loader."""

import yaml
from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class RulesConfig:
    rack_size: int = 7  # tiles per rack; placing all of them earns the bingo
    bingo_bonus: int = 50


@dataclass
class DictionaryConfig:
    path: Path


@dataclass
class TelemetryConfig:
    output_dir: Path
    game_id: str = "game"


@dataclass
class RefereeConfig:
    dictionary: DictionaryConfig
    rules: RulesConfig = field(default_factory=RulesConfig)
    telemetry: TelemetryConfig | None = None


def _resolve(base: Path, value: str) -> Path:
    """Paths in the YAML file are relative to the file itself."""
    p = Path(value)
    return p if p.is_absolute() else base / p


def load_config(path: Path) -> RefereeConfig:
    """Load referee config from YAML file."""
    path = Path(path)
    with open(path) as f:
        raw = yaml.safe_load(f) or {}

    base = path.parent
    rules_raw = raw.get("rules") or {}
    rules = RulesConfig(
        rack_size=rules_raw.get("rack_size", 7),
        bingo_bonus=rules_raw.get("bingo_bonus", 50),
    )

    dictionary = DictionaryConfig(path=_resolve(base, raw["dictionary"]["path"]))

    # Parse optional telemetry config
    telemetry = None
    tl_raw = raw.get("telemetry")
    if tl_raw:
        telemetry = TelemetryConfig(
            output_dir=_resolve(base, tl_raw["output_dir"]),
            game_id=tl_raw.get("game_id", "game"),
        )

    return RefereeConfig(dictionary=dictionary, rules=rules, telemetry=telemetry)
