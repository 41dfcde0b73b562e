"""MoveLogger: JSONL move logging.

One logger per game. Writes one JSONL line per adjudicated move plus an
optional game summary as the final line. All entries include schema
version and game ID.
"""

import json
from dataclasses import dataclass, asdict, field
from datetime import datetime, timezone
from pathlib import Path

import scrabref

_SCHEMA_VERSION = "1.0.0"


@dataclass
class MoveRecord:
    """One adjudicated move."""

    move_number: int
    valid: bool
    score: int
    reason: str | None
    detail: str | None
    words: list[str] = field(default_factory=list)
    placements: list[tuple[str | None, int | None, int | None]] = field(
        default_factory=list
    )  # [(letter, row, col), ...]
    bingo: bool = False


class MoveLogger:
    """Writes JSONL telemetry for a single game."""

    def __init__(self, output_dir: Path, game_id: str) -> None:
        self._output_dir = Path(output_dir)
        self._game_id = game_id
        self._output_dir.mkdir(parents=True, exist_ok=True)
        self._file_path = self._output_dir / f"{game_id}.jsonl"

    @property
    def file_path(self) -> Path:
        return self._file_path

    def log_move(self, record: MoveRecord) -> None:
        entry = asdict(record)
        entry["schema_version"] = _SCHEMA_VERSION
        entry["game_id"] = self._game_id
        entry["engine_version"] = scrabref.__version__
        entry["timestamp"] = datetime.now(timezone.utc).isoformat()
        self._append(entry)

    def finalize_game(self, extra: dict | None = None) -> None:
        record = {
            "schema_version": _SCHEMA_VERSION,
            "record_type": "game_summary",
            "game_id": self._game_id,
            "engine_version": scrabref.__version__,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        if extra:
            record.update(extra)
        self._append(record)

    def _append(self, record: dict) -> None:
        with open(self._file_path, "a") as f:
            f.write(json.dumps(record, default=str) + "\n")
