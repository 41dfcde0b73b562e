"""Tests for MoveLogger: JSONL move logging."""

import json
import logging

import pytest
import scrabref
from scrabref.core.referee import Referee
from scrabref.core.telemetry import MoveLogger, MoveRecord


@pytest.fixture
def move_logger(tmp_path):
    return MoveLogger(output_dir=tmp_path, game_id="test-game-001")


def _make_record(**overrides):
    defaults = dict(
        move_number=1,
        valid=True,
        score=10,
        reason=None,
        detail=None,
        words=["CAT"],
        placements=[("C", 7, 6), ("A", 7, 7), ("T", 7, 8)],
        bingo=False,
    )
    defaults.update(overrides)
    return MoveRecord(**defaults)


class TestMoveLogger:
    def test_log_move_creates_file(self, move_logger, tmp_path):
        move_logger.log_move(_make_record())
        assert (tmp_path / "test-game-001.jsonl").exists()
        assert move_logger.file_path == tmp_path / "test-game-001.jsonl"

    def test_log_move_writes_valid_jsonl(self, move_logger, tmp_path):
        move_logger.log_move(_make_record(move_number=1))
        move_logger.log_move(_make_record(move_number=2))
        lines = (tmp_path / "test-game-001.jsonl").read_text().strip().split("\n")
        assert len(lines) == 2
        for line in lines:
            parsed = json.loads(line)
            assert "move_number" in parsed
            assert "schema_version" in parsed

    def test_log_move_contains_all_fields(self, move_logger, tmp_path):
        move_logger.log_move(_make_record())
        parsed = json.loads((tmp_path / "test-game-001.jsonl").read_text().strip())
        required_fields = [
            "schema_version", "game_id", "move_number", "valid", "score",
            "reason", "detail", "words", "placements", "bingo",
            "timestamp", "engine_version",
        ]
        for field in required_fields:
            assert field in parsed, f"Missing field: {field}"
        assert parsed["engine_version"] == scrabref.__version__
        assert parsed["placements"][1] == ["A", 7, 7]

    def test_finalize_game_appends_summary(self, move_logger, tmp_path):
        move_logger.log_move(_make_record())
        move_logger.finalize_game({"final_scores": {"player_one": 10, "player_two": 0}})
        lines = (tmp_path / "test-game-001.jsonl").read_text().strip().split("\n")
        assert len(lines) == 2
        summary = json.loads(lines[-1])
        assert summary["record_type"] == "game_summary"
        assert summary["final_scores"]["player_one"] == 10


class TestRefereeTelemetry:
    def test_every_validation_logged(self, board, dictionary, lay, move_logger):
        ref = Referee(board, dictionary, move_logger=move_logger)
        missed = lay("CAT", 3, 3)
        ref.validate(missed)  # misses center
        for tile in missed:
            board.release(tile)
        ref.validate(lay("CAT", 7, 6))

        lines = move_logger.file_path.read_text().strip().split("\n")
        first, second = (json.loads(line) for line in lines)
        assert first["valid"] is False
        assert first["reason"] == "center_not_covered"
        assert first["score"] == 0
        assert second["valid"] is True
        assert second["move_number"] == 2
        assert second["words"] == ["CAT"]
        assert second["score"] == 10

    def test_unwritable_log_does_not_fail_accepted_move(
        self, board, dictionary, lay, move_logger, caplog
    ):
        move_logger.file_path.mkdir()
        ref = Referee(board, dictionary, move_logger=move_logger)
        tiles = lay("CAT", 7, 6)
        with caplog.at_level(logging.WARNING, logger="scrabref.core.referee"):
            result = ref.validate(tiles)
        assert result.valid is True
        assert result.score == 10
        assert all(t.committed for t in tiles)
        assert not board.is_empty
        assert "not written to move log" in caplog.text
