"""Referee: move validation and scoring for one game.

One Referee instance per game. ``validate`` judges the tiles placed this
turn against the board and the dictionary, and on success scores the move
and commits the tiles. A rejected move is an ordinary result, never an
exception, and leaves the board and the tiles exactly as they were.

The rule check itself lives in :func:`evaluate_move`, a pure function of
(board, dictionary, placed tiles) that the referee wraps with the commit
and the move log.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from scrabref.config import RulesConfig
from scrabref.core.telemetry import MoveLogger, MoveRecord
from scrabref.core.words import ACROSS, DOWN, FormedWord, PlacementLookup, scan_word
from scrabref.game.board import CENTER, Board
from scrabref.game.dictionary import Dictionary
from scrabref.game.tile import Tile

if TYPE_CHECKING:
    from scrabref.config import RefereeConfig

logger = logging.getLogger(__name__)


class RejectionReason(Enum):
    NO_TILES = "no_tiles"
    TILE_OFF_BOARD = "tile_off_board"
    TILE_ALREADY_COMMITTED = "tile_already_committed"
    DUPLICATE_SQUARE = "duplicate_square"
    UNASSIGNED_BLANK = "unassigned_blank"
    CENTER_NOT_COVERED = "center_not_covered"
    NOT_IN_LINE = "not_in_line"
    INVALID_WORD = "invalid_word"
    NOT_ONE_WORD = "not_one_word"
    NOT_CONNECTED = "not_connected"


@dataclass(frozen=True)
class MoveResult:
    """Outcome of adjudicating one move."""

    valid: bool
    score: int = 0
    reason: RejectionReason | None = None
    detail: str | None = None
    words: tuple[str, ...] = ()
    tiles: tuple[Tile, ...] = ()  # placed tiles in reading order
    direction: str | None = None
    bingo: bool = False

    @classmethod
    def rejected(cls, reason: RejectionReason, detail: str | None = None) -> MoveResult:
        return cls(valid=False, reason=reason, detail=detail)


def evaluate_move(
    board: Board,
    dictionary: Dictionary,
    newly_placed: Iterable[Tile],
    rules: RulesConfig | None = None,
) -> MoveResult:
    """Judge and score a move without changing any state."""
    rules = rules or RulesConfig()
    placed = list(newly_placed)

    rejection = _check_admission(placed)
    if rejection is not None:
        return rejection

    # First move must cover center
    first_move = board.is_empty
    if first_move and not any(t.position == CENTER for t in placed):
        return MoveResult.rejected(RejectionReason.CENTER_NOT_COVERED)

    # All tiles in one row or one column, then sorted along it
    rows = {t.row for t in placed}
    cols = {t.col for t in placed}
    if len(rows) == 1:
        direction = ACROSS
        ordered = sorted(placed, key=lambda t: t.col)
    elif len(cols) == 1:
        direction = DOWN
        ordered = sorted(placed, key=lambda t: t.row)
    else:
        return MoveResult.rejected(RejectionReason.NOT_IN_LINE)

    # Every word formed, in both directions, through every placed tile
    lookup = PlacementLookup(board, ordered)
    words: list[FormedWord] = []
    touches_existing = False
    for tile in ordered:
        for scan_dir in (DOWN, ACROSS):
            run, touched = scan_word(lookup, tile, scan_dir)
            touches_existing = touches_existing or touched
            if len(run) < 2:
                continue
            word = FormedWord(tuple(run), scan_dir)
            if not dictionary.contains(word.text):
                return MoveResult.rejected(RejectionReason.INVALID_WORD, word.text)
            if word not in words:
                words.append(word)

    # One word must hold every placed tile, so fragments don't count
    if not any(w.contains_all(ordered) for w in words):
        return MoveResult.rejected(RejectionReason.NOT_ONE_WORD)

    if not (touches_existing or first_move):
        return MoveResult.rejected(RejectionReason.NOT_CONNECTED)

    score = sum(w.score() for w in words)
    bingo = len(ordered) == rules.rack_size
    if bingo:
        score += rules.bingo_bonus

    return MoveResult(
        valid=True,
        score=score,
        words=tuple(w.text for w in words),
        tiles=tuple(ordered),
        direction=direction,
        bingo=bingo,
    )


def _check_admission(placed: list[Tile]) -> MoveResult | None:
    """Reject placements the word scan cannot judge."""
    if not placed:
        return MoveResult.rejected(RejectionReason.NO_TILES)

    seen: set[tuple[int, int]] = set()
    for tile in placed:
        if tile.committed:
            return MoveResult.rejected(
                RejectionReason.TILE_ALREADY_COMMITTED, repr(tile)
            )
        if tile.position is None or tile.square is None:
            return MoveResult.rejected(RejectionReason.TILE_OFF_BOARD, repr(tile))
        if tile.position in seen:
            return MoveResult.rejected(
                RejectionReason.DUPLICATE_SQUARE, str(tile.position)
            )
        seen.add(tile.position)
        if tile.letter is None:
            return MoveResult.rejected(RejectionReason.UNASSIGNED_BLANK, repr(tile))
    return None


class Referee:
    """Validates and scores moves for a single game."""

    def __init__(
        self,
        board: Board,
        dictionary: Dictionary,
        rules: RulesConfig | None = None,
        move_logger: MoveLogger | None = None,
    ) -> None:
        self._board = board
        self._dictionary = dictionary
        self._rules = rules or RulesConfig()
        self._move_logger = move_logger
        self._move_number = 0

    @classmethod
    def from_config(cls, config: RefereeConfig, board: Board | None = None) -> Referee:
        """Build a referee from config. A bad word list fails here, not mid-game."""
        dictionary = Dictionary.from_file(config.dictionary.path)
        move_logger = None
        if config.telemetry is not None:
            move_logger = MoveLogger(
                config.telemetry.output_dir, config.telemetry.game_id
            )
        return cls(
            board if board is not None else Board(),
            dictionary,
            rules=config.rules,
            move_logger=move_logger,
        )

    @property
    def board(self) -> Board:
        return self._board

    @property
    def rules(self) -> RulesConfig:
        return self._rules

    def validate(self, newly_placed: Iterable[Tile]) -> MoveResult:
        """Judge this turn's tiles; commit them if the move is legal."""
        placed = list(newly_placed)
        result = evaluate_move(self._board, self._dictionary, placed, self._rules)
        self._move_number += 1

        if result.valid:
            self._board.commit(result.tiles)
            logger.info(
                "Move %d accepted: %s for %d points%s",
                self._move_number,
                ", ".join(result.words),
                result.score,
                " (bingo)" if result.bingo else "",
            )
        else:
            logger.debug(
                "Move %d rejected: %s%s",
                self._move_number,
                result.reason.value,
                f" ({result.detail})" if result.detail else "",
            )

        if self._move_logger is not None:
            try:
                self._log_move(result, placed)
            except OSError as e:
                # tiles are already committed; the move stands without its log line
                logger.warning("Move %d not written to move log: %s", self._move_number, e)
        return result

    def _log_move(self, result: MoveResult, placed: list[Tile]) -> None:
        self._move_logger.log_move(
            MoveRecord(
                move_number=self._move_number,
                valid=result.valid,
                score=result.score,
                reason=result.reason.value if result.reason else None,
                detail=result.detail,
                words=list(result.words),
                placements=[(t.letter, t.row, t.col) for t in (result.tiles or placed)],
                bingo=result.bingo,
            )
        )
