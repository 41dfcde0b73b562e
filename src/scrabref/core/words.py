"""Word discovery: contiguous runs of tiles through a newly placed tile."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from scrabref.game.board import Board
from scrabref.game.tile import Tile

ACROSS = "across"
DOWN = "down"

_STEP: dict[str, tuple[int, int]] = {ACROSS: (0, 1), DOWN: (1, 0)}


class PlacementLookup:
    """Tile lookup over this turn's placements first, then committed tiles."""

    def __init__(self, board: Board, placed: Iterable[Tile]) -> None:
        self._board = board
        self._placed: dict[tuple[int, int], Tile] = {
            tile.position: tile for tile in placed
        }

    def tile_at(self, row: int, col: int) -> Tile | None:
        tile = self._placed.get((row, col))
        if tile is not None:
            return tile
        return self._board.tile_at(row, col)


@dataclass(frozen=True)
class FormedWord:
    """An ordered run of tiles in one direction, length > 1."""

    tiles: tuple[Tile, ...]
    direction: str

    @property
    def text(self) -> str:
        return "".join(tile.letter for tile in self.tiles)

    def contains_all(self, tiles: Iterable[Tile]) -> bool:
        return set(tiles) <= set(self.tiles)

    def score(self) -> int:
        """Letter and word premiums count only for tiles not yet committed."""
        total = 0
        word_mult = 1
        for tile in self.tiles:
            if tile.committed:
                total += tile.value
            else:
                total += tile.value * tile.square.letter_multiplier
                word_mult *= tile.square.word_multiplier
        return total * word_mult


def scan_word(
    lookup: PlacementLookup, tile: Tile, direction: str
) -> tuple[list[Tile], bool]:
    """Maximal run of tiles through ``tile`` in ``direction``.

    Returns (tiles in reading order, touched_committed). The run includes
    ``tile`` itself, so a length of 1 means nothing adjoins it that way.
    """
    dr, dc = _STEP[direction]
    run: list[Tile] = [tile]
    touched = False

    # walk back, prepending
    r, c = tile.row - dr, tile.col - dc
    found = lookup.tile_at(r, c)
    while found is not None:
        run.insert(0, found)
        touched = touched or found.committed
        r, c = r - dr, c - dc
        found = lookup.tile_at(r, c)

    # walk forward, appending
    r, c = tile.row + dr, tile.col + dc
    found = lookup.tile_at(r, c)
    while found is not None:
        run.append(found)
        touched = touched or found.committed
        r, c = r + dr, c + dc
        found = lookup.tile_at(r, c)

    return run, touched
