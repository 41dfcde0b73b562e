"""Scrabble board: 15×15 squares with premiums, plus the committed-tile grid."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum

from scrabref.game.tile import Tile

SIZE = 15
CENTER = (7, 7)


class OutOfBoundsError(IndexError):
    """Raised when a square is requested outside the 15×15 grid."""


class Premium(Enum):
    """Square kinds as (letter_multiplier, word_multiplier)."""

    NONE = (1, 1)
    DL = (2, 1)
    TL = (3, 1)
    DW = (1, 2)
    TW = (1, 3)

    @property
    def letter_multiplier(self) -> int:
        return self.value[0]

    @property
    def word_multiplier(self) -> int:
        return self.value[1]


# Premium square positions --------------------------------------------------

# Triple Word Score
_TW_POSITIONS = [
    (0, 0), (0, 7), (0, 14),
    (7, 0), (7, 14),
    (14, 0), (14, 7), (14, 14),
]

# Double Word Score (center star at 7,7 is also DW)
_DW_POSITIONS = [
    (1, 1), (2, 2), (3, 3), (4, 4),
    (1, 13), (2, 12), (3, 11), (4, 10),
    (10, 4), (11, 3), (12, 2), (13, 1),
    (10, 10), (11, 11), (12, 12), (13, 13),
    (7, 7),
]

# Triple Letter Score
_TL_POSITIONS = [
    (1, 5), (1, 9),
    (5, 1), (5, 5), (5, 9), (5, 13),
    (9, 1), (9, 5), (9, 9), (9, 13),
    (13, 5), (13, 9),
]

# Double Letter Score
_DL_POSITIONS = [
    (0, 3), (0, 11),
    (2, 6), (2, 8),
    (3, 0), (3, 7), (3, 14),
    (6, 2), (6, 6), (6, 8), (6, 12),
    (7, 3), (7, 11),
    (8, 2), (8, 6), (8, 8), (8, 12),
    (11, 0), (11, 7), (11, 14),
    (12, 6), (12, 8),
    (14, 3), (14, 11),
]

PREMIUM_SQUARES: dict[tuple[int, int], Premium] = {}
for _pos in _TW_POSITIONS:
    PREMIUM_SQUARES[_pos] = Premium.TW
for _pos in _DW_POSITIONS:
    PREMIUM_SQUARES[_pos] = Premium.DW
for _pos in _TL_POSITIONS:
    PREMIUM_SQUARES[_pos] = Premium.TL
for _pos in _DL_POSITIONS:
    PREMIUM_SQUARES[_pos] = Premium.DL


def in_bounds(row: int, col: int) -> bool:
    return 0 <= row < SIZE and 0 <= col < SIZE


class Square:
    """One board cell. ``occupied`` covers both reserved and committed tiles."""

    __slots__ = ("row", "col", "premium", "occupied")

    def __init__(self, row: int, col: int, premium: Premium = Premium.NONE) -> None:
        self.row = row
        self.col = col
        self.premium = premium
        self.occupied = False

    @property
    def letter_multiplier(self) -> int:
        return self.premium.letter_multiplier

    @property
    def word_multiplier(self) -> int:
        return self.premium.word_multiplier

    def __repr__(self) -> str:
        flag = " occupied" if self.occupied else ""
        return f"Square(({self.row},{self.col}) {self.premium.name}{flag})"


class Board:
    """15×15 Scrabble board with premium squares.

    Two layers: the squares themselves (premiums and occupancy) and the
    grid of committed tiles. Tiles placed during the current turn only
    reserve their square; they reach the tile grid through :meth:`commit`
    once the referee accepts the move.
    """

    def __init__(self) -> None:
        self._squares: list[list[Square]] = [
            [Square(r, c, PREMIUM_SQUARES.get((r, c), Premium.NONE)) for c in range(SIZE)]
            for r in range(SIZE)
        ]
        self._tiles: list[list[Tile | None]] = [[None] * SIZE for _ in range(SIZE)]
        self._is_empty: bool = True

    @property
    def is_empty(self) -> bool:
        """True until the first move is committed."""
        return self._is_empty

    def square_at(self, row: int, col: int) -> Square:
        if not in_bounds(row, col):
            raise OutOfBoundsError(f"({row}, {col}) is off the {SIZE}x{SIZE} board")
        return self._squares[row][col]

    def tile_at(self, row: int, col: int) -> Tile | None:
        """Committed tile at (row, col). Off-board coordinates give None."""
        if in_bounds(row, col):
            return self._tiles[row][col]
        return None

    def is_occupied(self, row: int, col: int) -> bool:
        """True if a committed or reserved tile sits at (row, col)."""
        return in_bounds(row, col) and self._squares[row][col].occupied

    def committed_tiles(self) -> list[Tile]:
        """All committed tiles in row-major order."""
        return [tile for row in self._tiles for tile in row if tile is not None]

    # ------------------------------------------------------------------
    # Placement
    # ------------------------------------------------------------------

    def try_place(self, tile: Tile, row: int, col: int) -> bool:
        """Reserve (row, col) for ``tile`` during the current turn.

        Fails without side effects if the square is off the board, holds a
        committed tile, or is reserved by another tile. A tile already
        reserved elsewhere is moved to the new square.
        """
        if tile.committed or not in_bounds(row, col):
            return False
        if tile.position == (row, col):
            return True
        square = self._squares[row][col]
        if self._tiles[row][col] is not None or square.occupied:
            return False

        self.release(tile)
        square.occupied = True
        tile.row, tile.col = row, col
        tile.square = square
        return True

    def release(self, tile: Tile) -> None:
        """Take a reserved tile back off the board (back to the rack)."""
        if tile.committed:
            raise ValueError(f"{tile!r} is committed and cannot be released")
        if tile.square is not None:
            tile.square.occupied = False
        tile.row = tile.col = None
        tile.square = None

    def commit(self, tiles: Iterable[Tile]) -> None:
        """Record validated tiles permanently. Performs no rule checks."""
        for tile in tiles:
            row, col = tile.row, tile.col
            square = self._squares[row][col]
            self._tiles[row][col] = tile
            square.occupied = True
            tile.square = square
            tile.committed = True
            self._is_empty = False

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def to_ascii(self) -> str:
        """Render committed tiles as ASCII; blanks show in lowercase."""
        col_hdr = "     " + "".join(f"{c:3d}" for c in range(SIZE))
        lines = [col_hdr]

        for r in range(SIZE):
            cells: list[str] = []
            for c in range(SIZE):
                tile = self._tiles[r][c]
                if tile is not None:
                    if tile.is_blank:
                        cells.append(f"  {tile.letter.lower()}")
                    else:
                        cells.append(f"  {tile.letter}")
                else:
                    premium = self._squares[r][c].premium
                    if premium is Premium.TW:
                        cells.append(" 3W")
                    elif premium is Premium.DW:
                        cells.append(" 2W")
                    elif premium is Premium.TL:
                        cells.append(" 3L")
                    elif premium is Premium.DL:
                        cells.append(" 2L")
                    else:
                        cells.append("  .")
            lines.append(f" {r:2d} " + "".join(cells))

        return "\n".join(lines)
