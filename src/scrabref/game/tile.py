"""Tiles: letter/value pieces with identity, placement, and commit status."""

from __future__ import annotations

import itertools
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from scrabref.game.board import Square

# Tile point values (blank = 0, handled separately)
TILE_VALUES: dict[str, int] = {
    "A": 1, "B": 3, "C": 3, "D": 2, "E": 1, "F": 4, "G": 2, "H": 4,
    "I": 1, "J": 8, "K": 5, "L": 1, "M": 3, "N": 1, "O": 1, "P": 3,
    "Q": 10, "R": 1, "S": 1, "T": 1, "U": 1, "V": 4, "W": 4, "X": 8,
    "Y": 4, "Z": 10,
}

# Standard 100-tile distribution: letter -> count
TILE_COUNTS: dict[str, int] = {
    "A": 9, "B": 2, "C": 2, "D": 4, "E": 12, "F": 2, "G": 3, "H": 2,
    "I": 9, "J": 1, "K": 1, "L": 4, "M": 2, "N": 6, "O": 8, "P": 2,
    "Q": 1, "R": 6, "S": 4, "T": 6, "U": 4, "V": 2, "W": 2, "X": 1,
    "Y": 2, "Z": 1,
}
BLANK_COUNT = 2

_id_counter = itertools.count(1)
_ids_in_use: set[int] = set()


def _claim_id(tile_id: int | None) -> int:
    """Reserve a tile id for the life of the process.

    Automatic ids skip any id already claimed explicitly, so the two kinds
    can be mixed without two pieces comparing equal.
    """
    if tile_id is None:
        tile_id = next(_id_counter)
        while tile_id in _ids_in_use:
            tile_id = next(_id_counter)
    elif tile_id in _ids_in_use:
        raise ValueError(f"Tile id {tile_id} is already in use")
    _ids_in_use.add(tile_id)
    return tile_id


class BlankTileError(ValueError):
    """Raised when a blank's letter is assigned illegally."""


def tile_value(letter: str) -> int:
    """Point value of a letter tile."""
    return TILE_VALUES.get(letter.upper(), 0)


class Tile:
    """A single game tile.

    Equality and hashing are both by ``id``: two tiles showing the same
    letter are still different pieces. A blank starts with ``letter`` set
    to None and takes its letter exactly once via :meth:`assign_letter`.
    An explicit ``tile_id`` already held by another tile raises ValueError.
    """

    __slots__ = ("id", "value", "is_blank", "row", "col", "square", "committed", "_letter")

    def __init__(
        self,
        letter: str | None,
        value: int,
        tile_id: int | None = None,
        is_blank: bool = False,
    ) -> None:
        if value < 0:
            raise ValueError(f"Tile value must be >= 0, got {value}")
        if letter is None and not is_blank:
            raise ValueError("Only a blank tile may have no letter")
        self.id: int = _claim_id(tile_id)
        self.value = value
        self.is_blank = is_blank
        self._letter = letter.upper() if letter is not None else None
        self.row: int | None = None
        self.col: int | None = None
        self.square: Square | None = None
        self.committed = False

    @classmethod
    def letter_tile(cls, letter: str, tile_id: int | None = None) -> Tile:
        """Tile for ``letter`` carrying its standard point value."""
        letter = letter.upper()
        if letter not in TILE_VALUES:
            raise ValueError(f"Not a tile letter: {letter!r}")
        return cls(letter, TILE_VALUES[letter], tile_id=tile_id)

    @classmethod
    def blank(cls, tile_id: int | None = None) -> Tile:
        return cls(None, 0, tile_id=tile_id, is_blank=True)

    @property
    def letter(self) -> str | None:
        return self._letter

    def assign_letter(self, letter: str) -> None:
        """Fix the letter a blank stands for. Allowed once per blank."""
        if not self.is_blank:
            raise BlankTileError(f"Tile {self.id} is not a blank")
        if self._letter is not None:
            raise BlankTileError(
                f"Blank {self.id} already stands for '{self._letter}'"
            )
        if len(letter) != 1 or letter.upper() not in TILE_VALUES:
            raise BlankTileError(f"A blank must be a single letter, got {letter!r}")
        self._letter = letter.upper()

    @property
    def position(self) -> tuple[int, int] | None:
        if self.row is None or self.col is None:
            return None
        return (self.row, self.col)

    @property
    def is_on_board(self) -> bool:
        return self.position is not None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tile):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        shown = self._letter or "?"
        where = f" at {self.position}" if self.position else ""
        state = " committed" if self.committed else ""
        return f"Tile({shown}/{self.value} #{self.id}{where}{state})"


def create_tile_set() -> list[Tile]:
    """Create the standard 100-tile set.

    Order is fixed (alphabetical, blanks last) and every tile gets a fresh
    id; shuffling is up to the caller.
    """
    tiles: list[Tile] = []
    for letter, count in TILE_COUNTS.items():
        tiles.extend(Tile.letter_tile(letter) for _ in range(count))
    tiles.extend(Tile.blank() for _ in range(BLANK_COUNT))
    return tiles
