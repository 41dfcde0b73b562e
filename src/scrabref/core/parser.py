"""MoveRequestParser: decode and validate JSON move requests.

A move request names the rack tiles to put down and the squares they go
to. :meth:`MoveRequestParser.parse` decodes one JSON document and checks
it against the move request schema; :func:`place_request` then puts the
requested rack tiles on the board.
"""

import json
from collections.abc import Iterable
from dataclasses import dataclass

import jsonschema

from scrabref.core.schemas import load_schema
from scrabref.game.board import Board
from scrabref.game.tile import BlankTileError, Tile


@dataclass(frozen=True)
class ParseResult:
    """Result of parsing a raw move request."""

    success: bool
    request: dict | None
    error: str | None


@dataclass(frozen=True)
class PlacementResult:
    """Result of putting a parsed request's tiles on the board."""

    success: bool
    tiles: tuple[Tile, ...] = ()
    error: str | None = None


class MoveRequestParser:
    """Decode a JSON move request and validate it against the schema."""

    def __init__(self, schema: dict | None = None) -> None:
        self._schema = schema if schema is not None else load_schema()

    def parse(self, raw_text: str) -> ParseResult:
        try:
            parsed = json.loads(raw_text)
        except json.JSONDecodeError as e:
            return ParseResult(False, None, f"JSON parse error: {e}")

        if not isinstance(parsed, dict):
            return ParseResult(False, None, "JSON value is not an object")

        try:
            jsonschema.validate(parsed, self._schema)
        except jsonschema.ValidationError as e:
            return ParseResult(False, None, f"Schema validation: {e.message}")

        return ParseResult(True, parsed, None)


def place_request(board: Board, rack: Iterable[Tile], request: dict) -> PlacementResult:
    """Reserve the requested rack tiles on the board.

    All or nothing: on any failure every tile this call reserved is
    released again. Blank letters are assigned only once every tile has
    been reserved, so a failed request never fixes a blank's letter.
    """
    by_id = {tile.id: tile for tile in rack}
    wanted: list[tuple[Tile, dict]] = []
    seen_ids: set[int] = set()

    for item in request["placements"]:
        tile = by_id.get(item["tile_id"])
        if tile is None:
            return PlacementResult(False, error=f"Tile {item['tile_id']} is not in the rack")
        if tile.id in seen_ids:
            return PlacementResult(False, error=f"Tile {tile.id} is placed twice")
        seen_ids.add(tile.id)

        letter = item.get("letter")
        if tile.is_blank:
            if letter is None and tile.letter is None:
                return PlacementResult(False, error=f"Blank {tile.id} needs a letter")
            if letter is not None and tile.letter not in (None, letter.upper()):
                return PlacementResult(
                    False, error=f"Blank {tile.id} already stands for '{tile.letter}'"
                )
        elif letter is not None and letter.upper() != tile.letter:
            return PlacementResult(
                False, error=f"Tile {tile.id} is '{tile.letter}', not '{letter.upper()}'"
            )
        wanted.append((tile, item))

    previous = {tile.id: tile.position for tile, _ in wanted}
    placed: list[Tile] = []
    for tile, item in wanted:
        if not board.try_place(tile, item["row"], item["col"]):
            _restore(board, placed, previous)
            return PlacementResult(
                False, error=f"Square ({item['row']}, {item['col']}) is not free"
            )
        placed.append(tile)

    for tile, item in wanted:
        if tile.is_blank and tile.letter is None:
            try:
                tile.assign_letter(item["letter"])
            except BlankTileError as e:
                _restore(board, placed, previous)
                return PlacementResult(False, error=str(e))

    return PlacementResult(True, tiles=tuple(placed))


def _restore(
    board: Board, placed: list[Tile], previous: dict[int, tuple[int, int] | None]
) -> None:
    """Undo this call's reservations, returning moved tiles to where they were."""
    for tile in placed:
        board.release(tile)
    for tile in placed:
        position = previous[tile.id]
        if position is not None:
            board.try_place(tile, *position)
