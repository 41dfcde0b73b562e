"""Tests for the board and square model."""

import pytest

from scrabref.game.board import (
    CENTER,
    PREMIUM_SQUARES,
    SIZE,
    Board,
    OutOfBoundsError,
    Premium,
)
from scrabref.game.tile import Tile


class TestSquares:
    def test_center_is_double_word(self, board):
        sq = board.square_at(*CENTER)
        assert sq.word_multiplier == 2
        assert sq.letter_multiplier == 1

    def test_corner_is_triple_word(self, board):
        assert board.square_at(0, 0).premium is Premium.TW

    def test_premium_counts(self):
        counts = {}
        for premium in PREMIUM_SQUARES.values():
            counts[premium] = counts.get(premium, 0) + 1
        assert counts == {Premium.TW: 8, Premium.DW: 17, Premium.TL: 12, Premium.DL: 24}

    def test_never_both_letter_and_word_premium(self, board):
        for r in range(SIZE):
            for c in range(SIZE):
                sq = board.square_at(r, c)
                assert sq.letter_multiplier == 1 or sq.word_multiplier == 1

    @pytest.mark.parametrize("row,col", [(-1, 0), (0, 15), (15, 15), (3, -2)])
    def test_square_at_out_of_bounds_raises(self, board, row, col):
        with pytest.raises(OutOfBoundsError):
            board.square_at(row, col)


class TestTileLookup:
    def test_empty_board(self, board):
        assert board.is_empty
        assert board.tile_at(7, 7) is None

    def test_tile_at_off_board_is_none(self, board):
        assert board.tile_at(-1, 7) is None
        assert board.tile_at(7, 15) is None

    def test_reserved_tile_not_visible_until_commit(self, board):
        tile = Tile.letter_tile("A")
        assert board.try_place(tile, 7, 7)
        assert board.tile_at(7, 7) is None
        assert board.is_occupied(7, 7)


class TestTryPlace:
    def test_sets_coordinate_and_square(self, board):
        tile = Tile.letter_tile("Q")
        assert board.try_place(tile, 2, 3) is True
        assert tile.position == (2, 3)
        assert tile.square is board.square_at(2, 3)
        assert board.square_at(2, 3).occupied

    def test_reserved_square_refused(self, board):
        first, second = Tile.letter_tile("A"), Tile.letter_tile("B")
        assert board.try_place(first, 4, 4)
        assert board.try_place(second, 4, 4) is False
        assert second.position is None

    def test_committed_square_refused(self, board):
        first, second = Tile.letter_tile("A"), Tile.letter_tile("B")
        board.try_place(first, 7, 7)
        board.commit([first])
        assert board.try_place(second, 7, 7) is False

    def test_off_board_refused(self, board):
        tile = Tile.letter_tile("A")
        assert board.try_place(tile, 15, 0) is False
        assert tile.position is None

    def test_moving_reserved_tile_frees_old_square(self, board):
        tile = Tile.letter_tile("A")
        board.try_place(tile, 1, 1)
        assert board.try_place(tile, 1, 2)
        assert not board.square_at(1, 1).occupied
        assert board.square_at(1, 2).occupied
        assert tile.position == (1, 2)

    def test_committed_tile_cannot_move(self, board):
        tile = Tile.letter_tile("A")
        board.try_place(tile, 7, 7)
        board.commit([tile])
        assert board.try_place(tile, 7, 8) is False
        assert tile.position == (7, 7)


class TestReleaseAndCommit:
    def test_release_frees_square(self, board):
        tile = Tile.letter_tile("A")
        board.try_place(tile, 5, 5)
        board.release(tile)
        assert tile.position is None
        assert tile.square is None
        assert not board.is_occupied(5, 5)

    def test_release_committed_raises(self, board):
        tile = Tile.letter_tile("A")
        board.try_place(tile, 7, 7)
        board.commit([tile])
        with pytest.raises(ValueError):
            board.release(tile)

    def test_commit_round_trip(self, board):
        tiles = [Tile.letter_tile(x) for x in "DOG"]
        for i, tile in enumerate(tiles):
            board.try_place(tile, 7, 6 + i)
        board.commit(tiles)
        assert not board.is_empty
        for tile in tiles:
            assert board.tile_at(*tile.position) is tile
            assert tile.committed
        assert board.committed_tiles() == tiles


class TestAscii:
    def test_empty_board_shows_premiums(self):
        text = Board().to_ascii()
        lines = text.splitlines()
        assert len(lines) == SIZE + 1
        assert " 3W" in lines[1]
        assert " 2W" in lines[8]

    def test_blank_rendered_lowercase(self, board):
        blank = Tile.blank()
        blank.assign_letter("E")
        board.try_place(blank, 7, 7)
        board.commit([blank])
        row = board.to_ascii().splitlines()[8]
        assert "  e" in row
