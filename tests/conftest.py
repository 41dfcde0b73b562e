"""Shared test fixtures for scrabref."""

import pytest

from scrabref.core.referee import Referee
from scrabref.game.board import Board
from scrabref.game.dictionary import Dictionary
from scrabref.game.tile import Tile

WORDS = ["CAT", "CATS", "AS", "TO", "DOG", "RETAINS", "AT"]


@pytest.fixture
def words_file(tmp_path):
    """A small word list on disk."""
    path = tmp_path / "words.txt"
    path.write_text("\n".join(WORDS) + "\n")
    return path


@pytest.fixture
def dictionary(words_file):
    return Dictionary.from_file(words_file)


@pytest.fixture
def board():
    return Board()


@pytest.fixture
def referee(board, dictionary):
    return Referee(board, dictionary)


@pytest.fixture
def lay(board):
    """Reserve fresh tiles spelling ``word`` from (row, col); returns them."""

    def _lay(word, row, col, direction="across"):
        tiles = []
        for i, letter in enumerate(word):
            r = row + (i if direction == "down" else 0)
            c = col + (i if direction == "across" else 0)
            tile = Tile.letter_tile(letter)
            assert board.try_place(tile, r, c)
            tiles.append(tile)
        return tiles

    return _lay
