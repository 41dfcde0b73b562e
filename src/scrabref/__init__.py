"""scrabref: move validation and scoring for a two-player Scrabble game."""

__version__ = "0.1.0"
