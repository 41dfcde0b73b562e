"""Word list used to judge every word a move forms."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

logger = logging.getLogger(__name__)


class DictionaryLoadError(RuntimeError):
    """The word list could not be loaded. Fatal at game setup."""


class Dictionary:
    """Immutable set of uppercase words with case-insensitive lookup."""

    def __init__(self, words: Iterable[str]) -> None:
        self._words: frozenset[str] = frozenset(
            w.strip().upper() for w in words if w.strip()
        )

    @classmethod
    def from_file(cls, path: str | Path) -> Dictionary:
        """Load a newline-delimited word list.

        Raises DictionaryLoadError if the file is missing, unreadable, or
        holds no words: an empty dictionary would reject every move.
        """
        path = Path(path)
        try:
            with open(path, encoding="utf-8") as f:
                dictionary = cls(f)
        except (OSError, UnicodeDecodeError) as e:
            raise DictionaryLoadError(f"Cannot read word list {path}: {e}") from e

        if not dictionary._words:
            raise DictionaryLoadError(f"Word list {path} contains no words")
        logger.info("Loaded %s words from %s", f"{len(dictionary):,}", path)
        return dictionary

    def contains(self, word: str) -> bool:
        return word.upper() in self._words

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.contains(word)

    def __len__(self) -> int:
        return len(self._words)
