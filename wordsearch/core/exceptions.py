"""Custom exception hierarchy for word search generation."""

from __future__ import annotations


class WordSearchError(Exception):
    """Base exception for puzzle failures."""


class UnplaceableWordError(WordSearchError):
    """Raised when a word cannot be fitted within the placement budget."""

    def __init__(self, word: str, grid_size: int | None = None) -> None:
        self.word = word
        self.grid_size = grid_size
        detail = f" in a {grid_size}x{grid_size} grid" if grid_size is not None else ""
        super().__init__(f"Unable to place word '{word}'{detail}")


class InvalidWordError(WordSearchError):
    """Raised when a word is empty or too short once normalized."""

    def __init__(self, word: str) -> None:
        self.word = word
        super().__init__(f"Invalid word {word!r}")


class ThemeError(WordSearchError):
    """Raised when theme data is missing or malformed."""


class ValidationError(WordSearchError):
    """Raised when the puzzle integrity checks fail."""
