"""Word search puzzle engine.

This package exposes the public API surface via:

- ``wordsearch.engine.generator.PuzzleGenerator``: places words into a letter grid.
- ``wordsearch.engine.matcher.SelectionMatcher``: resolves drags and solve requests.
- ``wordsearch.engine.game.WordSearchGame``: wires themes, generation and matching.
- ``wordsearch.data.theme.ThemeCatalog``: titled word groups to build puzzles from.
"""

from .engine.game import WordSearchGame
from .engine.generator import GeneratorConfig, PuzzleGenerator, PuzzleResult
from .engine.matcher import SelectionMatcher
from .data.theme import ThemeCatalog

__all__ = [
    "WordSearchGame",
    "GeneratorConfig",
    "PuzzleGenerator",
    "PuzzleResult",
    "SelectionMatcher",
    "ThemeCatalog",
]

__version__ = "0.1.0"
