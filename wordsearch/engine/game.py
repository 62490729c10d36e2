"""Game orchestration: one themed puzzle plus its selection state."""

from __future__ import annotations

import random
from typing import List, Optional, Sequence

from ..core.constants import Coord, GameState
from ..core.models import FoundWordEvent, Placement, SolveOverlay
from ..data.theme import RANDOM_THEME, ThemeCatalog
from .generator import GeneratorConfig, PuzzleGenerator, PuzzleResult
from .matcher import CompleteListener, FoundListener, SelectionMatcher
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)

CUSTOM_THEME = "Custom"


class WordSearchGame:
    """Builds puzzles from themes and routes drags and solve requests.

    Each call to :meth:`set_up_game` or :meth:`set_up_words` discards the
    previous puzzle and matcher entirely. Listeners registered on the game are
    re-attached to every new matcher.
    """

    def __init__(
        self,
        catalog: Optional[ThemeCatalog] = None,
        config: Optional[GeneratorConfig] = None,
    ) -> None:
        self.catalog = catalog or ThemeCatalog()
        self.config = config or GeneratorConfig()
        self.rng = random.Random(self.config.seed)
        self.generator = PuzzleGenerator(self.config)
        self.theme: Optional[str] = None
        self.puzzle: Optional[PuzzleResult] = None
        self.matcher: Optional[SelectionMatcher] = None
        self._found_listeners: List[FoundListener] = []
        self._complete_listeners: List[CompleteListener] = []

    # ------------------------------------------------------------------
    # Setup
    # ------------------------------------------------------------------
    def set_up_game(self, theme: str = RANDOM_THEME, grid_size: Optional[int] = None) -> str:
        title = self.catalog.select(theme, rng=self.rng)
        LOGGER.info("Setting up word search for theme '%s'", title)
        self._start(title, self.catalog.words(title), grid_size)
        return title

    def set_up_words(
        self, words: Sequence[str], title: str = CUSTOM_THEME, grid_size: Optional[int] = None
    ) -> str:
        LOGGER.info("Setting up word search for %s custom words", len(words))
        self._start(title, list(words), grid_size)
        return title

    def _start(self, title: str, words: Sequence[str], grid_size: Optional[int]) -> None:
        self.theme = None
        self.puzzle = None
        self.matcher = None
        puzzle = self.generator.generate_with_growth(words, grid_size=grid_size)
        matcher = SelectionMatcher(puzzle.grid, puzzle.placements)
        for listener in self._found_listeners:
            matcher.on_word_found(listener)
        for listener in self._complete_listeners:
            matcher.on_complete(listener)
        self.theme = title
        self.puzzle = puzzle
        self.matcher = matcher

    # ------------------------------------------------------------------
    # Listeners
    # ------------------------------------------------------------------
    def on_word_found(self, listener: FoundListener) -> None:
        self._found_listeners.append(listener)
        if self.matcher is not None:
            self.matcher.on_word_found(listener)

    def on_complete(self, listener: CompleteListener) -> None:
        self._complete_listeners.append(listener)
        if self.matcher is not None:
            self.matcher.on_complete(listener)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------
    def _require_matcher(self) -> SelectionMatcher:
        if self.matcher is None:
            raise RuntimeError("No game in progress; call set_up_game() first")
        return self.matcher

    def get_matrix(self) -> List[List[str]]:
        return self._require_matcher().grid.to_matrix()

    def get_list_of_words(self) -> List[str]:
        return [placement.label for placement in self._require_matcher().placements]

    def get_word_locations(self) -> List[Placement]:
        return list(self._require_matcher().placements)

    @property
    def state(self) -> GameState:
        return self.matcher.state if self.matcher is not None else GameState.SETUP

    @property
    def found_words(self) -> List[str]:
        return [p.label for p in self._require_matcher().found_words]

    @property
    def remaining_words(self) -> List[str]:
        return [p.label for p in self._require_matcher().remaining_words]

    # ------------------------------------------------------------------
    # Play
    # ------------------------------------------------------------------
    def pointer_down(self, row: int, col: int) -> bool:
        return self._require_matcher().pointer_down(row, col)

    def pointer_move(self, row: int, col: int) -> List[Coord]:
        return self._require_matcher().pointer_move(row, col)

    def pointer_up(self, row: int, col: int) -> Optional[FoundWordEvent]:
        return self._require_matcher().pointer_up(row, col)

    def select(self, start: Coord, end: Coord) -> Optional[FoundWordEvent]:
        matcher = self._require_matcher()
        if not matcher.pointer_down(*start):
            return None
        return matcher.pointer_up(*end)

    def solve(self) -> SolveOverlay:
        return self._require_matcher().solve()
