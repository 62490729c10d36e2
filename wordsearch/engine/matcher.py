"""Selection matching and solve highlighting for a single game instance.

The matcher is driven by pointer events expressed in grid coordinates. Only
``pointer_up`` (or :meth:`SelectionMatcher.select`) can change the found-word
set; ``pointer_move`` updates the transient highlight path and nothing else.
"""

from __future__ import annotations

from typing import Callable, Dict, List, Optional, Sequence, Set

from ..core.constants import Coord, GameState
from ..core.models import FoundWordEvent, Placement, Selection, SolveOverlay
from .grid import LetterGrid
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)

FoundListener = Callable[[FoundWordEvent], None]
CompleteListener = Callable[[], None]


class SelectionMatcher:
    """Matches straight-line drags against placed words."""

    def __init__(self, grid: LetterGrid, placements: Sequence[Placement]) -> None:
        self.grid = grid
        self.placements: List[Placement] = list(placements)
        self.state = GameState.SETUP
        self.found_ids: Set[str] = set()
        self._drag_start: Optional[Coord] = None
        self._highlight: List[Coord] = []
        self._found_listeners: List[FoundListener] = []
        self._complete_listeners: List[CompleteListener] = []
        self._paths: Dict[tuple, Placement] = {}
        for placement in self.placements:
            self._paths.setdefault(tuple(placement.cells), placement)
        self.state = GameState.PLAYING if self.placements else GameState.COMPLETED

    # ------------------------------------------------------------------
    # Listeners
    # ------------------------------------------------------------------
    def on_word_found(self, listener: FoundListener) -> None:
        self._found_listeners.append(listener)

    def on_complete(self, listener: CompleteListener) -> None:
        self._complete_listeners.append(listener)

    # ------------------------------------------------------------------
    # Pointer events
    # ------------------------------------------------------------------
    def pointer_down(self, row: int, col: int) -> bool:
        if self.state != GameState.PLAYING or not self.grid.bounds.contains(row, col):
            self._drag_start = None
            self._highlight = []
            return False
        self._drag_start = (row, col)
        self._highlight = [(row, col)]
        return True

    def pointer_move(self, row: int, col: int) -> List[Coord]:
        """Update and return the in-progress highlight path."""

        if self._drag_start is None:
            return []
        if self.grid.bounds.contains(row, col):
            path = Selection(self._drag_start, (row, col)).cells
            self._highlight = path or [self._drag_start]
        return list(self._highlight)

    def pointer_up(self, row: int, col: int) -> Optional[FoundWordEvent]:
        start = self._drag_start
        self._drag_start = None
        self._highlight = []
        if start is None:
            return None
        return self.select(start, (row, col))

    @property
    def highlight(self) -> List[Coord]:
        return list(self._highlight)

    @property
    def is_dragging(self) -> bool:
        return self._drag_start is not None

    # ------------------------------------------------------------------
    # Matching
    # ------------------------------------------------------------------
    def match_selection(self, start: Coord, end: Coord) -> Optional[FoundWordEvent]:
        """Return the event a selection would produce, without changing state."""

        if not (self.grid.bounds.contains(*start) and self.grid.bounds.contains(*end)):
            return None
        selection = Selection(start, end)
        path = selection.cells
        if len(path) < 2:
            LOGGER.debug("Selection %s -> %s is not a straight line", start, end)
            return None

        forward = tuple(path)
        placement = self._paths.get(forward)
        is_reversed = False
        if placement is None:
            placement = self._paths.get(forward[::-1])
            is_reversed = placement is not None
        if placement is None:
            return None
        return FoundWordEvent(
            word=placement.word,
            label=placement.label,
            placement=placement,
            direction=selection.direction,
            reversed=is_reversed,
        )

    def select(self, start: Coord, end: Coord) -> Optional[FoundWordEvent]:
        """Resolve a completed drag; reveal and record the word on a first match."""

        if self.state != GameState.PLAYING:
            return None
        event = self.match_selection(start, end)
        if event is None:
            return None
        if event.placement.id in self.found_ids:
            LOGGER.debug("Ignoring reselection of '%s'", event.word)
            return None

        self.found_ids.add(event.placement.id)
        self.grid.reveal(event.placement.cells)
        LOGGER.info("Found '%s' (%s/%s)", event.word, len(self.found_ids), len(self.placements))
        completed = len(self.found_ids) == len(self.placements)
        if completed:
            self.state = GameState.COMPLETED
        for listener in self._found_listeners:
            listener(event)
        if completed:
            self._notify_complete()
        return event

    # ------------------------------------------------------------------
    # Solve
    # ------------------------------------------------------------------
    def solve(self) -> SolveOverlay:
        """Reveal every placement and end the game."""

        overlay = SolveOverlay()
        for placement in self.placements:
            self.grid.reveal(placement.cells)
            self.found_ids.add(placement.id)
            overlay.paths.append((placement, list(placement.cells)))
        self._drag_start = None
        self._highlight = []
        if self.state != GameState.COMPLETED:
            LOGGER.info("Puzzle solved with %s words revealed", len(self.placements))
            self.state = GameState.COMPLETED
            self._notify_complete()
        return overlay

    def _notify_complete(self) -> None:
        for listener in self._complete_listeners:
            listener()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @property
    def found_words(self) -> List[Placement]:
        return [p for p in self.placements if p.id in self.found_ids]

    @property
    def remaining_words(self) -> List[Placement]:
        return [p for p in self.placements if p.id not in self.found_ids]

    @property
    def is_complete(self) -> bool:
        return self.state == GameState.COMPLETED
