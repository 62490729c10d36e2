"""Data models supporting the word search engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Set, Tuple

from .constants import Coord, Direction


@dataclass
class Cell:
    """Represents a grid cell with metadata."""

    letter: Optional[str] = None
    revealed: bool = False
    part_of_placement_ids: Set[str] = field(default_factory=set)

    def is_empty(self) -> bool:
        return self.letter is None


@dataclass
class Placement:
    """A word placed in the grid along one of the eight directions."""

    id: str
    word: str
    start_row: int
    start_col: int
    direction: Direction
    label: str = ""
    _cells: Optional[List[Coord]] = field(default=None, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not self.label:
            self.label = self.word

    @property
    def length(self) -> int:
        return len(self.word)

    @property
    def cells(self) -> List[Coord]:
        if self._cells is None:
            dr, dc = self.direction.value
            self._cells = [
                (self.start_row + dr * i, self.start_col + dc * i) for i in range(self.length)
            ]
        return self._cells

    @property
    def start(self) -> Coord:
        return (self.start_row, self.start_col)

    @property
    def end(self) -> Coord:
        return self.cells[-1]


@dataclass(frozen=True)
class Selection:
    """A drag from one cell to another."""

    start: Coord
    end: Coord

    @property
    def direction(self) -> Optional[Direction]:
        try:
            return Direction.from_delta(self.end[0] - self.start[0], self.end[1] - self.start[1])
        except ValueError:
            return None

    @property
    def cells(self) -> List[Coord]:
        """Straight-line path from start to end, empty if not on a line."""

        direction = self.direction
        if direction is None:
            return []
        steps = max(abs(self.end[0] - self.start[0]), abs(self.end[1] - self.start[1]))
        return [
            (self.start[0] + direction.dr * i, self.start[1] + direction.dc * i)
            for i in range(steps + 1)
        ]


@dataclass(frozen=True)
class FoundWordEvent:
    """Emitted when a selection uncovers a word for the first time."""

    word: str
    label: str
    placement: Placement
    direction: Direction
    reversed: bool = False


@dataclass
class SolveOverlay:
    """Every placement path, in placement order, for the solve highlight."""

    paths: List[Tuple[Placement, List[Coord]]] = field(default_factory=list)

    @property
    def cells(self) -> Set[Coord]:
        return {coord for _, path in self.paths for coord in path}
