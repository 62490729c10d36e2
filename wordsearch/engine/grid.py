"""Grid representation and helper utilities."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence

from ..core.constants import ALPHABET, ENGLISH_LETTER_FREQUENCIES, Bounds, Coord, Direction, FillerStrategy
from ..core.exceptions import UnplaceableWordError
from ..core.models import Cell, Placement
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


@dataclass
class GridConfig:
    """Configuration values driving the grid layout."""

    size: int
    rng_seed: Optional[int] = None

    def bounds(self) -> Bounds:
        return Bounds(rows=self.size, cols=self.size)


class LetterGrid:
    """Encapsulates the square letter grid with placement helpers."""

    def __init__(self, config: GridConfig) -> None:
        if config.size < 1:
            raise ValueError(f"Grid size must be positive, got {config.size}")
        self.config = config
        self.size = config.size
        self.bounds = config.bounds()
        self.rng = random.Random(config.rng_seed)
        self.cells: List[List[Cell]] = [
            [Cell() for _ in range(self.bounds.cols)] for _ in range(self.bounds.rows)
        ]
        self.placements: Dict[str, Placement] = {}
        self._filled_count = 0

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> "LetterGrid":
        """Build a fully lettered grid from row strings, e.g. ``["CAT", "DOG", "XXX"]``."""

        size = len(rows)
        if any(len(row) != size for row in rows):
            raise ValueError("Grid rows must form a square")
        grid = cls(GridConfig(size=size))
        for r, row in enumerate(rows):
            for c, letter in enumerate(row.upper()):
                grid.cells[r][c].letter = letter
        grid._filled_count = size * size
        return grid

    # ------------------------------------------------------------------
    # Word placement
    # ------------------------------------------------------------------
    def path_in_bounds(self, row: int, col: int, direction: Direction, length: int) -> bool:
        end_row = row + direction.dr * (length - 1)
        end_col = col + direction.dc * (length - 1)
        return self.bounds.contains(row, col) and self.bounds.contains(end_row, end_col)

    def can_place(self, word: str, row: int, col: int, direction: Direction) -> bool:
        """Check bounds and letter agreement along the path without mutating."""

        if not self.path_in_bounds(row, col, direction, len(word)):
            return False
        for index, letter in enumerate(word):
            existing = self.cells[row + direction.dr * index][col + direction.dc * index].letter
            if existing is not None and existing != letter:
                return False
        return True

    def occupies_same_cells(self, cells: Iterable[Coord]) -> bool:
        """True if an existing placement covers exactly these cells."""

        target = set(cells)
        return any(set(existing.cells) == target for existing in self.placements.values())

    def place_word(self, placement: Placement) -> None:
        word = placement.word
        if not self.can_place(word, placement.start_row, placement.start_col, placement.direction):
            raise UnplaceableWordError(word, self.size)
        if self.occupies_same_cells(placement.cells):
            raise UnplaceableWordError(word, self.size)

        for index, (row, col) in enumerate(placement.cells):
            cell = self.cells[row][col]
            if cell.is_empty():
                self._filled_count += 1
            cell.letter = word[index]
            cell.part_of_placement_ids.add(placement.id)
        self.placements[placement.id] = placement

    def fill_empty(self, strategy: FillerStrategy = FillerStrategy.UNIFORM) -> int:
        """Fill every empty cell with a filler letter; return how many were filled."""

        letters = list(ALPHABET)
        weights: Optional[List[float]] = None
        if strategy == FillerStrategy.RARE:
            weights = [1.0 / ENGLISH_LETTER_FREQUENCIES[letter] for letter in letters]

        filled = 0
        for row in self.cells:
            for cell in row:
                if cell.is_empty():
                    if weights is None:
                        cell.letter = self.rng.choice(letters)
                    else:
                        cell.letter = self.rng.choices(letters, weights=weights, k=1)[0]
                    filled += 1
        self._filled_count += filled
        LOGGER.debug("Filled %s empty cells using %s filler", filled, strategy.value)
        return filled

    # ------------------------------------------------------------------
    # Reveal state
    # ------------------------------------------------------------------
    def reveal(self, cells: Iterable[Coord]) -> None:
        for row, col in cells:
            self.cells[row][col].revealed = True

    def revealed_cells(self) -> List[Coord]:
        return [
            (r, c)
            for r in range(self.bounds.rows)
            for c in range(self.bounds.cols)
            if self.cells[r][c].revealed
        ]

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def cell(self, row: int, col: int) -> Cell:
        return self.cells[row][col]

    def letter(self, row: int, col: int) -> Optional[str]:
        return self.cells[row][col].letter

    def letters_along(self, cells: Iterable[Coord]) -> str:
        return "".join(self.cells[r][c].letter or "" for r, c in cells)

    @property
    def is_full(self) -> bool:
        return self._filled_count == self.bounds.rows * self.bounds.cols

    @property
    def filled_ratio(self) -> float:
        return self._filled_count / (self.bounds.rows * self.bounds.cols)

    def to_matrix(self) -> List[List[str]]:
        return [[cell.letter or "" for cell in row] for row in self.cells]

    def to_rows(self) -> List[str]:
        return ["".join(row) for row in self.to_matrix()]

    # ------------------------------------------------------------------
    # Serialization helpers
    # ------------------------------------------------------------------
    def to_jsonable(self) -> List[List[dict]]:
        return [
            [
                {
                    "letter": cell.letter,
                    "revealed": cell.revealed,
                    "part_of_placement_ids": sorted(cell.part_of_placement_ids),
                }
                for cell in row
            ]
            for row in self.cells
        ]
