"""Puzzle generation.

Words are placed greedily, longest first, each with a bounded number of random
(direction, start) draws. Remaining cells are then filled with filler letters
and the result is validated. Generation is all-or-nothing: it either returns a
complete puzzle or raises :class:`UnplaceableWordError`.
"""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple

from ..core.constants import (DEFAULT_DENSITY_FACTOR, DEFAULT_GRID_MARGIN, DEFAULT_MAX_GRID_SIZE,
                              DEFAULT_PLACEMENT_ATTEMPTS, MIN_WORD_LENGTH, Direction,
                              FillerStrategy)
from ..core.exceptions import InvalidWordError, UnplaceableWordError, ValidationError
from ..core.models import Placement
from ..data.normalization import clean_word, display_label
from .grid import GridConfig, LetterGrid
from .validator import PuzzleValidator
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


@dataclass
class GeneratorConfig:
    seed: Optional[int] = None
    placement_attempts: int = DEFAULT_PLACEMENT_ATTEMPTS
    margin: int = DEFAULT_GRID_MARGIN
    density_factor: float = DEFAULT_DENSITY_FACTOR
    min_grid_size: int = 2
    max_grid_size: int = DEFAULT_MAX_GRID_SIZE
    growth_step: int = 1
    filler: FillerStrategy = FillerStrategy.UNIFORM
    min_word_length: int = MIN_WORD_LENGTH

    def to_grid_config(self, size: int, seed_override: Optional[int] = None) -> GridConfig:
        return GridConfig(
            size=size,
            rng_seed=seed_override if seed_override is not None else self.seed,
        )


@dataclass
class PuzzleResult:
    grid: LetterGrid
    placements: List[Placement]
    words: List[str] = field(default_factory=list)
    seed: Optional[int] = None

    @property
    def size(self) -> int:
        return self.grid.size


@dataclass
class WordEntry:
    """A normalized word plus the label shown to the player."""

    word: str
    label: str
    order: int


class PuzzleGenerator:
    """Places words into a square letter grid."""

    def __init__(self, config: Optional[GeneratorConfig] = None) -> None:
        self.config = config or GeneratorConfig()
        self.rng = random.Random(self.config.seed)
        self.validator = PuzzleValidator()

    # ------------------------------------------------------------------
    # Public entrypoints
    # ------------------------------------------------------------------
    def generate(self, words: Sequence[str], grid_size: Optional[int] = None) -> PuzzleResult:
        entries = self.prepare_words(words)
        size = grid_size if grid_size is not None else self.suggest_size([e.word for e in entries])
        if entries:
            longest = max(entries, key=lambda e: len(e.word))
            if len(longest.word) > size:
                raise UnplaceableWordError(longest.word, size)
        else:
            size = max(size, self.config.min_grid_size)
        LOGGER.info("Generating %sx%s puzzle for %s words", size, size, len(entries))

        grid = LetterGrid(self.config.to_grid_config(size, seed_override=self.rng.randint(0, 1_000_000)))
        placed: Dict[int, Placement] = {}
        for entry in sorted(entries, key=lambda e: len(e.word), reverse=True):
            placed[entry.order] = self._place(grid, entry)

        grid.fill_empty(self.config.filler)
        placements = [placed[order] for order in sorted(placed)]

        normalized = [entry.word for entry in entries]
        validation = self.validator.validate(grid, placements, normalized)
        if not validation.ok:
            raise ValidationError(f"Puzzle validation failed: {validation.messages}")
        LOGGER.info("Puzzle generation completed with %s words", len(placements))
        return PuzzleResult(grid=grid, placements=placements, words=normalized, seed=self.config.seed)

    def generate_with_growth(self, words: Sequence[str], grid_size: Optional[int] = None) -> PuzzleResult:
        """Generate, growing the grid after each unplaceable word until ``max_grid_size``."""

        size = grid_size if grid_size is not None else self.suggest_size(
            [entry.word for entry in self.prepare_words(words)]
        )
        max_size = max(self.config.max_grid_size, size)
        while True:
            try:
                return self.generate(words, grid_size=size)
            except UnplaceableWordError as exc:
                if size >= max_size:
                    LOGGER.error("Giving up at size %s: %s", size, exc)
                    raise
                LOGGER.warning("Generation at size %s failed: %s", size, exc)
                size = min(max_size, size + max(1, self.config.growth_step))

    # ------------------------------------------------------------------
    # Word preparation and sizing
    # ------------------------------------------------------------------
    def prepare_words(self, words: Sequence[str]) -> List[WordEntry]:
        entries: List[WordEntry] = []
        for order, raw in enumerate(words):
            word = clean_word(raw)
            if len(word) < self.config.min_word_length:
                raise InvalidWordError(raw)
            entries.append(WordEntry(word=word, label=display_label(raw), order=order))
        return entries

    def suggest_size(self, words: Sequence[str]) -> int:
        if not words:
            return self.config.min_grid_size
        longest = max(len(word) for word in words)
        total_letters = sum(len(word) for word in words)
        by_density = math.ceil(math.sqrt(total_letters * self.config.density_factor))
        return max(self.config.min_grid_size, longest + self.config.margin, by_density)

    # ------------------------------------------------------------------
    # Placement
    # ------------------------------------------------------------------
    def _place(self, grid: LetterGrid, entry: WordEntry) -> Placement:
        word = entry.word
        if len(word) > grid.size:
            raise UnplaceableWordError(word, grid.size)

        directions = list(Direction)
        for attempt in range(1, self.config.placement_attempts + 1):
            direction = self.rng.choice(directions)
            row, col = self._random_start(grid.size, len(word), direction)
            if not grid.can_place(word, row, col, direction):
                continue
            placement = Placement(
                id=f"W_{entry.order}",
                word=word,
                start_row=row,
                start_col=col,
                direction=direction,
                label=entry.label,
            )
            if grid.occupies_same_cells(placement.cells):
                continue
            grid.place_word(placement)
            LOGGER.debug(
                "Placed '%s' at (%s,%s) heading %s after %s draws",
                word, row, col, direction.name, attempt,
            )
            return placement
        raise UnplaceableWordError(word, grid.size)

    def _random_start(self, size: int, length: int, direction: Direction) -> Tuple[int, int]:
        return (
            self.rng.randint(*self._start_range(size, length, direction.dr)),
            self.rng.randint(*self._start_range(size, length, direction.dc)),
        )

    @staticmethod
    def _start_range(size: int, length: int, step: int) -> Tuple[int, int]:
        """Inclusive range of start indices keeping the path inside ``size`` on one axis."""

        if step > 0:
            return 0, size - length
        if step < 0:
            return length - 1, size - 1
        return 0, size - 1
