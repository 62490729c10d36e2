"""Deterministic rule validation for generated puzzles."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from ..core.constants import ALPHABET, Coord
from ..core.exceptions import ValidationError
from ..core.models import Placement
from .grid import LetterGrid
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


@dataclass
class ValidationResult:
    ok: bool
    messages: List[str]


class PuzzleValidator:
    """Runs deterministic validation over a finished grid and its placements."""

    def validate(
        self,
        grid: LetterGrid,
        placements: Sequence[Placement],
        words: Optional[Sequence[str]] = None,
    ) -> ValidationResult:
        messages: List[str] = []
        try:
            self._check_letters_valid(grid)
            self._check_placements(grid, placements)
            self._check_overlaps(placements)
            if words is not None:
                self._check_coverage(placements, words)
        except ValidationError as exc:
            messages.append(str(exc))
            LOGGER.error("Validation failed: %s", exc)
            return ValidationResult(ok=False, messages=messages)
        return ValidationResult(ok=True, messages=[])

    def _check_letters_valid(self, grid: LetterGrid) -> None:
        for r in range(grid.bounds.rows):
            for c in range(grid.bounds.cols):
                letter = grid.letter(r, c)
                if letter is None or len(letter) != 1 or letter not in ALPHABET:
                    raise ValidationError(f"Invalid letter {letter!r} at ({r},{c})")

    def _check_placements(self, grid: LetterGrid, placements: Sequence[Placement]) -> None:
        for placement in placements:
            for row, col in placement.cells:
                if not grid.bounds.contains(row, col):
                    raise ValidationError(
                        f"Placement {placement.id} '{placement.word}' leaves the grid at ({row},{col})"
                    )
            spelled = grid.letters_along(placement.cells)
            if spelled != placement.word:
                raise ValidationError(
                    f"Placement {placement.id} spells '{spelled}' instead of '{placement.word}'"
                )

    def _check_overlaps(self, placements: Sequence[Placement]) -> None:
        claimed: Dict[Coord, str] = {}
        paths = set()
        for placement in placements:
            path = frozenset(placement.cells)
            if path in paths:
                raise ValidationError(
                    f"Placement {placement.id} '{placement.word}' duplicates another path"
                )
            paths.add(path)
            for coord, letter in zip(placement.cells, placement.word):
                existing = claimed.setdefault(coord, letter)
                if existing != letter:
                    raise ValidationError(
                        f"Overlap conflict at {coord}: '{existing}' vs '{letter}'"
                    )

    def _check_coverage(self, placements: Sequence[Placement], words: Sequence[str]) -> None:
        expected = Counter(words)
        placed = Counter(placement.word for placement in placements)
        if expected != placed:
            missing = sorted((expected - placed).elements())
            extra = sorted((placed - expected).elements())
            raise ValidationError(f"Coverage mismatch: missing {missing}, unexpected {extra}")
