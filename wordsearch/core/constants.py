"""Shared constants and enumerations for the word search engine."""

from __future__ import annotations

import string
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple


ALPHABET = string.ascii_uppercase

# Relative English letter frequencies (percent), used to bias filler letters.
ENGLISH_LETTER_FREQUENCIES: Dict[str, float] = {
    "A": 8.2, "B": 1.5, "C": 2.8, "D": 4.3, "E": 12.7, "F": 2.2, "G": 2.0,
    "H": 6.1, "I": 7.0, "J": 0.15, "K": 0.77, "L": 4.0, "M": 2.4, "N": 6.7,
    "O": 7.5, "P": 1.9, "Q": 0.095, "R": 6.0, "S": 6.3, "T": 9.1, "U": 2.8,
    "V": 0.98, "W": 2.4, "X": 0.15, "Y": 2.0, "Z": 0.074,
}

DEFAULT_PLACEMENT_ATTEMPTS = 100
DEFAULT_GRID_MARGIN = 1
DEFAULT_DENSITY_FACTOR = 2.0
DEFAULT_MAX_GRID_SIZE = 30
MIN_WORD_LENGTH = 2


class Axis(str, Enum):
    """The four line axes a word can lie on."""

    HORIZONTAL = "HORIZONTAL"
    VERTICAL = "VERTICAL"
    DIAGONAL = "DIAGONAL"
    ANTI_DIAGONAL = "ANTI_DIAGONAL"


class Direction(Enum):
    """The eight unit steps a word can follow, as ``(dr, dc)``."""

    EAST = (0, 1)
    WEST = (0, -1)
    SOUTH = (1, 0)
    NORTH = (-1, 0)
    SOUTH_EAST = (1, 1)
    NORTH_WEST = (-1, -1)
    SOUTH_WEST = (1, -1)
    NORTH_EAST = (-1, 1)

    @property
    def dr(self) -> int:
        return self.value[0]

    @property
    def dc(self) -> int:
        return self.value[1]

    @property
    def axis(self) -> Axis:
        if self.dr == 0:
            return Axis.HORIZONTAL
        if self.dc == 0:
            return Axis.VERTICAL
        if self.dr == self.dc:
            return Axis.DIAGONAL
        return Axis.ANTI_DIAGONAL

    @property
    def reverse(self) -> "Direction":
        return Direction((-self.dr, -self.dc))

    @classmethod
    def from_delta(cls, d_row: int, d_col: int) -> "Direction":
        """Return the direction of a non-zero straight-line delta.

        Raises ``ValueError`` when the delta is zero or not on one of the
        eight lines.
        """

        if d_row == 0 and d_col == 0:
            raise ValueError("Zero-length delta has no direction")
        if d_row != 0 and d_col != 0 and abs(d_row) != abs(d_col):
            raise ValueError(f"Delta {(d_row, d_col)} is not a straight line")
        return cls((_sign(d_row), _sign(d_col)))


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


class GameState(str, Enum):
    """Lifecycle of a single game instance."""

    SETUP = "SETUP"
    PLAYING = "PLAYING"
    COMPLETED = "COMPLETED"


class FillerStrategy(str, Enum):
    """How empty cells are filled once all words are placed."""

    UNIFORM = "uniform"
    RARE = "rare"


@dataclass(frozen=True)
class Bounds:
    """Square grid bounds helper."""

    rows: int
    cols: int

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols


Coord = Tuple[int, int]
