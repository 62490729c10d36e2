"""Pretty-print helpers for word search grids."""

from __future__ import annotations

import sys
from collections import Counter
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..engine.game import WordSearchGame
    from ..engine.grid import LetterGrid


def format_grid(grid: LetterGrid, *, show_revealed: bool = True) -> str:
    """Render the grid with row/column headers; revealed letters are bracketed."""

    width = grid.bounds.cols
    header_cells = [f"{c:>3}" for c in range(width)]
    lines = ["    " + "".join(header_cells)]
    lines.append("    " + "-" * (3 * width))
    for r in range(grid.bounds.rows):
        rendered = []
        for c in range(width):
            cell = grid.cell(r, c)
            letter = cell.letter or "."
            if show_revealed and cell.revealed:
                rendered.append(f"[{letter}]")
            else:
                rendered.append(f" {letter} ")
        lines.append(f"{r:>2} |" + "".join(rendered))
    return "\n".join(lines)


def pretty_print_grid(grid: LetterGrid, *, label: str | None = None, stream=None) -> None:
    """Print the grid in a human-friendly format."""

    stream = stream or sys.stdout
    if label:
        print(label, file=stream)
    print(format_grid(grid), file=stream)


def print_game_stats(game: WordSearchGame, *, stream=None) -> None:
    """Print grid + word list + placement stats for the current game."""

    stream = stream or sys.stdout
    matcher = game.matcher
    if matcher is None:
        print("No game in progress", file=stream)
        return

    grid = matcher.grid
    pretty_print_grid(grid, label=f"Theme: {game.theme}", stream=stream)

    placements = matcher.placements
    letter_cells = {coord for p in placements for coord in p.cells}
    total_cells = grid.bounds.rows * grid.bounds.cols
    axes = Counter(p.direction.axis.value.lower() for p in placements)
    lengths = [p.length for p in placements]

    print(file=stream)
    print("--- Grid ---", file=stream)
    print(f"  Size:          {grid.size} x {grid.size} ({total_cells} cells)", file=stream)
    print(
        f"  Word cells:    {len(letter_cells)} ({len(letter_cells) / total_cells * 100:.0f}%)",
        file=stream,
    )

    print(file=stream)
    print("--- Words ---", file=stream)
    for placement in placements:
        mark = "x" if placement.id in matcher.found_ids else " "
        print(f"  [{mark}] {placement.label}", file=stream)
    if lengths:
        print(f"  Length range:  {min(lengths)}-{max(lengths)} (avg {sum(lengths) / len(lengths):.1f})", file=stream)
        dist_parts = [f"{axis}:{count}" for axis, count in sorted(axes.items())]
        print(f"  Axes:          {' '.join(dist_parts)}", file=stream)
    print(f"  State:         {matcher.state.value}", file=stream)
