"""CLI entrypoint for the word search puzzle generator."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from wordsearch.core.constants import (DEFAULT_MAX_GRID_SIZE, DEFAULT_PLACEMENT_ATTEMPTS, Coord,
                                       FillerStrategy)
from wordsearch.core.exceptions import WordSearchError
from wordsearch.data.theme import RANDOM_THEME, ThemeCatalog
from wordsearch.engine.game import WordSearchGame
from wordsearch.engine.generator import GeneratorConfig
from wordsearch.utils.logger import configure_logging
from wordsearch.utils.pretty import print_game_stats


def parse_words_file(path: Path) -> List[str]:
    """Read words from a file, one entry per line. Blank lines and # comments are skipped."""
    entries: List[str] = []
    for line in path.read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        entries.append(line)
    return entries


def parse_selection(text: str) -> Tuple[Coord, Coord]:
    """Parse ``R1,C1:R2,C2`` into a pair of cells."""
    try:
        start_text, end_text = text.split(":")
        start = tuple(int(part) for part in start_text.split(","))
        end = tuple(int(part) for part in end_text.split(","))
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Invalid selection '{text}', expected R1,C1:R2,C2") from exc
    if len(start) != 2 or len(end) != 2:
        raise argparse.ArgumentTypeError(f"Invalid selection '{text}', expected R1,C1:R2,C2")
    return (start[0], start[1]), (end[0], end[1])


def positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Expected a positive integer, got '{text}'") from exc
    if value < 1:
        raise argparse.ArgumentTypeError(f"Expected a positive integer, got '{text}'")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate themed word search puzzles",
    )
    parser.add_argument(
        "--theme",
        type=str,
        default=RANDOM_THEME,
        help="Theme title to use ('random' picks one; unknown titles fall back to the first theme)",
    )
    parser.add_argument("--list-themes", action="store_true", help="List theme titles and exit")
    parser.add_argument(
        "--themes-file",
        type=Path,
        metavar="FILE",
        help="JSON file mapping theme titles to word lists or groups of words",
    )
    parser.add_argument(
        "--words",
        nargs="+",
        metavar="WORD",
        help="Explicit words to hide instead of a theme",
    )
    parser.add_argument(
        "--words-file",
        type=Path,
        metavar="FILE",
        help="File with one word per line (# comments and blank lines ignored)",
    )
    parser.add_argument(
        "--size",
        type=positive_int,
        default=None,
        help="Grid size in cells (default: derived from words)",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    parser.add_argument(
        "--attempts",
        type=positive_int,
        default=DEFAULT_PLACEMENT_ATTEMPTS,
        help="Random placement draws per word before giving up",
    )
    parser.add_argument(
        "--max-size",
        type=positive_int,
        default=DEFAULT_MAX_GRID_SIZE,
        help="Largest grid size to grow to when a word does not fit",
    )
    parser.add_argument(
        "--filler",
        type=str,
        choices=[strategy.value for strategy in FillerStrategy],
        default=FillerStrategy.UNIFORM.value,
        help="Filler letter strategy for empty cells",
    )
    parser.add_argument(
        "--select",
        action="append",
        type=parse_selection,
        default=[],
        metavar="R1,C1:R2,C2",
        help="Simulate a drag from one cell to another (repeatable)",
    )
    parser.add_argument("--solve", action="store_true", help="Reveal every word after the selections")
    parser.add_argument("--output", type=Path, help="Optional path to JSON output")
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def build_payload(game: WordSearchGame, selections: List[Dict[str, Any]]) -> Dict[str, Any]:
    matcher = game.matcher
    if matcher is None:
        raise RuntimeError("No game in progress; nothing to export")
    return {
        "theme": game.theme,
        "size": matcher.grid.size,
        "grid": matcher.grid.to_rows(),
        "words": game.get_list_of_words(),
        "placements": [
            {
                "id": placement.id,
                "word": placement.word,
                "label": placement.label,
                "start": list(placement.start),
                "end": list(placement.end),
                "direction": placement.direction.name,
            }
            for placement in game.get_word_locations()
        ],
        "selections": selections,
        "found": game.found_words,
        "revealed": [list(coord) for coord in matcher.grid.revealed_cells()],
        "state": game.state.value,
        "seed": game.config.seed,
    }


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = getattr(logging, args.log_level.upper(), logging.INFO)
    configure_logging(level)

    catalog = ThemeCatalog.from_json(args.themes_file) if args.themes_file else ThemeCatalog()
    if args.list_themes:
        for title in catalog.titles():
            print(title)
        return

    user_words: List[str] = []
    if args.words:
        user_words.extend(args.words)
    if args.words_file:
        user_words.extend(parse_words_file(args.words_file))

    config = GeneratorConfig(
        seed=args.seed,
        placement_attempts=args.attempts,
        max_grid_size=args.max_size,
        filler=FillerStrategy(args.filler),
    )
    game = WordSearchGame(catalog=catalog, config=config)
    try:
        if user_words:
            game.set_up_words(user_words, grid_size=args.size)
        else:
            game.set_up_game(args.theme, grid_size=args.size)
    except WordSearchError as exc:
        parser.exit(1, f"error: {exc}\n")

    selections: List[Dict[str, Any]] = []
    for start, end in args.select:
        event = game.select(start, end)
        selections.append(
            {
                "start": list(start),
                "end": list(end),
                "found": event.label if event else None,
            }
        )

    if args.solve:
        game.solve()

    print_game_stats(game, stream=sys.stdout if args.output else sys.stderr)

    output_text = json.dumps(build_payload(game, selections), ensure_ascii=False, indent=2)
    if args.output:
        args.output.write_text(output_text, encoding="utf-8")
    else:
        print(output_text)


if __name__ == "__main__":  # pragma: no cover
    main()
