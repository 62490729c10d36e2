import unittest
from collections import Counter
from typing import Dict

from wordsearch.core.constants import ALPHABET, Coord, Direction, FillerStrategy
from wordsearch.core.exceptions import InvalidWordError, UnplaceableWordError
from wordsearch.core.models import Placement
from wordsearch.engine.generator import GeneratorConfig, PuzzleGenerator
from wordsearch.engine.grid import LetterGrid
from wordsearch.engine.validator import PuzzleValidator


ANIMALS = ["CAT", "DOG", "HORSE", "ZEBRA", "LLAMA", "OTTER", "PANDA", "EAGLE"]


class GeneratorInvariantTests(unittest.TestCase):
    def assert_valid_puzzle(self, result, words) -> None:
        grid = result.grid
        self.assertTrue(grid.is_full)
        for row in grid.to_rows():
            self.assertEqual(len(row), grid.size)
            self.assertTrue(all(letter in ALPHABET for letter in row))

        claimed: Dict[Coord, str] = {}
        for placement in result.placements:
            for row, col in placement.cells:
                self.assertTrue(grid.bounds.contains(row, col))
            self.assertEqual(grid.letters_along(placement.cells), placement.word)
            for coord, letter in zip(placement.cells, placement.word):
                self.assertEqual(claimed.setdefault(coord, letter), letter)

        self.assertEqual(Counter(p.word for p in result.placements), Counter(words))

    def test_generated_placements_hold_across_seeds(self) -> None:
        for seed in range(10):
            generator = PuzzleGenerator(GeneratorConfig(seed=seed))
            result = generator.generate(ANIMALS)
            self.assert_valid_puzzle(result, ANIMALS)

    def test_placements_keep_input_order(self) -> None:
        result = PuzzleGenerator(GeneratorConfig(seed=4)).generate(ANIMALS)
        self.assertEqual([p.word for p in result.placements], ANIMALS)
        self.assertEqual([p.id for p in result.placements], [f"W_{i}" for i in range(len(ANIMALS))])

    def test_same_seed_reproduces_layout(self) -> None:
        first = PuzzleGenerator(GeneratorConfig(seed=99)).generate(ANIMALS)
        second = PuzzleGenerator(GeneratorConfig(seed=99)).generate(ANIMALS)
        self.assertEqual(first.grid.to_rows(), second.grid.to_rows())
        self.assertEqual(
            [(p.start, p.direction) for p in first.placements],
            [(p.start, p.direction) for p in second.placements],
        )

    def test_duplicate_words_never_share_a_path(self) -> None:
        result = PuzzleGenerator(GeneratorConfig(seed=5)).generate(["ECHO", "ECHO"], grid_size=6)
        first, second = result.placements
        self.assertNotEqual(set(first.cells), set(second.cells))

    def test_rare_filler_strategy(self) -> None:
        config = GeneratorConfig(seed=2, filler=FillerStrategy.RARE)
        result = PuzzleGenerator(config).generate(["PYTHON", "SNAKE"])
        self.assert_valid_puzzle(result, ["PYTHON", "SNAKE"])

    def test_theme_style_words_are_normalized(self) -> None:
        result = PuzzleGenerator(GeneratorConfig(seed=1)).generate(["occam's razor", "a priori"])
        self.assertEqual([p.word for p in result.placements], ["OCCAMSRAZOR", "APRIORI"])
        self.assertEqual([p.label for p in result.placements], ["OCCAM'S RAZOR", "A PRIORI"])
        self.assertEqual(result.words, ["OCCAMSRAZOR", "APRIORI"])


class GeneratorSizingTests(unittest.TestCase):
    def test_suggest_size_covers_longest_word(self) -> None:
        generator = PuzzleGenerator(GeneratorConfig(margin=1, density_factor=2.0))
        self.assertEqual(generator.suggest_size(["ABCDEFGHIJ"]), 11)

    def test_suggest_size_scales_with_total_letters(self) -> None:
        generator = PuzzleGenerator(GeneratorConfig(margin=1, density_factor=2.0))
        # 20 words x 5 letters = 100 letters -> sqrt(200) -> 15
        self.assertEqual(generator.suggest_size(["ABCDE"] * 20), 15)

    def test_explicit_size_is_used(self) -> None:
        result = PuzzleGenerator(GeneratorConfig(seed=3)).generate(["CAT", "DOG"], grid_size=7)
        self.assertEqual(result.size, 7)


class GeneratorFailureTests(unittest.TestCase):
    def test_word_longer_than_grid_is_unplaceable(self) -> None:
        with self.assertRaises(UnplaceableWordError) as ctx:
            PuzzleGenerator(GeneratorConfig(seed=1)).generate(["CAT", "ELEPHANT"], grid_size=5)
        self.assertEqual(ctx.exception.word, "ELEPHANT")

    def test_crowded_grid_fails_cleanly(self) -> None:
        # Every cell of a 2x2 grid is taken by AB and CD; EF cannot agree with any letter.
        generator = PuzzleGenerator(GeneratorConfig(seed=1, placement_attempts=200))
        with self.assertRaises(UnplaceableWordError) as ctx:
            generator.generate(["AB", "CD", "EF"], grid_size=2)
        self.assertIn(ctx.exception.word, {"AB", "CD", "EF"})

    def test_non_positive_size_is_unplaceable(self) -> None:
        for size in (0, -3):
            with self.assertRaises(UnplaceableWordError) as ctx:
                PuzzleGenerator(GeneratorConfig(seed=1)).generate(["CAT"], grid_size=size)
            self.assertEqual(ctx.exception.word, "CAT")
            self.assertEqual(ctx.exception.grid_size, size)

    def test_growth_recovers_from_zero_size(self) -> None:
        result = PuzzleGenerator(GeneratorConfig(seed=1)).generate_with_growth(["CAT"], grid_size=0)
        self.assertGreaterEqual(result.size, 3)
        self.assertEqual([p.word for p in result.placements], ["CAT"])

    def test_empty_word_list_uses_minimum_size(self) -> None:
        result = PuzzleGenerator(GeneratorConfig(seed=1, min_grid_size=2)).generate([], grid_size=0)
        self.assertEqual(result.size, 2)
        self.assertEqual(result.placements, [])

    def test_too_short_word_is_invalid(self) -> None:
        with self.assertRaises(InvalidWordError):
            PuzzleGenerator().generate(["CAT", "'"])
        with self.assertRaises(InvalidWordError):
            PuzzleGenerator().generate(["A"])

    def test_growth_recovers_from_small_grid(self) -> None:
        generator = PuzzleGenerator(GeneratorConfig(seed=8, max_grid_size=10))
        result = generator.generate_with_growth(["ELEPHANT", "CAT"], grid_size=5)
        self.assertGreaterEqual(result.size, 8)
        self.assertEqual([p.word for p in result.placements], ["ELEPHANT", "CAT"])

    def test_growth_gives_up_at_max_size(self) -> None:
        generator = PuzzleGenerator(GeneratorConfig(seed=8, max_grid_size=6))
        with self.assertRaises(UnplaceableWordError) as ctx:
            generator.generate_with_growth(["ELEPHANTS"], grid_size=4)
        self.assertEqual(ctx.exception.word, "ELEPHANTS")
        self.assertEqual(ctx.exception.grid_size, 6)


class ValidatorTests(unittest.TestCase):
    def test_valid_example_passes(self) -> None:
        grid = LetterGrid.from_rows(["CAT", "DOG", "XXX"])
        placements = [
            Placement(id="W_0", word="CAT", start_row=0, start_col=0, direction=Direction.EAST),
            Placement(id="W_1", word="DOG", start_row=1, start_col=0, direction=Direction.EAST),
        ]
        result = PuzzleValidator().validate(grid, placements, ["CAT", "DOG"])
        self.assertTrue(result.ok)

    def test_misspelled_placement_fails(self) -> None:
        grid = LetterGrid.from_rows(["CAT", "DOG", "XXX"])
        placements = [Placement(id="W_0", word="COG", start_row=0, start_col=0, direction=Direction.EAST)]
        result = PuzzleValidator().validate(grid, placements)
        self.assertFalse(result.ok)
        self.assertIn("COG", result.messages[0])

    def test_missing_word_fails_coverage(self) -> None:
        grid = LetterGrid.from_rows(["CAT", "DOG", "XXX"])
        placements = [Placement(id="W_0", word="CAT", start_row=0, start_col=0, direction=Direction.EAST)]
        result = PuzzleValidator().validate(grid, placements, ["CAT", "DOG"])
        self.assertFalse(result.ok)

    def test_out_of_bounds_placement_fails(self) -> None:
        grid = LetterGrid.from_rows(["CAT", "DOG", "XXX"])
        placements = [Placement(id="W_0", word="CATS", start_row=0, start_col=0, direction=Direction.EAST)]
        self.assertFalse(PuzzleValidator().validate(grid, placements).ok)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
