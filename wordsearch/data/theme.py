"""Theme catalog: titled groups of words to hide in a puzzle."""

from __future__ import annotations

import json
import random
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Sequence

from ..core.exceptions import ThemeError
from ..utils.logger import get_logger
from .normalization import display_label


LOGGER = get_logger(__name__)

RANDOM_THEME = "random"

ThemeGroups = List[List[str]]

DEFAULT_THEMES: Dict[str, ThemeGroups] = {
    "Math! (please don't run away)": [
        ["asymptote", "differential", "algorithm", "boolean"],
        ["euclidean", "integral", "logarithm", "matrix"],
        ["riemann", "polyhedron", "theta", "vector"],
        ["binomial", "pythagoras", "eccentricity", "unit circle"],
        ["derivative", "polar coordinates", "tangent", "scalene"],
    ],
    "Astronomy and Physics!": [
        ["circumpolar", "comet", "asteroid", "declination"],
        ["earthshine", "albedo", "quantum", "olivine"],
        ["pyroxene", "decoherence", "fermion", "quark"],
        ["gluon", "redshift", "inflaton", "planetesimal"],
        ["anthropic", "exogenesis", "atom", "planck"],
    ],
    "Philosophy!": [
        ["metaphysics", "modus ponens", "modus tollens", "analogy"],
        ["a priori", "a posteriori", "conditional", "nietzsche"],
        ["diogenes", "paradox", "occam's razor", "causality"],
        ["induction", "deduction", "ontology", "theology"],
        ["syllogism", "ethics", "karl marx", "pluralism"],
    ],
    "World Mythology :D": [
        ["chronos", "aether", "hypnos", "psyche"],
        ["jupiter", "sol", "chaos", "pandora"],
        ["thor", "valhalla", "amaterasu", "osiris"],
        ["mazu", "izanami", "susanoo", "xipe totec"],
        ["mercury", "bastet", "sekhmet", "ptah"],
    ],
    "Shades of Purple!": [
        ["violet", "periwinkle", "plum", "grape"],
        ["orchid", "wine", "mauve", "lavender"],
        ["lilac", "mulberry", "eggplant", "heliotrope"],
        ["liseran purple", "amethyst", "fuchsia", "pomp and power"],
        ["sangria", "boysenberry", "thistle", "heather"],
    ],
    "The Many Different Flavors of Cat!": [
        ["Russian Blue", "Siamese", "Persian", "Sphynx"],
        ["Ragdoll", "Singapura", "Snowshoe", "Turkish Van"],
        ["Maine Coon", "Devon Rex", "Charteux", "Scottish Fold"],
        ["Himalayan", "Ragamuffin", "Bombay", "Siberian"],
        ["Egyptian Mau", "Norwegian Forest Cat", "Abyssinian", "York Chocolate"],
    ],
}


class ThemeCatalog:
    """Ordered mapping of theme titles to groups of display words."""

    def __init__(self, themes: Optional[Mapping[str, Sequence[Sequence[str]]]] = None) -> None:
        source = DEFAULT_THEMES if themes is None else themes
        self.themes: Dict[str, ThemeGroups] = {}
        for title, groups in source.items():
            cleaned = [
                [display_label(word) for word in group if word and word.strip()]
                for group in groups
            ]
            cleaned = [group for group in cleaned if group]
            if not cleaned:
                raise ThemeError(f"Theme '{title}' has no words")
            self.themes[title] = cleaned
        if not self.themes:
            raise ThemeError("Theme catalog is empty")

    @classmethod
    def from_json(cls, path: Path | str) -> "ThemeCatalog":
        """Load ``{title: [[word, ...], ...]}`` or ``{title: [word, ...]}`` from disk."""

        path = Path(path)
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise ThemeError(f"Unable to read themes from {path}: {exc}") from exc
        if not isinstance(data, dict):
            raise ThemeError(f"Themes file {path} must contain a JSON object")

        themes: Dict[str, ThemeGroups] = {}
        for title, entries in data.items():
            if not isinstance(entries, list):
                raise ThemeError(f"Theme '{title}' must map to a list")
            if all(isinstance(entry, str) for entry in entries):
                themes[title] = [list(entries)]
            elif all(isinstance(group, list) and all(isinstance(w, str) for w in group) for group in entries):
                themes[title] = [list(group) for group in entries]
            else:
                raise ThemeError(f"Theme '{title}' mixes words and groups")
        LOGGER.info("Loaded %s themes from %s", len(themes), path)
        return cls(themes)

    def titles(self) -> List[str]:
        return list(self.themes)

    def select(self, selected: str = RANDOM_THEME, rng: Optional[random.Random] = None) -> str:
        """Resolve a requested theme; unknown titles fall back to the first theme."""

        titles = self.titles()
        if selected == RANDOM_THEME:
            return (rng or random.Random()).choice(titles)
        if selected in self.themes:
            return selected
        LOGGER.warning("Unknown theme '%s', falling back to '%s'", selected, titles[0])
        return titles[0]

    def groups(self, title: str) -> ThemeGroups:
        if title not in self.themes:
            raise ThemeError(f"Unknown theme '{title}' (known: {self.titles()})")
        return [list(group) for group in self.themes[title]]

    def words(self, title: str) -> List[str]:
        return [word for group in self.groups(title) for word in group]

    def __contains__(self, title: object) -> bool:
        return title in self.themes

    def __len__(self) -> int:
        return len(self.themes)
