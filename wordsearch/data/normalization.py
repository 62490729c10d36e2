"""Shared helpers for word normalization."""

from __future__ import annotations

import re
import unicodedata

WORD_RE = re.compile(r"[^A-Z]")


def clean_word(text: str) -> str:
    """Return a normalized uppercase ASCII representation of ``text``.

    Accents are folded (``É`` -> ``E``) and everything that is not a letter,
    including spaces and apostrophes, is dropped.
    """

    if not text:
        return ""
    decomposed = unicodedata.normalize("NFKD", text)
    stripped = "".join(char for char in decomposed if not unicodedata.combining(char))
    return WORD_RE.sub("", stripped.upper())


def display_label(text: str) -> str:
    """Uppercase ``text`` and collapse inner whitespace for the word list."""

    return " ".join((text or "").split()).upper()


__all__ = ["clean_word", "display_label"]
