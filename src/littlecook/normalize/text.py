"""Text normalization helpers shared by the parser and the categorizer."""

import re
import unicodedata

_APOSTROPHES = re.compile(r"[‘’ʼ`´]")
_WHITESPACE = re.compile(r"\s+")
_LIGATURES = str.maketrans({"œ": "oe", "Œ": "OE", "æ": "ae", "Æ": "AE"})


def normalize_text(text: str) -> str:
    """
    Lowercase, trim and collapse whitespace.

    Typographic apostrophes are folded to a plain ``'`` so that
    ``d’ail`` and ``d'ail`` read the same.
    """
    if not text:
        return ""
    text = _APOSTROPHES.sub("'", text.lower())
    return _WHITESPACE.sub(" ", text).strip()


def fold_diacritics(text: str) -> str:
    """Strip accents and expand ligatures (``crème`` -> ``creme``, ``œuf`` -> ``oeuf``)."""
    decomposed = unicodedata.normalize("NFKD", text.translate(_LIGATURES))
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def fold_text(text: str) -> str:
    """Normalize text for case- and diacritic-insensitive comparisons."""
    return fold_diacritics(normalize_text(text))
