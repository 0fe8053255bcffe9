"""Unit tables and leading quantity/unit parsing for ingredient text."""

import math
import re
from dataclasses import dataclass

DEFAULT_UNIT = "pièce"


# =============================================================================
# Unit Table
# =============================================================================

# Ordered (surface form, canonical unit) pairs. The first surface form that
# matches at the start of the text wins, so the order is part of the contract.
UNIT_ALIASES: tuple[tuple[str, str], ...] = (
    # Volume
    ("ml", "ml"),
    ("millilitre", "ml"),
    ("millilitres", "ml"),
    ("cl", "cl"),
    ("centilitre", "cl"),
    ("centilitres", "cl"),
    ("dl", "dl"),
    ("décilitre", "dl"),
    ("décilitres", "dl"),
    ("l", "l"),
    ("litre", "l"),
    ("litres", "l"),
    ("tasse", "tasse"),
    ("tasses", "tasse"),
    ("cup", "tasse"),
    ("cups", "tasse"),
    ("cuillère à café", "c. à café"),
    ("cuillères à café", "c. à café"),
    ("c. à café", "c. à café"),
    ("cac", "c. à café"),
    ("tsp", "c. à café"),
    ("teaspoon", "c. à café"),
    ("teaspoons", "c. à café"),
    ("cuillère à soupe", "c. à soupe"),
    ("cuillères à soupe", "c. à soupe"),
    ("c. à soupe", "c. à soupe"),
    ("cas", "c. à soupe"),
    ("tbsp", "c. à soupe"),
    ("tablespoon", "c. à soupe"),
    ("tablespoons", "c. à soupe"),
    # Weight
    ("g", "g"),
    ("gramme", "g"),
    ("grammes", "g"),
    ("gr", "g"),
    ("kg", "kg"),
    ("kilogramme", "kg"),
    ("kilogrammes", "kg"),
    ("oz", "oz"),
    ("ounce", "oz"),
    ("ounces", "oz"),
    ("lb", "lb"),
    ("pound", "lb"),
    ("pounds", "lb"),
    # Pieces
    ("pièce", "pièce"),
    ("pièces", "pièce"),
    ("pc", "pièce"),
    ("piece", "pièce"),
    ("pieces", "pièce"),
    ("unité", "pièce"),
    ("unités", "pièce"),
    ("item", "pièce"),
    ("items", "pièce"),
    # Special measures
    ("pincée", "pincée"),
    ("pincées", "pincée"),
    ("pinch", "pincée"),
    ("poignée", "poignée"),
    ("poignées", "poignée"),
    ("handful", "poignée"),
    ("tranche", "tranche"),
    ("tranches", "tranche"),
    ("slice", "tranche"),
    ("slices", "tranche"),
    ("gousse", "gousse"),
    ("gousses", "gousse"),
    ("clove", "gousse"),
    ("cloves", "gousse"),
    ("feuille", "feuille"),
    ("feuilles", "feuille"),
    ("leaf", "feuille"),
    ("leaves", "feuille"),
    ("botte", "botte"),
    ("bottes", "botte"),
    ("bunch", "botte"),
    ("bunches", "botte"),
    ("brin", "brin"),
    ("brins", "brin"),
    ("sprig", "brin"),
    ("sprigs", "brin"),
)

# A unit token must be followed by a word boundary, so "litre" never matches "l"
# and "gousses" never matches "gousse". An apostrophe does not end a unit
# ("l'huile" is not one litre of "huile").
_UNIT_PATTERNS: tuple[tuple[re.Pattern[str], str], ...] = tuple(
    (re.compile(rf"^{re.escape(alias)}(?![\w'])"), canonical) for alias, canonical in UNIT_ALIASES
)

WORD_NUMBERS: dict[str, int] = {
    "un": 1,
    "une": 1,
    "deux": 2,
    "trois": 3,
    "quatre": 4,
    "cinq": 5,
    "six": 6,
    "sept": 7,
    "huit": 8,
    "neuf": 9,
    "dix": 10,
}


# =============================================================================
# Quantity Parsing
# =============================================================================

_MIXED_NUMBER = re.compile(r"^(\d+)\s+(\d+)/(\d+)")
_FRACTION = re.compile(r"^(\d+)/(\d+)")
_DECIMAL = re.compile(r"^(\d+)[.,](\d+)")
_INTEGER = re.compile(r"^(\d+)")
_WORD_NUMBER = re.compile(r"^(une|un|deux|trois|quatre|cinq|six|sept|huit|neuf|dix)\b")


@dataclass(frozen=True)
class QuantityMatch:
    """A quantity read from the start of a text, with what is left after it."""

    value: float
    remaining: str


def _leading_number(text: str) -> tuple[float, int] | None:
    """Value and end offset of a leading digit-based number, in priority order."""
    if match := _MIXED_NUMBER.match(text):
        whole, num, denom = (int(g) for g in match.groups())
        if denom:
            return whole + num / denom, match.end()

    if match := _FRACTION.match(text):
        num, denom = (int(g) for g in match.groups())
        if denom:
            return num / denom, match.end()

    if match := _DECIMAL.match(text):
        return float(f"{match.group(1)}.{match.group(2)}"), match.end()

    if match := _INTEGER.match(text):
        return float(match.group(1)), match.end()

    return None


def match_numeric_quantity(text: str) -> QuantityMatch | None:
    """
    Read a leading digit-based quantity.

    Tries, in priority order: mixed number ("1 1/2"), fraction ("1/2"),
    decimal with "." or "," ("1,5") and integer. Word numbers are not
    considered here. Fractions with a zero denominator are not quantities,
    and neither are digit runs too large for a finite float.
    """
    text = text.strip()

    try:
        found = _leading_number(text)
    except (ValueError, OverflowError):
        return None

    if found is None:
        return None
    value, end = found
    if not math.isfinite(value):
        return None
    return QuantityMatch(value, text[end:].strip())


def parse_quantity(text: str) -> QuantityMatch:
    """
    Parse a leading quantity, falling back to French word numbers.

    When nothing matches the quantity is 1 and no text is consumed.
    """
    numeric = match_numeric_quantity(text)
    if numeric is not None:
        return numeric

    text = text.strip()
    if match := _WORD_NUMBER.match(text):
        return QuantityMatch(float(WORD_NUMBERS[match.group(1)]), text[match.end() :].strip())

    return QuantityMatch(1.0, text)


def parse_unit(text: str) -> tuple[str, str]:
    """
    Parse a leading unit token.

    Returns:
        Tuple of (canonical_unit, remaining_text). Defaults to "pièce" with
        nothing consumed when no known unit starts the text.
    """
    text = text.strip()
    for pattern, canonical in _UNIT_PATTERNS:
        if match := pattern.match(text):
            return canonical, text[match.end() :].strip()
    return DEFAULT_UNIT, text


def canonical_unit(unit: str | None) -> str:
    """Map a unit surface form to its canonical spelling, keeping unknown units as-is."""
    if not unit:
        return ""
    cleaned = unit.strip().lower()
    for alias, canonical in UNIT_ALIASES:
        if cleaned == alias:
            return canonical
    return cleaned
