"""Normalize free-text ingredient data: quantities, units, names and categories."""

from littlecook.normalize.categories import CATEGORY_KEYWORDS, FALLBACK_CATEGORY, categorize
from littlecook.normalize.parser import (
    ParsedIngredient,
    extract_notes,
    parse_ingredient,
    parse_ingredient_list,
    strip_articles,
)
from littlecook.normalize.text import fold_diacritics, fold_text, normalize_text
from littlecook.normalize.units import (
    DEFAULT_UNIT,
    UNIT_ALIASES,
    QuantityMatch,
    canonical_unit,
    match_numeric_quantity,
    parse_quantity,
    parse_unit,
)

__all__ = [
    "CATEGORY_KEYWORDS",
    "DEFAULT_UNIT",
    "FALLBACK_CATEGORY",
    "UNIT_ALIASES",
    "ParsedIngredient",
    "QuantityMatch",
    "canonical_unit",
    "categorize",
    "extract_notes",
    "fold_diacritics",
    "fold_text",
    "match_numeric_quantity",
    "normalize_text",
    "parse_ingredient",
    "parse_ingredient_list",
    "parse_quantity",
    "parse_unit",
    "strip_articles",
]
