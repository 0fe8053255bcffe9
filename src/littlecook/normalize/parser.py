"""Parse free-text ingredient lines into quantity, unit, name and notes."""

import re
from dataclasses import asdict, dataclass
from typing import Any

from littlecook.logging_config import get_logger
from littlecook.normalize.categories import categorize
from littlecook.normalize.text import normalize_text
from littlecook.normalize.units import parse_quantity, parse_unit

logger = get_logger(__name__)

_LIST_MARKER = re.compile(r"^[-•*\s]*(\[[x\s]?\])?\s*")
_PARENTHESES = re.compile(r"^(.*?)\s*\(([^)]+)\)\s*(.*)$")
_TRAILING_FRAGMENT = re.compile(r"^(.*?),\s*([^,]+)$")
_PREPARATION = re.compile(
    r"\b(?:"
    r"(?:hach|râp|coup|tranch|éminc|cisel|pel|écras|concass)(?:é|ée|és|ées)"
    r"|en dés|en rondelles|finement|grossièrement"
    r")(?!\w)"
)
_ELIDED_ARTICLE = re.compile(r"^(?:d'|l')\s*")
_ARTICLE = re.compile(r"^(?:de|du|des|la|le|les|un|une)\s+")


@dataclass(frozen=True)
class ParsedIngredient:
    """An ingredient line read from free text."""

    quantity: float
    unit: str
    name: str
    notes: str | None = None
    category: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def extract_notes(text: str) -> tuple[str, str | None]:
    """
    Split preparation notes off an ingredient name.

    Parenthesised content always becomes the note. Otherwise a trailing
    comma fragment becomes the note only when it reads like a preparation
    ("hachées", "en dés", ...).
    """
    text = text.strip()

    if match := _PARENTHESES.match(text):
        before, notes, after = match.groups()
        return f"{before} {after}".strip(), notes.strip()

    if match := _TRAILING_FRAGMENT.match(text):
        main, fragment = match.groups()
        if _PREPARATION.search(fragment):
            return main.strip(), fragment.strip()

    return text, None


def strip_articles(text: str) -> str:
    """Remove leading French articles and partitives ("de la crème" -> "crème")."""
    text = text.strip()
    while True:
        stripped = _ELIDED_ARTICLE.sub("", text, count=1)
        stripped = _ARTICLE.sub("", stripped, count=1).strip()
        if stripped == text:
            return text
        text = stripped


def parse_ingredient(raw_text: str) -> ParsedIngredient:
    """
    Parse one ingredient line.

    Steps run in a fixed order on the normalized text: list marker, quantity,
    unit, notes, articles, then category.

    Example:
        >>> parsed = parse_ingredient("2 gousses d'ail, hachées")
        >>> parsed.quantity, parsed.unit, parsed.name, parsed.notes
        (2.0, 'gousse', 'ail', 'hachées')
    """
    text = _LIST_MARKER.sub("", normalize_text(raw_text), count=1)

    quantity = parse_quantity(text)
    unit, after_unit = parse_unit(quantity.remaining)
    name_text, notes = extract_notes(after_unit)
    name = strip_articles(name_text)

    return ParsedIngredient(
        quantity=quantity.value,
        unit=unit,
        name=name,
        notes=notes,
        category=categorize(name),
    )


def parse_ingredient_list(lines: list[str]) -> list[ParsedIngredient]:
    """Parse every non-blank line, keeping input order."""
    parsed = [parse_ingredient(line) for line in lines if line and line.strip()]
    unnamed = sum(1 for item in parsed if not item.name)
    if unnamed:
        logger.debug(f"{unnamed} of {len(parsed)} ingredient lines have no name")
    return parsed
