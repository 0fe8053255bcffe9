"""Grouping, sorting and text rendering of an aggregated shopping list."""

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import date

from littlecook.normalize.text import fold_text
from littlecook.plan.occurrences import MealOccurrence, MealType, RecipeSnapshot
from littlecook.plan.shopping_list import DEFAULT_CATEGORY, AggregatedShoppingItem

DEFAULT_TITLE = "Liste de courses"

DAY_NAMES = ("Lundi", "Mardi", "Mercredi", "Jeudi", "Vendredi", "Samedi", "Dimanche")
MONTH_NAMES = (
    "janvier",
    "février",
    "mars",
    "avril",
    "mai",
    "juin",
    "juillet",
    "août",
    "septembre",
    "octobre",
    "novembre",
    "décembre",
)
MEAL_TYPE_LABELS: dict[MealType, str] = {
    MealType.BREAKFAST: "Petit-déjeuner",
    MealType.LUNCH: "Déjeuner",
    MealType.DINNER: "Dîner",
    MealType.SNACK: "Goûter",
}


# =============================================================================
# Grouping & Sorting
# =============================================================================


def collation_key(text: str) -> tuple[str, str]:
    """
    Sort key approximating French collation.

    Accents and case are ignored first ("Épices" sorts with "epices"),
    then used to break ties.
    """
    return fold_text(text), text


def group_by_category(
    items: Iterable[AggregatedShoppingItem],
    default_category: str = DEFAULT_CATEGORY,
) -> dict[str, list[AggregatedShoppingItem]]:
    """Group items by ingredient category, keeping first-seen order."""
    grouped: dict[str, list[AggregatedShoppingItem]] = {}
    for item in items:
        category = item.ingredient.category or default_category
        grouped.setdefault(category, []).append(item)
    return grouped


def sort_items(
    items: Iterable[AggregatedShoppingItem],
    default_category: str = DEFAULT_CATEGORY,
) -> list[AggregatedShoppingItem]:
    """Sort items by category name, then ingredient name."""
    return sorted(
        items,
        key=lambda item: (
            collation_key(item.ingredient.category or default_category),
            collation_key(item.ingredient.name),
        ),
    )


def sorted_groups(
    items: Iterable[AggregatedShoppingItem],
    default_category: str = DEFAULT_CATEGORY,
) -> dict[str, list[AggregatedShoppingItem]]:
    """Group items by category with categories and items in sorted order."""
    return group_by_category(sort_items(items, default_category), default_category)


# =============================================================================
# Text Rendering
# =============================================================================


def format_day(day: date, with_year: bool = False) -> str:
    """French long date without weekday ("3 mars", "9 mars 2025")."""
    text = f"{day.day} {MONTH_NAMES[day.month - 1]}"
    return f"{text} {day.year}" if with_year else text


def format_date_range(start: date, end: date) -> str:
    """Human date range, e.g. "3 mars - 9 mars 2025"."""
    return f"{format_day(start)} - {format_day(end, with_year=True)}"


def format_item_line(item: AggregatedShoppingItem, bullet: str) -> str:
    notes = f" ({', '.join(item.notes)})" if item.notes else ""
    quantity = item.display_quantity()
    return f"{bullet} {item.ingredient.name}: {quantity} {item.ingredient.unit}{notes}"


def _render(
    items: Iterable[AggregatedShoppingItem],
    title_line: str,
    header_format: str,
    bullet: str,
    default_category: str,
) -> str:
    lines = [title_line, ""]
    for category, category_items in sorted_groups(items, default_category).items():
        lines.append(header_format.format(category=category))
        lines.extend(format_item_line(item, bullet) for item in category_items)
        lines.append("")
    return "\n".join(lines)


def render_text_export(
    items: Iterable[AggregatedShoppingItem],
    start: date,
    end: date,
    title: str = DEFAULT_TITLE,
    default_category: str = DEFAULT_CATEGORY,
) -> str:
    """
    Markdown-flavoured plain text export.

    Example:
        # Liste de courses - 3 mars - 9 mars 2025

        ## viandes
        - lardons: 100 g
    """
    return _render(
        items,
        title_line=f"# {title} - {format_date_range(start, end)}",
        header_format="## {category}",
        bullet="-",
        default_category=default_category,
    )


def render_share_text(
    items: Iterable[AggregatedShoppingItem],
    start: date,
    end: date,
    title: str = DEFAULT_TITLE,
    default_category: str = DEFAULT_CATEGORY,
) -> str:
    """Plain text for native share or clipboard: same content, "•" bullets."""
    return _render(
        items,
        title_line=f"{title} - {format_date_range(start, end)}",
        header_format="{category}:",
        bullet="•",
        default_category=default_category,
    )


def export_filename(start: date) -> str:
    return f"liste-de-courses-{start.isoformat()}.txt"


# =============================================================================
# Recipe Summary
# =============================================================================


@dataclass
class RecipeSummary:
    """Recipes of a period, per day and meal slot, plus the distinct recipes overall."""

    buckets: dict[str, list[RecipeSnapshot]] = field(default_factory=dict)
    unique_recipes: list[RecipeSnapshot] = field(default_factory=list)


def meal_slot_label(occurrence: MealOccurrence) -> str:
    """Bucket label such as "Lundi 3 mars - Dîner"."""
    day_name = DAY_NAMES[occurrence.meal_date.weekday()]
    meal_type = MealType(occurrence.meal_type)
    return f"{day_name} {format_day(occurrence.meal_date)} - {MEAL_TYPE_LABELS[meal_type]}"


def summarize_recipes(occurrences: Iterable[MealOccurrence]) -> RecipeSummary:
    """
    Group the recipes of the source meals by calendar day and meal slot.

    Buckets are in chronological order (date, then meal slot). Meals whose
    recipe was deleted are left out. ``unique_recipes`` lists each recipe
    once across the whole period, by recipe id.
    """
    with_recipe = [occurrence for occurrence in occurrences if occurrence.recipe is not None]
    with_recipe.sort(key=lambda o: (o.meal_date, MealType(o.meal_type).order))

    summary = RecipeSummary()
    seen_ids: set[str] = set()
    for occurrence in with_recipe:
        recipe = occurrence.recipe
        summary.buckets.setdefault(meal_slot_label(occurrence), []).append(recipe)
        if recipe.id not in seen_ids:
            seen_ids.add(recipe.id)
            summary.unique_recipes.append(recipe)

    return summary
