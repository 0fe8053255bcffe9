"""Meal occurrences consumed by the shopping list, and the query scope that selects them."""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, timedelta
from enum import Enum
from typing import Any


class MealType(str, Enum):
    """Meal slot of an occurrence, in day order."""

    BREAKFAST = "BREAKFAST"
    LUNCH = "LUNCH"
    DINNER = "DINNER"
    SNACK = "SNACK"

    @property
    def order(self) -> int:
        return list(MealType).index(self)


class DatePreset(str, Enum):
    """Quick period choices offered by the shopping list page."""

    TODAY = "today"
    WEEK = "week"
    TWO_WEEKS = "two_weeks"
    CUSTOM = "custom"


@dataclass(frozen=True)
class IngredientRef:
    """Catalog ingredient as seen by the shopping list."""

    name: str
    unit: str = ""
    category: str | None = None
    id: str | None = None


@dataclass(frozen=True)
class RecipeIngredientLine:
    """
    One recipe line. ``quantity`` is relative to the recipe's base servings
    and may be free text when it came from an import path.
    """

    ingredient: IngredientRef
    quantity: float | str
    notes: str | None = None


@dataclass(frozen=True)
class RecipeSnapshot:
    id: str
    title: str
    servings: int | None = None
    minimal_servings: int | None = None
    ingredients: tuple[RecipeIngredientLine, ...] = ()


@dataclass(frozen=True)
class MealOccurrence:
    """One recipe scheduled on a date and meal slot, with the profiles eating it."""

    meal_date: date
    meal_type: MealType
    recipe: RecipeSnapshot | None = None
    meal_user_ids: tuple[str, ...] = ()
    cook_responsible_id: str | None = None
    cook_responsible_name: str | None = None
    id: str | None = None

    @property
    def people_count(self) -> int:
        return len(self.meal_user_ids)


@dataclass(frozen=True)
class Cook:
    id: str
    name: str


@dataclass(frozen=True)
class ShoppingListQuery:
    """
    Scope of one shopping list: selected profiles and an inclusive date range.

    ``end_date`` left as None means a week starting at ``start_date``.
    """

    meal_user_ids: tuple[str, ...]
    start_date: date
    end_date: date | None = None
    cook_responsible_id: str | None = None

    def __post_init__(self) -> None:
        if self.end_date is not None and self.end_date < self.start_date:
            raise ValueError(
                f"end_date {self.end_date} is before start_date {self.start_date}"
            )

    @property
    def is_empty(self) -> bool:
        return not self.meal_user_ids

    @property
    def date_range(self) -> tuple[date, date]:
        end = self.end_date if self.end_date is not None else self.start_date + timedelta(days=6)
        return self.start_date, end


def week_start(day: date) -> date:
    """Monday of the week containing ``day``."""
    return day - timedelta(days=day.weekday())


def resolve_date_range(
    preset: DatePreset,
    today: date,
    custom_start: date | None = None,
    custom_end: date | None = None,
) -> tuple[date, date]:
    """
    Turn a period preset into an inclusive (start, end) range.

    ``week`` and ``two_weeks`` are rolling periods starting today. A custom
    period with only a start spans seven days from it, and one without any
    bound defaults to the current Monday-to-Sunday week.

    Raises:
        ValueError: If a custom end is given without a start, or the start
            is after the end.
    """
    if preset is DatePreset.TODAY:
        return today, today
    if preset is DatePreset.WEEK:
        return today, today + timedelta(days=6)
    if preset is DatePreset.TWO_WEEKS:
        return today, today + timedelta(days=13)

    if custom_start is None:
        if custom_end is not None:
            raise ValueError("Une date de début est requise avec une date de fin")
        monday = week_start(today)
        return monday, monday + timedelta(days=6)
    if custom_end is None:
        return custom_start, custom_start + timedelta(days=6)
    if custom_start > custom_end:
        raise ValueError("La date de début ne peut pas être postérieure à la date de fin")
    return custom_start, custom_end


def select_occurrences(
    occurrences: Iterable[MealOccurrence],
    query: ShoppingListQuery,
) -> list[MealOccurrence]:
    """
    Keep the occurrences inside the query scope.

    An occurrence is in scope when its date falls in the inclusive range, at
    least one selected profile is assigned to it and, if a cook filter is set,
    its explicit cook responsible matches.
    """
    if query.is_empty:
        return []

    start, end = query.date_range
    selected = set(query.meal_user_ids)

    return [
        occurrence
        for occurrence in occurrences
        if start <= occurrence.meal_date <= end
        and selected.intersection(occurrence.meal_user_ids)
        and (
            query.cook_responsible_id is None
            or occurrence.cook_responsible_id == query.cook_responsible_id
        )
    ]


def available_cooks(occurrences: Iterable[MealOccurrence]) -> list[Cook]:
    """Distinct cooks responsible across the occurrences, in first-seen order."""
    cooks: dict[str, Cook] = {}
    for occurrence in occurrences:
        cook_id = occurrence.cook_responsible_id
        if cook_id and cook_id not in cooks:
            cooks[cook_id] = Cook(
                id=cook_id,
                name=occurrence.cook_responsible_name or "Cuisinier inconnu",
            )
    return list(cooks.values())


# =============================================================================
# Plain-data Loading
# =============================================================================


def _ingredient_line_from_dict(data: dict[str, Any]) -> RecipeIngredientLine:
    ingredient = data.get("ingredient") or {}
    return RecipeIngredientLine(
        ingredient=IngredientRef(
            id=ingredient.get("id"),
            name=ingredient.get("name", ""),
            unit=ingredient.get("unit") or "",
            category=ingredient.get("category"),
        ),
        quantity=data.get("quantity", 1),
        notes=data.get("notes"),
    )


def occurrence_from_dict(data: dict[str, Any]) -> MealOccurrence:
    """
    Build an occurrence from JSON-like data, e.g. an exported meal plan.

    Example:
        {"meal_date": "2025-03-03", "meal_type": "DINNER",
         "meal_user_ids": ["u1", "u2"],
         "recipe": {"id": "r1", "title": "Pâtes carbonara", "servings": 4,
                    "ingredients": [{"ingredient": {"name": "lardons", "unit": "g"},
                                     "quantity": 200}]}}
    """
    recipe_data = data.get("recipe")
    recipe = None
    if recipe_data:
        recipe = RecipeSnapshot(
            id=str(recipe_data["id"]),
            title=recipe_data.get("title", ""),
            servings=recipe_data.get("servings"),
            minimal_servings=recipe_data.get("minimal_servings"),
            ingredients=tuple(
                _ingredient_line_from_dict(line) for line in recipe_data.get("ingredients", [])
            ),
        )

    return MealOccurrence(
        id=data.get("id"),
        meal_date=date.fromisoformat(data["meal_date"]),
        meal_type=MealType(data.get("meal_type", MealType.DINNER.value)),
        recipe=recipe,
        meal_user_ids=tuple(data.get("meal_user_ids", [])),
        cook_responsible_id=data.get("cook_responsible_id"),
        cook_responsible_name=data.get("cook_responsible_name"),
    )
