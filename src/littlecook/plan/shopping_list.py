"""Shopping list aggregation from planned meals."""

from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from typing import Any

from littlecook.logging_config import get_logger
from littlecook.plan.occurrences import (
    IngredientRef,
    MealOccurrence,
    ShoppingListQuery,
    select_occurrences,
)
from littlecook.plan.quantities import Numeric, Quantity, merge, scale_quantity
from littlecook.plan.scaling import effective_multiplier, format_quantity

logger = get_logger(__name__)

DEFAULT_CATEGORY = "Autres"


def ingredient_key(name: str, unit: str | None) -> tuple[str, str]:
    """Dedup key of a shopping list line: trimmed, lowercased name and unit."""
    return name.strip().lower(), (unit or "").strip().lower()


@dataclass
class AggregatedShoppingItem:
    """One distinct ingredient to buy, with everything that contributed to it."""

    ingredient: IngredientRef
    total_quantity: Quantity
    notes: list[str] = field(default_factory=list)
    recipes: list[str] = field(default_factory=list)

    @property
    def key(self) -> tuple[str, str]:
        return ingredient_key(self.ingredient.name, self.ingredient.unit)

    @property
    def category(self) -> str:
        return self.ingredient.category or DEFAULT_CATEGORY

    def display_quantity(self) -> str:
        """Quantity as shown to the user; only numbers are rounded."""
        if isinstance(self.total_quantity, Numeric):
            return format_quantity(self.total_quantity.value)
        return self.total_quantity.render()

    def add(self, quantity: Quantity, note: str | None, recipe_title: str) -> None:
        """Merge another contribution into this item."""
        self.total_quantity = merge(self.total_quantity, quantity)
        if note:
            self.notes.append(note)
        if recipe_title not in self.recipes:
            self.recipes.append(recipe_title)

    def to_dict(self) -> dict[str, Any]:
        return {
            "ingredient": {
                "id": self.ingredient.id,
                "name": self.ingredient.name,
                "unit": self.ingredient.unit,
                "category": self.category,
            },
            "total_quantity": self.total_quantity.to_json(),
            "notes": list(self.notes),
            "recipes": list(self.recipes),
        }


class ShoppingListAggregator:
    """
    Builds a consolidated shopping list from meal occurrences:
    - Quantities scaled per occurrence to the people actually eating
    - Minimum purchase servings honoured
    - One line per (name, unit), summing numbers and concatenating the rest
    """

    def __init__(self, default_category: str = DEFAULT_CATEGORY):
        self.default_category = default_category

    def aggregate(self, occurrences: Iterable[MealOccurrence]) -> list[AggregatedShoppingItem]:
        """
        Aggregate ingredients across occurrences.

        Occurrences without a recipe and recipes without ingredients add
        nothing. The result keeps first-seen order; sorting belongs to the
        presenter.
        """
        items: dict[tuple[str, str], AggregatedShoppingItem] = {}

        for occurrence in occurrences:
            recipe = occurrence.recipe
            if recipe is None:
                continue

            multiplier = effective_multiplier(
                recipe.servings,
                recipe.minimal_servings,
                occurrence.people_count,
            )

            for line in recipe.ingredients:
                ingredient = line.ingredient
                if not ingredient.name or not ingredient.name.strip():
                    logger.warning(f"Skipping ingredient line without a name in '{recipe.title}'")
                    continue

                quantity = scale_quantity(line.quantity, multiplier)
                key = ingredient_key(ingredient.name, ingredient.unit)

                existing = items.get(key)
                if existing is None:
                    items[key] = AggregatedShoppingItem(
                        ingredient=replace(
                            ingredient,
                            unit=ingredient.unit or "",
                            category=ingredient.category or self.default_category,
                        ),
                        total_quantity=quantity,
                        notes=[line.notes] if line.notes else [],
                        recipes=[recipe.title],
                    )
                else:
                    existing.add(quantity, line.notes, recipe.title)
                    if not isinstance(existing.total_quantity, Numeric):
                        merged = existing.total_quantity.render()
                        logger.debug(f"Textual merge for '{ingredient.name}': {merged}")

        return list(items.values())

    def generate(
        self,
        query: ShoppingListQuery,
        occurrences: Iterable[MealOccurrence],
    ) -> list[AggregatedShoppingItem]:
        """
        Aggregate the occurrences that fall inside a query scope.

        An empty profile selection is a valid, empty list.
        """
        if query.is_empty:
            return []

        selected = select_occurrences(occurrences, query)
        start, end = query.date_range
        logger.info(f"Generating shopping list: {len(selected)} meals from {start} to {end}")

        items = self.aggregate(selected)
        logger.info(f"Generated shopping list: {len(items)} items")
        return items


def aggregate(occurrences: Iterable[MealOccurrence]) -> list[AggregatedShoppingItem]:
    """Aggregate occurrences with the default settings."""
    return ShoppingListAggregator().aggregate(occurrences)
