"""Shopping list planning: scoping, scaling, aggregation and presentation."""

from littlecook.plan.occurrences import (
    Cook,
    DatePreset,
    IngredientRef,
    MealOccurrence,
    MealType,
    RecipeIngredientLine,
    RecipeSnapshot,
    ShoppingListQuery,
    available_cooks,
    occurrence_from_dict,
    resolve_date_range,
    select_occurrences,
)
from littlecook.plan.presenter import (
    RecipeSummary,
    export_filename,
    format_date_range,
    group_by_category,
    render_share_text,
    render_text_export,
    sort_items,
    summarize_recipes,
)
from littlecook.plan.quantities import Numeric, Quantity, Textual, merge, scale_quantity
from littlecook.plan.scaling import effective_multiplier, effective_servings, round_for_display
from littlecook.plan.shopping_list import (
    AggregatedShoppingItem,
    ShoppingListAggregator,
    aggregate,
    ingredient_key,
)

__all__ = [
    "AggregatedShoppingItem",
    "Cook",
    "DatePreset",
    "IngredientRef",
    "MealOccurrence",
    "MealType",
    "Numeric",
    "Quantity",
    "RecipeIngredientLine",
    "RecipeSnapshot",
    "RecipeSummary",
    "ShoppingListAggregator",
    "ShoppingListQuery",
    "Textual",
    "aggregate",
    "available_cooks",
    "effective_multiplier",
    "effective_servings",
    "export_filename",
    "format_date_range",
    "group_by_category",
    "ingredient_key",
    "merge",
    "occurrence_from_dict",
    "render_share_text",
    "render_text_export",
    "resolve_date_range",
    "round_for_display",
    "scale_quantity",
    "select_occurrences",
    "sort_items",
    "summarize_recipes",
]
