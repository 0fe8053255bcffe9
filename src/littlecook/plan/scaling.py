"""Serving-based scaling of recipe quantities."""

import math


def _check_count(name: str, value: int | None) -> None:
    if value is not None and value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def effective_servings(
    recipe_servings: int | None,
    minimal_servings: int | None,
    assigned_people_count: int,
) -> int:
    """
    Number of servings actually cooked for one meal occurrence.

    This is the number of people assigned, raised to the recipe's minimum
    purchase size when one is set, and never below 1.
    """
    _check_count("recipe_servings", recipe_servings)
    _check_count("minimal_servings", minimal_servings)
    _check_count("assigned_people_count", assigned_people_count)

    effective = assigned_people_count
    if minimal_servings and effective < minimal_servings:
        effective = minimal_servings
    return max(effective, 1)


def effective_multiplier(
    recipe_servings: int | None,
    minimal_servings: int | None,
    assigned_people_count: int,
) -> float:
    """
    Factor applied to every base quantity of a recipe for one occurrence.

    Recipe servings that are unset or zero count as 1, so the result is
    always a positive number.

    Example:
        A recipe for 4 eaten by 2 people gives 0.5; with a minimum of 4
        servings, a single person still gives 1.0.
    """
    base = recipe_servings if recipe_servings and recipe_servings > 0 else 1
    return effective_servings(recipe_servings, minimal_servings, assigned_people_count) / base


def round_for_display(quantity: float) -> float | int:
    """
    Round a quantity for display.

    Under 1 keeps 2 decimals, under 10 keeps 1 decimal, anything larger is
    rounded to the nearest integer. Infinite or NaN values are returned
    unchanged.
    """
    if not math.isfinite(quantity):
        return quantity
    if quantity < 1:
        return round(quantity, 2)
    if quantity < 10:
        return round(quantity, 1)
    return round(quantity)


def format_quantity(quantity: float) -> str:
    """Render a display-rounded quantity without trailing zeros ("2.50" -> "2.5")."""
    rounded = round_for_display(quantity)
    if isinstance(rounded, int) or float(rounded).is_integer():
        return str(int(rounded))
    return f"{rounded:.2f}".rstrip("0").rstrip(".")
