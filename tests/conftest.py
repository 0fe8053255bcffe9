"""Pytest configuration and shared fixtures."""

from datetime import date

import pytest

from littlecook.plan.occurrences import (
    IngredientRef,
    MealOccurrence,
    MealType,
    RecipeIngredientLine,
    RecipeSnapshot,
)

# =============================================================================
# Pytest Configuration
# =============================================================================


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests (require a database)"
    )


# =============================================================================
# Recipe Fixtures
# =============================================================================


def line(name, quantity, unit="", category=None, notes=None):
    """Shorthand for a recipe ingredient line."""
    return RecipeIngredientLine(
        ingredient=IngredientRef(name=name, unit=unit, category=category),
        quantity=quantity,
        notes=notes,
    )


@pytest.fixture
def carbonara():
    """Pasta carbonara for 4 people."""
    return RecipeSnapshot(
        id="recipe-carbonara",
        title="Pâtes carbonara",
        servings=4,
        ingredients=(
            line("lardons", 200, "g", "viandes"),
            line("pâtes", 400, "g", "céréales"),
            line("Oeufs", 3, "", None),
            line("parmesan", "50 g", "", "produits laitiers", notes="râpé"),
        ),
    )


@pytest.fixture
def omelette():
    """Omelette for 2 people."""
    return RecipeSnapshot(
        id="recipe-omelette",
        title="Omelette",
        servings=2,
        ingredients=(
            line("oeufs", 4, "", None),
            line("sel", "une pincée", "", "épices"),
        ),
    )


@pytest.fixture
def quiche():
    """Quiche with a minimum purchase size of 4 servings."""
    return RecipeSnapshot(
        id="recipe-quiche",
        title="Quiche lorraine",
        servings=4,
        minimal_servings=4,
        ingredients=(
            line("lardons", 200, "g", "viandes"),
            line("crème fraîche", "20 cl", "", "produits laitiers"),
        ),
    )


# =============================================================================
# Occurrence Fixtures
# =============================================================================


@pytest.fixture
def monday():
    return date(2025, 3, 3)


@pytest.fixture
def make_occurrence(monday):
    """Factory for meal occurrences on the week of March 3rd, 2025."""

    def _make(
        recipe,
        people=("alice", "bob"),
        day_offset=0,
        meal_type=MealType.DINNER,
        cook=None,
        cook_name=None,
    ):
        return MealOccurrence(
            meal_date=date.fromordinal(monday.toordinal() + day_offset),
            meal_type=meal_type,
            recipe=recipe,
            meal_user_ids=tuple(people),
            cook_responsible_id=cook,
            cook_responsible_name=cook_name,
        )

    return _make
