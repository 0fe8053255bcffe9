"""Unit tests for loading meal occurrences from the relational store."""

from datetime import date
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest

from littlecook.plan.occurrences import MealType, ShoppingListQuery
from littlecook.repository import MealPlanRepository, occurrence_from_row


def ingredient_row(name, unit="g", category=None, quantity=1.0, quantity_text=None, notes=None):
    return SimpleNamespace(
        ingredient=SimpleNamespace(id=f"ing-{name}", name=name, unit=unit, category=category),
        quantity=quantity,
        quantity_text=quantity_text,
        notes=notes,
    )


def plan_row(recipe=None, meal_type="DINNER", users=("alice",), cook=None):
    return SimpleNamespace(
        id="plan-1",
        meal_date=date(2025, 3, 3),
        meal_type=meal_type,
        recipe=recipe,
        assignments=[SimpleNamespace(meal_user_id=user) for user in users],
        cook_responsible_id=cook.id if cook else None,
        cook_responsible=cook,
    )


@pytest.fixture
def recipe_row():
    return SimpleNamespace(
        id="recipe-1",
        title="Quiche lorraine",
        servings=4,
        minimal_servings=4,
        ingredients=[
            ingredient_row("lardons", category="viandes", quantity=200.0),
            ingredient_row("sel", unit=None, quantity=1.0, quantity_text="une pincée"),
        ],
    )


@pytest.fixture
def mock_db():
    """AsyncSession mock whose execute() returns the configured rows."""
    db = AsyncMock()
    result = MagicMock()
    result.scalars.return_value.all.return_value = []
    db.execute.return_value = result
    return db


# =============================================================================
# Row Mapping Tests
# =============================================================================


class TestOccurrenceFromRow:
    """Tests for occurrence_from_row function."""

    def test_maps_recipe_and_assignments(self, recipe_row):
        cook = SimpleNamespace(id="bob", pseudo="Bob")
        occurrence = occurrence_from_row(plan_row(recipe_row, users=("alice", "bob"), cook=cook))

        assert occurrence.meal_type is MealType.DINNER
        assert occurrence.meal_user_ids == ("alice", "bob")
        assert occurrence.cook_responsible_id == "bob"
        assert occurrence.cook_responsible_name == "Bob"
        assert occurrence.recipe.minimal_servings == 4

    def test_quantity_text_wins_over_number(self, recipe_row):
        occurrence = occurrence_from_row(plan_row(recipe_row))
        lardons, salt = occurrence.recipe.ingredients

        assert lardons.quantity == 200.0
        assert salt.quantity == "une pincée"
        assert salt.ingredient.unit == ""

    def test_deleted_recipe(self):
        occurrence = occurrence_from_row(plan_row(None))
        assert occurrence.recipe is None
        assert occurrence.cook_responsible_name is None


# =============================================================================
# Repository Tests
# =============================================================================


class TestMealPlanRepository:
    """Tests for MealPlanRepository."""

    @pytest.mark.asyncio
    async def test_empty_selection_skips_the_database(self, mock_db):
        repository = MealPlanRepository(mock_db)
        result = await repository.fetch_occurrences([], date(2025, 3, 3), date(2025, 3, 9))

        assert result == []
        mock_db.execute.assert_not_called()

    @pytest.mark.asyncio
    async def test_maps_fetched_rows(self, mock_db, recipe_row):
        mock_db.execute.return_value.scalars.return_value.all.return_value = [plan_row(recipe_row)]
        repository = MealPlanRepository(mock_db)

        result = await repository.fetch_occurrences(["alice"], date(2025, 3, 3), date(2025, 3, 9))

        assert len(result) == 1
        assert result[0].recipe.title == "Quiche lorraine"
        mock_db.execute.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_same_day_meals_follow_slot_order(self, mock_db, recipe_row):
        """Dinner sorts before lunch by name, but lunch comes first in the day."""
        mock_db.execute.return_value.scalars.return_value.all.return_value = [
            plan_row(recipe_row, meal_type="DINNER"),
            plan_row(recipe_row, meal_type="LUNCH"),
            plan_row(recipe_row, meal_type="BREAKFAST"),
        ]
        repository = MealPlanRepository(mock_db)

        result = await repository.fetch_occurrences(["alice"], date(2025, 3, 3), date(2025, 3, 9))

        assert [o.meal_type for o in result] == [
            MealType.BREAKFAST,
            MealType.LUNCH,
            MealType.DINNER,
        ]

    @pytest.mark.asyncio
    async def test_fetch_for_query_uses_query_range(self, mock_db):
        repository = MealPlanRepository(mock_db)
        repository.fetch_occurrences = AsyncMock(return_value=[])
        query = ShoppingListQuery(
            meal_user_ids=("alice",), start_date=date(2025, 3, 3), cook_responsible_id="bob"
        )

        await repository.fetch_for_query(query)

        repository.fetch_occurrences.assert_awaited_once_with(
            ("alice",), date(2025, 3, 3), date(2025, 3, 9), "bob"
        )
