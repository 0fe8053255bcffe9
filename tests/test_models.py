"""Tests for the meal plan ORM mapping."""

from datetime import date
from typing import get_args

from sqlalchemy.orm import configure_mappers

from littlecook.models import MealPlan


class TestMealPlanModel:
    """Tests for MealPlan relationships."""

    def test_recipe_and_cook_are_optional(self):
        configure_mappers()

        for name in ("recipe", "cook_responsible"):
            (target,) = get_args(MealPlan.__annotations__[name])
            assert type(None) in get_args(target)

        assert MealPlan.__table__.c.recipe_id.nullable
        assert MealPlan.__table__.c.cook_responsible_id.nullable

    def test_unset_relationships_are_none(self):
        plan = MealPlan(id="plan-1", meal_date=date(2025, 3, 3), meal_type="DINNER")

        assert plan.recipe is None
        assert plan.cook_responsible is None
