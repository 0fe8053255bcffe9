"""Loading meal occurrences for the shopping list from the relational store."""

from datetime import date

from fastapi import Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from littlecook.database import get_db
from littlecook.logging_config import get_logger
from littlecook.models import MealPlan, MealUserAssignment, Recipe, RecipeIngredient
from littlecook.plan.occurrences import (
    IngredientRef,
    MealOccurrence,
    MealType,
    RecipeIngredientLine,
    RecipeSnapshot,
    ShoppingListQuery,
)

logger = get_logger(__name__)


# =============================================================================
# Row Mapping
# =============================================================================


def line_from_row(row: RecipeIngredient) -> RecipeIngredientLine:
    """Map a recipe line; raw quantity text wins over the numeric column."""
    ingredient = row.ingredient
    return RecipeIngredientLine(
        ingredient=IngredientRef(
            id=ingredient.id,
            name=ingredient.name,
            unit=ingredient.unit or "",
            category=ingredient.category,
        ),
        quantity=row.quantity_text if row.quantity_text else row.quantity,
        notes=row.notes,
    )


def recipe_from_row(recipe: Recipe) -> RecipeSnapshot:
    return RecipeSnapshot(
        id=recipe.id,
        title=recipe.title,
        servings=recipe.servings,
        minimal_servings=recipe.minimal_servings,
        ingredients=tuple(line_from_row(row) for row in recipe.ingredients),
    )


def occurrence_from_row(plan: MealPlan) -> MealOccurrence:
    cook = plan.cook_responsible
    return MealOccurrence(
        id=plan.id,
        meal_date=plan.meal_date,
        meal_type=MealType(plan.meal_type),
        recipe=recipe_from_row(plan.recipe) if plan.recipe is not None else None,
        meal_user_ids=tuple(assignment.meal_user_id for assignment in plan.assignments),
        cook_responsible_id=plan.cook_responsible_id,
        cook_responsible_name=cook.pseudo if cook is not None else None,
    )


# =============================================================================
# Repository
# =============================================================================


class MealPlanRepository:
    """Read access to planned meals for shopping list generation."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def fetch_occurrences(
        self,
        meal_user_ids: list[str] | tuple[str, ...],
        start: date,
        end: date,
        cook_responsible_id: str | None = None,
    ) -> list[MealOccurrence]:
        """
        Fetch meals in an inclusive date range eaten by any of the given profiles.

        Each returned occurrence carries all of its assigned profiles, not only
        the selected ones, since scaling depends on the full head count.

        Args:
            meal_user_ids: Selected profile IDs. Empty means no meals.
            start: First day of the range.
            end: Last day of the range.
            cook_responsible_id: Optional explicit cook filter.

        Returns:
            Occurrences ordered by date then meal slot, with recipe lines loaded.
        """
        if not meal_user_ids:
            return []

        assigned = select(MealUserAssignment.meal_plan_id).where(
            MealUserAssignment.meal_user_id.in_(list(meal_user_ids))
        )
        stmt = (
            select(MealPlan)
            .where(MealPlan.meal_date >= start)
            .where(MealPlan.meal_date <= end)
            .where(MealPlan.id.in_(assigned))
            .options(
                selectinload(MealPlan.recipe)
                .selectinload(Recipe.ingredients)
                .selectinload(RecipeIngredient.ingredient),
                selectinload(MealPlan.assignments),
                selectinload(MealPlan.cook_responsible),
            )
            .order_by(MealPlan.meal_date)
        )
        if cook_responsible_id is not None:
            stmt = stmt.where(MealPlan.cook_responsible_id == cook_responsible_id)

        result = await self.db.execute(stmt)
        plans = result.scalars().all()
        logger.debug(f"Fetched {len(plans)} meal plans from {start} to {end}")

        occurrences = [occurrence_from_row(plan) for plan in plans]
        # Meal types are stored as names; slot order is not alphabetical
        occurrences.sort(key=lambda o: (o.meal_date, o.meal_type.order))
        return occurrences

    async def fetch_for_query(self, query: ShoppingListQuery) -> list[MealOccurrence]:
        """Fetch the occurrences in scope of a shopping list query."""
        start, end = query.date_range
        return await self.fetch_occurrences(
            query.meal_user_ids, start, end, query.cook_responsible_id
        )


def get_meal_plan_repository(db: AsyncSession = Depends(get_db)) -> MealPlanRepository:
    """Dependency for FastAPI endpoints."""
    return MealPlanRepository(db)
