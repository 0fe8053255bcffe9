"""API routes for shopping list generation, export and sharing."""

from datetime import date

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel, Field

from littlecook.config import settings
from littlecook.logging_config import LoggingContext, get_logger
from littlecook.plan.occurrences import (
    DatePreset,
    MealOccurrence,
    RecipeSnapshot,
    ShoppingListQuery,
    available_cooks,
    resolve_date_range,
)
from littlecook.plan.presenter import (
    export_filename,
    render_share_text,
    render_text_export,
    sorted_groups,
    summarize_recipes,
)
from littlecook.plan.shopping_list import AggregatedShoppingItem, ShoppingListAggregator
from littlecook.repository import MealPlanRepository, get_meal_plan_repository

logger = get_logger(__name__)

router = APIRouter(prefix="/api/v1/shopping-list", tags=["shopping-list"])


# =============================================================================
# Request/Response Schemas
# =============================================================================


class ShoppingListRequest(BaseModel):
    """Scope of a shopping list: who eats, over which period, cooked by whom."""

    meal_user_ids: list[str] = Field(default_factory=list)
    preset: DatePreset | None = Field(
        None, description="today, week, two_weeks or custom; custom when dates are given"
    )
    start_date: date | None = Field(None, description="First day, for the custom preset")
    end_date: date | None = Field(None, description="Last day; defaults to start_date + 6")
    cook_responsible_id: str | None = None


class IngredientSchema(BaseModel):
    """Ingredient of a shopping list line."""

    id: str | None = None
    name: str
    unit: str
    category: str


class ShoppingListItem(BaseModel):
    """Single aggregated line of the shopping list."""

    ingredient: IngredientSchema
    total_quantity: float | str
    display_quantity: str
    notes: list[str] = Field(default_factory=list)
    recipes: list[str] = Field(default_factory=list)


class RecipeRef(BaseModel):
    """Recipe as listed in the period summary."""

    id: str
    title: str


class ShoppingListResponse(BaseModel):
    """Aggregated shopping list for a period."""

    start_date: date
    end_date: date
    items: list[ShoppingListItem]
    items_by_category: dict[str, list[ShoppingListItem]]
    recipes_by_meal: dict[str, list[RecipeRef]] = Field(default_factory=dict)
    unique_recipes: list[RecipeRef] = Field(default_factory=list)


class ShareResponse(BaseModel):
    """Plain text ready for a native share sheet or the clipboard."""

    title: str
    text: str


class CookResponse(BaseModel):
    """Cook responsible for at least one meal of the period."""

    id: str
    name: str


# =============================================================================
# Helper Functions
# =============================================================================


def resolve_query(request: ShoppingListRequest, today: date | None = None) -> ShoppingListQuery:
    """
    Build the core query from a request.

    Without an explicit preset, dates imply a custom period and their absence
    the rolling week.

    Raises:
        HTTPException: 400 when a custom period has an end but no start, or
            its start is after its end.
    """
    today = today or date.today()
    preset = request.preset
    if preset is None:
        has_dates = request.start_date is not None or request.end_date is not None
        preset = DatePreset.CUSTOM if has_dates else DatePreset.WEEK
    try:
        start, end = resolve_date_range(preset, today, request.start_date, request.end_date)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e

    return ShoppingListQuery(
        meal_user_ids=tuple(request.meal_user_ids),
        start_date=start,
        end_date=end,
        cook_responsible_id=request.cook_responsible_id,
    )


async def load_occurrences(
    repository: MealPlanRepository,
    query: ShoppingListQuery,
) -> list[MealOccurrence]:
    """Load the meals in scope; an empty profile selection never reaches storage."""
    if query.is_empty:
        return []
    try:
        return await repository.fetch_for_query(query)
    except Exception as e:
        logger.error(f"Failed to load meal plans: {e}")
        raise


def item_to_schema(item: AggregatedShoppingItem) -> ShoppingListItem:
    data = item.to_dict()
    return ShoppingListItem(
        ingredient=IngredientSchema(**data["ingredient"]),
        total_quantity=data["total_quantity"],
        display_quantity=item.display_quantity(),
        notes=data["notes"],
        recipes=data["recipes"],
    )


def recipe_to_schema(recipe: RecipeSnapshot) -> RecipeRef:
    return RecipeRef(id=recipe.id, title=recipe.title)


def build_items(
    query: ShoppingListQuery,
    occurrences: list[MealOccurrence],
) -> list[AggregatedShoppingItem]:
    aggregator = ShoppingListAggregator(default_category=settings.default_category)
    return aggregator.generate(query, occurrences)


# =============================================================================
# Endpoints
# =============================================================================


@router.post("", response_model=ShoppingListResponse)
async def generate_shopping_list(
    request: ShoppingListRequest,
    repository: MealPlanRepository = Depends(get_meal_plan_repository),
) -> ShoppingListResponse:
    """
    Generate the consolidated shopping list for the selected profiles and period.

    Quantities are scaled to the people eating each meal, with each recipe's
    minimum servings honoured, then merged per ingredient and unit.
    """
    query = resolve_query(request)
    start, end = query.date_range

    with LoggingContext(meal_user_id=",".join(query.meal_user_ids) or None):
        logger.info(
            f"Shopping list requested: {len(query.meal_user_ids)} profiles, {start} to {end}"
        )
        occurrences = await load_occurrences(repository, query)
        items = build_items(query, occurrences)

    summary = summarize_recipes(occurrences)
    grouped = sorted_groups(items, settings.default_category)

    return ShoppingListResponse(
        start_date=start,
        end_date=end,
        items=[item_to_schema(item) for item in items],
        items_by_category={
            category: [item_to_schema(item) for item in category_items]
            for category, category_items in grouped.items()
        },
        recipes_by_meal={
            label: [recipe_to_schema(recipe) for recipe in recipes]
            for label, recipes in summary.buckets.items()
        },
        unique_recipes=[recipe_to_schema(recipe) for recipe in summary.unique_recipes],
    )


@router.post("/export", response_class=PlainTextResponse)
async def export_shopping_list(
    request: ShoppingListRequest,
    repository: MealPlanRepository = Depends(get_meal_plan_repository),
) -> PlainTextResponse:
    """Download the shopping list as a UTF-8 text file."""
    query = resolve_query(request)
    start, end = query.date_range

    occurrences = await load_occurrences(repository, query)
    items = build_items(query, occurrences)
    content = render_text_export(
        items,
        start,
        end,
        title=settings.export_title,
        default_category=settings.default_category,
    )

    logger.info(f"Exported shopping list with {len(items)} items")
    return PlainTextResponse(
        content,
        media_type="text/plain; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{export_filename(start)}"'},
    )


@router.post("/share", response_model=ShareResponse)
async def share_shopping_list(
    request: ShoppingListRequest,
    repository: MealPlanRepository = Depends(get_meal_plan_repository),
) -> ShareResponse:
    """Shopping list as plain text for sharing."""
    query = resolve_query(request)
    start, end = query.date_range

    occurrences = await load_occurrences(repository, query)
    items = build_items(query, occurrences)
    text = render_share_text(
        items,
        start,
        end,
        title=settings.export_title,
        default_category=settings.default_category,
    )
    return ShareResponse(title=settings.export_title, text=text)


@router.post("/cooks", response_model=list[CookResponse])
async def list_available_cooks(
    request: ShoppingListRequest,
    repository: MealPlanRepository = Depends(get_meal_plan_repository),
) -> list[CookResponse]:
    """Cooks of the selected profiles' meals in the period; any cook filter is ignored."""
    query = resolve_query(request.model_copy(update={"cook_responsible_id": None}))
    occurrences = await load_occurrences(repository, query)
    return [CookResponse(id=cook.id, name=cook.name) for cook in available_cooks(occurrences)]
