"""API routes for normalizing free-text ingredient lines."""

from fastapi import APIRouter
from pydantic import BaseModel, Field

from littlecook.logging_config import get_logger
from littlecook.normalize.parser import parse_ingredient_list

logger = get_logger(__name__)

router = APIRouter(prefix="/api/v1/ingredients", tags=["ingredients"])


# Request/Response schemas
class ParseRequest(BaseModel):
    """Raw ingredient lines, e.g. pasted from a recipe website."""

    lines: list[str] = Field(default_factory=list, max_length=500)


class ParsedIngredientSchema(BaseModel):
    """Structured ingredient line."""

    quantity: float
    unit: str
    name: str
    notes: str | None = None
    category: str | None = None


class ParseResponse(BaseModel):
    ingredients: list[ParsedIngredientSchema]
    total: int


@router.post("/parse", response_model=ParseResponse)
async def parse_ingredients(request: ParseRequest) -> ParseResponse:
    """Parse ingredient lines into quantity, unit, name, notes and category."""
    parsed = parse_ingredient_list(request.lines)
    logger.info(f"Parsed {len(parsed)} ingredient lines")
    return ParseResponse(
        ingredients=[ParsedIngredientSchema(**item.to_dict()) for item in parsed],
        total=len(parsed),
    )
