"""API routers for the littlecook application."""

from littlecook.routers.ingredients import router as ingredients_router
from littlecook.routers.shopping_list import router as shopping_list_router

__all__ = [
    "ingredients_router",
    "shopping_list_router",
]
