"""Pydantic schemas for API requests and responses."""

from src.schemas.pantry import PantryItemResponse, PantryItemUpdate, PantryItemUpsert
from src.schemas.recipe import (
    ProcessIngredientsRequest,
    ProcessIngredientsResponse,
    RecipeCreate,
    RecipeResponse,
    RecipeUpdate,
)

__all__ = [
    "RecipeCreate",
    "RecipeUpdate",
    "RecipeResponse",
    "ProcessIngredientsRequest",
    "ProcessIngredientsResponse",
    "PantryItemUpsert",
    "PantryItemUpdate",
    "PantryItemResponse",
]
