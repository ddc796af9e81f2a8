"""SQLAlchemy models."""

from src.models.pantry import PantryItem
from src.models.recipe import Recipe

__all__ = [
    "Recipe",
    "PantryItem",
]
