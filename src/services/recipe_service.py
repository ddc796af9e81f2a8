"""Recipe service for CRUD operations."""

import logging

from sqlalchemy.orm import Session

from src.models.recipe import Recipe
from src.schemas.recipe import RecipeCreate, RecipeUpdate

logger = logging.getLogger(__name__)


class RecipeService:
    """Service for recipe-related operations."""

    def __init__(self, db: Session):
        self.db = db

    def list_recipes(self, meal_type: str | None = None) -> list[Recipe]:
        """List recipes newest first, optionally filtered by meal type."""
        query = self.db.query(Recipe)
        if meal_type:
            query = query.filter(Recipe.meal_type == meal_type)
        return query.order_by(Recipe.created_at.desc(), Recipe.id.desc()).all()

    def get(self, recipe_id: int) -> Recipe | None:
        """Get a recipe by id."""
        return self.db.query(Recipe).filter(Recipe.id == recipe_id).first()

    def create(self, data: RecipeCreate) -> Recipe:
        """Create a recipe."""
        recipe = Recipe(
            name=data.name,
            meal_type=data.meal_type,
            ingredients=data.ingredients,
            instructions=data.instructions,
        )
        self.db.add(recipe)
        self.db.commit()
        self.db.refresh(recipe)
        logger.info(f"Created recipe {recipe.id} '{recipe.name}'")
        return recipe

    def update(self, recipe_id: int, data: RecipeUpdate) -> Recipe | None:
        """Update the provided fields of a recipe. Returns None if not found."""
        recipe = self.get(recipe_id)
        if not recipe:
            return None

        if data.name is not None:
            recipe.name = data.name
        if data.meal_type is not None:
            recipe.meal_type = data.meal_type
        if data.ingredients is not None:
            recipe.ingredients = data.ingredients
        if "instructions" in data.model_fields_set:
            recipe.instructions = data.instructions

        self.db.commit()
        self.db.refresh(recipe)
        return recipe

    def delete(self, recipe_id: int) -> bool:
        """Delete a recipe. Returns False if not found."""
        recipe = self.get(recipe_id)
        if not recipe:
            return False
        self.db.delete(recipe)
        self.db.commit()
        return True
