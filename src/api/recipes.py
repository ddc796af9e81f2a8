"""Recipe API endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError

from src.api.dependencies import get_ingredient_reconciler, get_recipe_service
from src.models.recipe import Recipe
from src.schemas.recipe import (
    ProcessIngredientsRequest,
    ProcessIngredientsResponse,
    RecipeCreate,
    RecipeResponse,
    RecipeUpdate,
)
from src.services.ingredient_parser import IngredientParser
from src.services.reconciler import IngredientReconciler
from src.services.recipe_service import RecipeService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/recipes", tags=["recipes"])


def get_recipe_or_404(service: RecipeService, recipe_id: int) -> Recipe:
    """Get a recipe or raise 404."""
    recipe = service.get(recipe_id)
    if not recipe:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Recipe not found")
    return recipe


@router.get("", response_model=list[RecipeResponse])
def list_recipes(
    service: Annotated[RecipeService, Depends(get_recipe_service)],
    meal_type: str | None = None,
):
    """List recipes, newest first, optionally filtered by meal type."""
    return service.list_recipes(meal_type)


@router.post("", response_model=RecipeResponse, status_code=status.HTTP_201_CREATED)
def create_recipe(
    recipe_data: RecipeCreate,
    service: Annotated[RecipeService, Depends(get_recipe_service)],
):
    """Create a new recipe."""
    return service.create(recipe_data)


@router.get("/{recipe_id}", response_model=RecipeResponse)
def get_recipe(
    recipe_id: int,
    service: Annotated[RecipeService, Depends(get_recipe_service)],
):
    """Get a specific recipe."""
    return get_recipe_or_404(service, recipe_id)


@router.put("/{recipe_id}", response_model=RecipeResponse)
def update_recipe(
    recipe_id: int,
    recipe_data: RecipeUpdate,
    service: Annotated[RecipeService, Depends(get_recipe_service)],
):
    """Update a recipe."""
    recipe = service.update(recipe_id, recipe_data)
    if not recipe:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Recipe not found")
    return recipe


@router.delete("/{recipe_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_recipe(
    recipe_id: int,
    service: Annotated[RecipeService, Depends(get_recipe_service)],
):
    """Delete a recipe."""
    if not service.delete(recipe_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Recipe not found")


@router.post("/{recipe_id}/process-ingredients", response_model=ProcessIngredientsResponse)
def process_ingredients(
    recipe_id: int,
    request: ProcessIngredientsRequest,
    service: Annotated[RecipeService, Depends(get_recipe_service)],
    reconciler: Annotated[IngredientReconciler, Depends(get_ingredient_reconciler)],
):
    """Add a recipe's missing ingredients to the shopping list.

    Each ingredient not yet in the pantry is created there as not on hand.
    Ingredients already in the pantry are left as they are.
    """
    if not request.ingredients:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Ingredient list is required",
        )

    get_recipe_or_404(service, recipe_id)

    ingredient_list = IngredientParser.parse(request.ingredients)
    try:
        summary = reconciler.reconcile(ingredient_list)
    except SQLAlchemyError as e:
        logger.error(f"Processing ingredients for recipe {recipe_id} failed: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to process ingredients",
        ) from e

    return ProcessIngredientsResponse(
        message=f"Processed {summary.processed_count} ingredients",
        processed_count=summary.processed_count,
        added_to_shopping_list=summary.added_to_shopping_list,
        ingredients=summary.ingredients,
    )
