"""FastAPI dependencies for services."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.orm import Session

from src.config import get_settings
from src.database import get_db
from src.services.pantry_service import PantryService
from src.services.reconciler import IngredientReconciler
from src.services.recipe_service import RecipeService


def get_recipe_service(
    db: Annotated[Session, Depends(get_db)],
) -> RecipeService:
    """Get recipe service with dependencies."""
    return RecipeService(db)


def get_pantry_service(
    db: Annotated[Session, Depends(get_db)],
) -> PantryService:
    """Get pantry service with dependencies."""
    return PantryService(db)


def get_ingredient_reconciler(
    db: Annotated[Session, Depends(get_db)],
) -> IngredientReconciler:
    """Get ingredient reconciler using the configured commit mode."""
    return IngredientReconciler(db, mode=get_settings().reconcile_mode)
