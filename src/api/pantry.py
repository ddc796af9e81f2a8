"""Pantry and shopping list API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from src.api.dependencies import get_pantry_service
from src.schemas.pantry import PantryItemResponse, PantryItemUpdate, PantryItemUpsert
from src.services.pantry_service import PantryService

router = APIRouter(prefix="/api/v1/pantry", tags=["pantry"])
shopping_list_router = APIRouter(prefix="/api/v1/shopping-list", tags=["pantry"])


@router.get("", response_model=list[PantryItemResponse])
def list_pantry_items(
    service: Annotated[PantryService, Depends(get_pantry_service)],
):
    """List all pantry items, ordered by ingredient."""
    return service.list_all()


@router.post("", response_model=PantryItemResponse)
def upsert_pantry_item(
    item_data: PantryItemUpsert,
    service: Annotated[PantryService, Depends(get_pantry_service)],
):
    """Add an ingredient to the pantry, or set its availability if already there."""
    if not item_data.ingredient.strip():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Ingredient is required",
        )
    return service.upsert(item_data.ingredient, item_data.has_item)


@router.get("/{item_id}", response_model=PantryItemResponse)
def get_pantry_item(
    item_id: int,
    service: Annotated[PantryService, Depends(get_pantry_service)],
):
    """Get a specific pantry item."""
    item = service.get_by_id(item_id)
    if not item:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Pantry item not found")
    return item


@router.put("/{item_id}", response_model=PantryItemResponse)
def update_pantry_item(
    item_id: int,
    item_data: PantryItemUpdate,
    service: Annotated[PantryService, Depends(get_pantry_service)],
):
    """Mark a pantry item as on hand or missing."""
    item = service.set_availability(item_id, item_data.has_item)
    if not item:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Pantry item not found")
    return item


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_pantry_item(
    item_id: int,
    service: Annotated[PantryService, Depends(get_pantry_service)],
):
    """Remove an item from the pantry."""
    if not service.remove(item_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Pantry item not found")


@shopping_list_router.get("", response_model=list[PantryItemResponse])
def get_shopping_list(
    service: Annotated[PantryService, Depends(get_pantry_service)],
):
    """List pantry items that are not on hand, ordered by ingredient."""
    return service.list_missing()
