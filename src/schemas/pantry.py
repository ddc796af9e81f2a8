"""Pantry schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class PantryItemUpsert(BaseModel):
    """Create or replace a pantry item by ingredient name."""

    ingredient: str = Field(..., min_length=1, max_length=255)
    has_item: bool = False


class PantryItemUpdate(BaseModel):
    """Update availability of a pantry item."""

    has_item: bool


class PantryItemResponse(BaseModel):
    """Pantry item response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    ingredient: str
    has_item: bool
    created_at: datetime
    updated_at: datetime
