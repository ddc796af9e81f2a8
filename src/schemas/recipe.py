"""Recipe schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

# --- Recipe ---


class RecipeCreate(BaseModel):
    """Create a new recipe."""

    name: str = Field(..., min_length=1, max_length=255)
    meal_type: str = Field(..., min_length=1, max_length=50)
    ingredients: str = Field(..., min_length=1, max_length=10000)  # Comma-separated
    instructions: str | None = Field(None, max_length=50000)


class RecipeUpdate(BaseModel):
    """Update a recipe."""

    name: str | None = Field(None, min_length=1, max_length=255)
    meal_type: str | None = Field(None, min_length=1, max_length=50)
    ingredients: str | None = Field(None, min_length=1, max_length=10000)
    instructions: str | None = Field(None, max_length=50000)


class RecipeResponse(BaseModel):
    """Recipe response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    meal_type: str
    ingredients: str
    instructions: str | None
    created_at: datetime
    updated_at: datetime


# --- Process Ingredients ---


class ProcessIngredientsRequest(BaseModel):
    """Raw ingredient list to reconcile against the pantry.

    Optional at the schema level so that a missing list is reported as a
    400 by the endpoint rather than a 422.
    """

    ingredients: str | None = Field(None, max_length=10000)


class ProcessIngredientsResponse(BaseModel):
    """Summary of an ingredient processing run."""

    message: str
    processed_count: int
    added_to_shopping_list: int
    ingredients: list[str]
