"""API-level tests: health, error handling and sample data."""

from unittest.mock import patch

from sqlalchemy.exc import OperationalError

from src.models.pantry import PantryItem
from src.models.recipe import Recipe
from src.services.recipe_service import RecipeService
from src.services.sample_data import SAMPLE_PANTRY_ITEMS, SAMPLE_RECIPES, seed_sample_data


def test_health_check(client):
    """Test health check endpoint."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_database_error_returns_500(client):
    """Test that storage failures outside ingredient processing map to 500."""
    error = OperationalError("SELECT * FROM recipes", {}, Exception("connection refused"))
    with patch.object(RecipeService, "list_recipes", side_effect=error):
        response = client.get("/api/v1/recipes")

    assert response.status_code == 500
    assert response.json()["detail"] == "Database error"


def test_seed_sample_data(db):
    """Test seeding sample recipes and pantry staples."""
    recipes_added, pantry_added = seed_sample_data(db)

    assert recipes_added == len(SAMPLE_RECIPES)
    assert pantry_added == len(SAMPLE_PANTRY_ITEMS)
    assert db.query(PantryItem).filter(PantryItem.has_item.is_(False)).count() == 0


def test_seed_sample_data_is_idempotent(db):
    """Test that seeding twice adds nothing and keeps user changes."""
    seed_sample_data(db)
    leite = db.query(PantryItem).filter(PantryItem.ingredient == "leite").one()
    leite.has_item = False
    db.commit()

    assert seed_sample_data(db) == (0, 0)
    assert db.query(Recipe).count() == len(SAMPLE_RECIPES)
    assert db.query(PantryItem).count() == len(SAMPLE_PANTRY_ITEMS)
    db.refresh(leite)
    assert leite.has_item is False


def test_sample_recipe_against_sample_pantry(client, db):
    """Test processing a sample recipe against the seeded pantry."""
    seed_sample_data(db)
    omelete = next(r for r in client.get("/api/v1/recipes").json() if r["name"] == "Omelete Simples")

    response = client.post(
        f"/api/v1/recipes/{omelete['id']}/process-ingredients",
        json={"ingredients": omelete["ingredients"]},
    )
    assert response.status_code == 200
    # "2 ovos" and "queijo ralado" are not exact pantry keys; sal and manteiga are
    assert response.json()["added_to_shopping_list"] == 2
    assert [i["ingredient"] for i in client.get("/api/v1/shopping-list").json()] == [
        "2 ovos",
        "queijo ralado",
    ]
