"""Sample recipes and pantry staples for a fresh database."""

import logging

from sqlalchemy.orm import Session

from src.models.recipe import Recipe
from src.services.pantry_service import PantryService

logger = logging.getLogger(__name__)

SAMPLE_RECIPES = [
    {
        "name": "Omelete Simples",
        "meal_type": "cafe",
        "ingredients": "2 ovos, sal, queijo ralado, manteiga",
        "instructions": (
            "Bata os ovos com sal. Aqueça a manteiga na frigideira. "
            "Despeje os ovos e adicione o queijo. Dobre ao meio quando estiver firme."
        ),
    },
    {
        "name": "Arroz com Feijão",
        "meal_type": "almoco",
        "ingredients": "1 xícara de arroz, 1 lata de feijão, alho, cebola, óleo",
        "instructions": (
            "Refogue alho e cebola no óleo. Adicione o arroz e deixe dourar. "
            "Adicione água e cozinhe. Sirva com feijão."
        ),
    },
    {
        "name": "Salada Verde",
        "meal_type": "jantar",
        "ingredients": "Alface, tomate, cebola, azeite, vinagre, sal",
        "instructions": "Lave e corte os vegetais. Misture com azeite, vinagre e sal a gosto.",
    },
]

SAMPLE_PANTRY_ITEMS = [
    "arroz",
    "feijão",
    "ovos",
    "leite",
    "pão",
    "queijo",
    "manteiga",
    "alho",
    "cebola",
    "tomate",
    "alface",
    "óleo",
    "sal",
]


def seed_sample_data(db: Session) -> tuple[int, int]:
    """Insert sample recipes and pantry staples that are not there yet.

    Safe to run repeatedly: recipes are matched by name, pantry staples by
    ingredient, and existing rows are never modified.

    Returns:
        (recipes_added, pantry_items_added)
    """
    existing_names = {name for (name,) in db.query(Recipe.name).all()}
    recipes_added = 0
    for data in SAMPLE_RECIPES:
        if data["name"] in existing_names:
            continue
        db.add(Recipe(**data))
        recipes_added += 1

    pantry = PantryService(db)
    pantry_added = sum(
        1 for ingredient in SAMPLE_PANTRY_ITEMS if pantry.insert_if_absent(ingredient, has_item=True)
    )

    db.commit()
    if recipes_added or pantry_added:
        logger.info(f"Seeded {recipes_added} recipes and {pantry_added} pantry items")
    return recipes_added, pantry_added
