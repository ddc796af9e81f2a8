"""Pantry service for ingredient availability."""

import logging

from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.orm import Session

from src.models.pantry import PantryItem
from src.services.ingredient_parser import IngredientParser

logger = logging.getLogger(__name__)

# Dialects with native INSERT ... ON CONFLICT DO NOTHING support
ON_CONFLICT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


class PantryService:
    """Service for pantry-related operations.

    Every method that takes an ingredient name normalizes it first, so
    lookups and inserts always agree on the key.
    """

    def __init__(self, db: Session):
        self.db = db

    def get(self, ingredient: str) -> PantryItem | None:
        """Get a pantry entry by ingredient name."""
        key = IngredientParser.normalize(ingredient)
        return self.db.query(PantryItem).filter(PantryItem.ingredient == key).first()

    def get_by_id(self, item_id: int) -> PantryItem | None:
        """Get a pantry entry by id."""
        return self.db.query(PantryItem).filter(PantryItem.id == item_id).first()

    def list_all(self) -> list[PantryItem]:
        """List every pantry entry, ordered by ingredient."""
        return self.db.query(PantryItem).order_by(PantryItem.ingredient).all()

    def list_missing(self) -> list[PantryItem]:
        """List the shopping list: entries not on hand, ordered by ingredient."""
        return (
            self.db.query(PantryItem)
            .filter(PantryItem.has_item.is_(False))
            .order_by(PantryItem.ingredient)
            .all()
        )

    def upsert(self, ingredient: str, has_item: bool) -> PantryItem:
        """Create a pantry entry or replace the availability of an existing one."""
        key = IngredientParser.normalize(ingredient)
        item = self.get(key)
        if item:
            item.has_item = has_item
        else:
            item = PantryItem(ingredient=key, has_item=has_item)
            self.db.add(item)
        self.db.commit()
        self.db.refresh(item)
        return item

    def set_availability(self, item_id: int, has_item: bool) -> PantryItem | None:
        """Mark a pantry entry as on hand or missing. Returns None if not found."""
        item = self.get_by_id(item_id)
        if not item:
            return None
        item.has_item = has_item
        self.db.commit()
        self.db.refresh(item)
        return item

    def remove(self, item_id: int) -> bool:
        """Delete a pantry entry. Returns False if not found."""
        item = self.get_by_id(item_id)
        if not item:
            return False
        self.db.delete(item)
        self.db.commit()
        return True

    def insert_if_absent(self, ingredient: str, has_item: bool = False) -> bool:
        """Insert a pantry entry unless one already exists for the ingredient.

        Relies on the unique constraint on pantry.ingredient, so a concurrent
        writer inserting the same key turns this into a no-op instead of an
        IntegrityError. Does not commit; the caller owns the transaction.

        Returns:
            True if a row was inserted, False if the ingredient was already present.
        """
        key = IngredientParser.normalize(ingredient)
        dialect = self.db.get_bind().dialect.name
        insert = ON_CONFLICT_INSERTS.get(dialect)

        if insert is None:
            # No ON CONFLICT support; fall back to check-then-insert
            if self.get(key):
                return False
            self.db.add(PantryItem(ingredient=key, has_item=has_item))
            self.db.flush()
            return True

        stmt = (
            insert(PantryItem.__table__)
            .values(ingredient=key, has_item=has_item)
            .on_conflict_do_nothing(index_elements=["ingredient"])
        )
        result = self.db.execute(stmt)
        inserted = result.rowcount == 1
        if inserted:
            logger.debug(f"Inserted pantry entry '{key}' (has_item={has_item})")
        return inserted
