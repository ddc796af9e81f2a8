"""Reconcile recipe ingredients against the pantry."""

import logging
from dataclasses import dataclass, field
from typing import Literal

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from src.services.pantry_service import PantryService

logger = logging.getLogger(__name__)

ReconcileMode = Literal["best_effort", "transactional"]


@dataclass
class ReconciliationSummary:
    """Outcome of reconciling one ingredient list."""

    processed_count: int = 0
    added_to_shopping_list: int = 0
    ingredients: list[str] = field(default_factory=list)


class IngredientReconciler:
    """Record ingredients missing from the pantry as shopping-list items.

    Ingredients are handled strictly in order, one storage round-trip at a
    time, so a repeated ingredient is inserted by its first occurrence and
    found by the later ones.

    Modes:
        best_effort: commit after every insert. If a later ingredient fails,
            the entries already inserted by this call stay in the pantry.
        transactional: commit once at the end. Any failure rolls back every
            entry inserted by this call.
    """

    def __init__(self, db: Session, mode: ReconcileMode = "best_effort"):
        self.db = db
        self.mode = mode
        self.pantry = PantryService(db)

    def reconcile(self, ingredients: list[str]) -> ReconciliationSummary:
        """Check each normalized ingredient against the pantry.

        Existing entries are left untouched whatever their has_item value.
        Missing ones are inserted with has_item = False.

        Raises:
            SQLAlchemyError: the first storage failure; remaining ingredients
                are not processed.
        """
        summary = ReconciliationSummary(ingredients=list(ingredients))

        try:
            for ingredient in ingredients:
                if self._add_if_missing(ingredient):
                    summary.added_to_shopping_list += 1
                summary.processed_count += 1

            if self.mode == "transactional":
                self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(
                f"Ingredient reconciliation stopped after {summary.processed_count} "
                f"of {len(ingredients)} ingredients ({self.mode}): {e}"
            )
            raise

        logger.info(
            f"Reconciled {summary.processed_count} ingredients, "
            f"{summary.added_to_shopping_list} added to shopping list"
        )
        return summary

    def _add_if_missing(self, ingredient: str) -> bool:
        """Insert a missing ingredient as not on hand. Returns True if inserted."""
        if self.pantry.get(ingredient) is not None:
            return False

        # A concurrent request may have inserted it since the lookup
        inserted = self.pantry.insert_if_absent(ingredient, has_item=False)

        if self.mode == "best_effort":
            self.db.commit()
        return inserted
