"""Pantry item model for tracking which ingredients are on hand."""

from sqlalchemy import Boolean, Column, Integer, String, true

from src.database import Base
from src.models.mixins import TimestampMixin


class PantryItem(Base, TimestampMixin):
    """Pantry entry keyed by normalized ingredient name.

    Entries with has_item = False make up the shopping list.
    """

    __tablename__ = "pantry"

    id = Column(Integer, primary_key=True, index=True)
    # Lowercase, trimmed; the unique index backs insert-if-absent
    ingredient = Column(String(255), nullable=False, unique=True)
    has_item = Column(Boolean, nullable=False, default=True, server_default=true())
