"""Recipe model."""

from sqlalchemy import Column, Integer, String, Text

from src.database import Base
from src.models.mixins import TimestampMixin


class Recipe(Base, TimestampMixin):
    """Recipe model for storing recipe definitions."""

    __tablename__ = "recipes"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    meal_type = Column(String(50), nullable=False, index=True)  # "cafe", "almoco", "jantar", ...
    ingredients = Column(Text, nullable=False)  # Raw comma-separated list
    instructions = Column(Text, nullable=True)
