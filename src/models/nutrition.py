"""Nutrition model."""

from sqlalchemy import Column, Date, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from src.database import Base
from src.models.mixins import TimestampMixin


class Nutrition(Base, TimestampMixin):
    """A food item eaten by a user on a given day."""

    __tablename__ = "nutrition"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    food_item = Column(String(255), nullable=False)
    calories_gained = Column(Integer, nullable=True)
    date = Column(Date, nullable=False)

    # Relationships
    user = relationship("User", backref="nutrition_entries")
