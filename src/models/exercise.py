"""Exercise model."""

from sqlalchemy import Column, Date, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from src.database import Base
from src.models.mixins import TimestampMixin


class Exercise(Base, TimestampMixin):
    """A single workout logged by a user."""

    __tablename__ = "exercises"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    type = Column(String(100), nullable=False)  # "running", "cycling", ...
    duration = Column(Integer, nullable=False)  # minutes
    calories_burned = Column(Integer, nullable=True)
    date = Column(Date, nullable=False)

    # Relationships
    user = relationship("User", backref="exercises")
