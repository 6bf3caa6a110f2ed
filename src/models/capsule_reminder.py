"""Capsule reminder model."""

from sqlalchemy import Column, ForeignKey, Integer, String, Time
from sqlalchemy.orm import relationship

from src.database import Base
from src.models.mixins import TimestampMixin


class CapsuleReminder(Base, TimestampMixin):
    """A daily reminder to take a capsule (medication, supplement)."""

    __tablename__ = "capsule_reminders"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    time = Column(Time, nullable=False)  # time of day, user's local clock

    # Relationships
    user = relationship("User", backref="capsule_reminders")
