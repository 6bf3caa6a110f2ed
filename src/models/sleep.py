"""Sleep model."""

from sqlalchemy import Column, Date, Float, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from src.database import Base
from src.models.mixins import TimestampMixin


class Sleep(Base, TimestampMixin):
    """A night of sleep logged by a user."""

    __tablename__ = "sleep"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    duration = Column(Float, nullable=False)  # hours
    quality = Column(String(50), nullable=True)  # free text: "good", "restless", ...
    date = Column(Date, nullable=False)

    # Relationships
    user = relationship("User", backref="sleep_entries")
