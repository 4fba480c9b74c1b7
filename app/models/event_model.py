import datetime as dt
from enum import Enum as PyEnum
from typing import Optional

from sqlalchemy import DateTime, Enum, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base


class EventType(str, PyEnum):
    health_care = "health_care"
    walk = "walk"


class Event(Base):
    """Scheduled reminder for a pet; start_time drives email notification"""
    __tablename__ = "events"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    pet_id: Mapped[int] = mapped_column(Integer, ForeignKey("pets.pet_id", ondelete="CASCADE"), nullable=False)
    user_id: Mapped[int] = mapped_column(Integer, ForeignKey("users.user_id", ondelete="CASCADE"), nullable=False)
    start_time: Mapped[Optional[dt.datetime]] = mapped_column(DateTime(timezone=True))
    end_time: Mapped[Optional[dt.datetime]] = mapped_column(DateTime(timezone=True))
    description: Mapped[str] = mapped_column(String(255), nullable=False)
    type: Mapped[EventType] = mapped_column(Enum(EventType), nullable=False)
    detail: Mapped[Optional[str]] = mapped_column(Text)
    frequency: Mapped[Optional[int]] = mapped_column(Integer, default=1)
    created_at: Mapped[dt.datetime] = mapped_column(DateTime(timezone=True), default=lambda: dt.datetime.now(dt.timezone.utc))

    # Relationships
    pet = relationship("Pet", back_populates="events")
    user = relationship("User", back_populates="events")
