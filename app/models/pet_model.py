import datetime as dt
from enum import Enum as PyEnum
from typing import Optional

from sqlalchemy import DateTime, Enum, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base


class PetType(str, PyEnum):
    dog = "dog"
    cat = "cat"
    bird = "bird"
    rabbit = "rabbit"
    other = "other"


class SexType(str, PyEnum):
    male = "male"
    female = "female"


class Pet(Base):
    __tablename__ = "pets"

    pet_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(Integer, ForeignKey("users.user_id", ondelete="CASCADE"), nullable=False)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    sex: Mapped[SexType] = mapped_column(Enum(SexType), nullable=False)
    type: Mapped[PetType] = mapped_column(Enum(PetType), nullable=False)
    date_of_birth: Mapped[Optional[dt.datetime]] = mapped_column(DateTime(timezone=True))
    created_at: Mapped[dt.datetime] = mapped_column(DateTime(timezone=True), default=lambda: dt.datetime.now(dt.timezone.utc))

    # Relationships
    owner = relationship("User", back_populates="pets")
    health_records = relationship("PetHealthInfo", back_populates="pet", cascade="all, delete-orphan")
    activities = relationship("PetActivity", back_populates="pet", cascade="all, delete-orphan")
    events = relationship("Event", back_populates="pet", cascade="all, delete-orphan")
