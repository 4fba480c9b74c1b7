"""Immutable reminder snapshot held by the notifier queue."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from app.models.event_model import Event
from app.utils.time_utils import parse_timestamp


@dataclass(frozen=True)
class ScheduledEvent:
    event_id: int
    start_time: Optional[datetime]
    recipient_email: str
    pet_name: str
    description: str = ""
    event_type: str = ""
    detail: Optional[str] = None
    end_time: Optional[datetime] = None
    frequency: Optional[int] = None

    @classmethod
    def from_model(cls, event: Event) -> "ScheduledEvent":
        """Detach the fields the notifier needs from an ORM row.

        ``start_time`` is None when the stored value cannot be read as a
        timestamp; such events are never queued.
        """
        pet = event.pet
        owner = pet.owner if pet is not None else None
        event_type = event.type.value if hasattr(event.type, "value") else str(event.type or "")
        return cls(
            event_id=event.id,
            start_time=parse_timestamp(event.start_time),
            recipient_email=owner.email if owner is not None else "",
            pet_name=pet.name if pet is not None else "",
            description=event.description or "",
            event_type=event_type,
            detail=event.detail,
            end_time=parse_timestamp(event.end_time),
            frequency=event.frequency,
        )
