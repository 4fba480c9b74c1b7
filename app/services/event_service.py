from typing import Sequence

from app.domain.exceptions import EventNotFound, InvalidRange
from app.domain.unit_of_work import UnitOfWork
from app.models.event_model import Event
from app.models.user_model import User
from app.schemas.event_schema import EventSchema
from app.services.pet_service import PetService
from app.utils.logger import get_logger
from app.utils.time_utils import ensure_utc

logger = get_logger("event_service")


class EventService:
    """Reminder CRUD. Changes made here reach the notifier only after a restart."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow
        self.pets = PetService(uow)

    def create(self, pet_id: int, payload: EventSchema.Create, user: User) -> Event:
        pet = self.pets.get(pet_id, user)
        values = self._normalise(payload.model_dump())
        with self.uow:
            event = Event(**values, pet_id=pet.pet_id, user_id=user.user_id)
            self.uow.events.add(event)
            self.uow.commit()
            logger.info(f"Reminder {event.id} created for pet {pet.pet_id} at {event.start_time}")
            return event

    def list_for_user(self, user: User) -> Sequence[Event]:
        return self.uow.events.for_user(user.user_id)

    def list_for_pet(self, pet_id: int, user: User) -> Sequence[Event]:
        pet = self.pets.get(pet_id, user)
        return self.uow.events.for_pet(pet.pet_id)

    def get(self, event_id: int, user: User) -> Event:
        event = self.uow.events.get_owned(event_id, user.user_id)
        if not event:
            raise EventNotFound(event_id)
        return event

    def update(self, event_id: int, payload: EventSchema.Update, user: User) -> Event:
        event = self.get(event_id, user)
        values = payload.model_dump(exclude_unset=True, exclude_none=True)
        merged_start = values.get("start_time", event.start_time)
        merged_end = values.get("end_time", event.end_time)
        self._normalise({"start_time": merged_start, "end_time": merged_end})

        self.uow.events.update(event, self._normalise(values))
        self.uow.commit()
        return event

    def delete(self, event_id: int, user: User) -> None:
        event = self.get(event_id, user)
        self.uow.events.delete(event)
        self.uow.commit()

    @staticmethod
    def _normalise(values: dict) -> dict:
        for field in ("start_time", "end_time"):
            if values.get(field) is not None:
                values[field] = ensure_utc(values[field])
        start, end = values.get("start_time"), values.get("end_time")
        if start is not None and end is not None and end < start:
            raise InvalidRange("end_time", "must not be before start_time")
        return values
