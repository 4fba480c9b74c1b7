from fastapi import APIRouter, Depends, status

from app.api.v1.dependencies import get_current_user, get_uow
from app.domain.unit_of_work import UnitOfWork
from app.models.user_model import User
from app.schemas.event_schema import EventSchema
from app.services.event_service import EventService
from app.utils.logger import get_logger

logger = get_logger("event_router")


class EventRouter:
    def __init__(self):
        self.router = APIRouter(prefix="/reminders", tags=["Reminders"])
        self._register()

    def _register(self):
        self.router.get("/", response_model=list[EventSchema.Detail])(self._list_reminders)
        self.router.post("/pet/{pet_id}", response_model=EventSchema.Out, status_code=201)(self._add_reminder)
        self.router.get("/pet/{pet_id}", response_model=list[EventSchema.Out])(self._list_for_pet)
        self.router.get("/{event_id}", response_model=EventSchema.Detail)(self._get_reminder)
        self.router.put("/{event_id}", response_model=EventSchema.Out)(self._update_reminder)
        self.router.delete("/{event_id}", status_code=status.HTTP_204_NO_CONTENT)(self._delete_reminder)

    async def _list_reminders(
        self, uow: UnitOfWork = Depends(get_uow), current: User = Depends(get_current_user)
    ):
        return EventService(uow).list_for_user(current)

    async def _add_reminder(
        self,
        pet_id: int,
        payload: EventSchema.Create,
        uow: UnitOfWork = Depends(get_uow),
        current: User = Depends(get_current_user),
    ):
        logger.info(f"Adding reminder for pet {pet_id}")
        return EventService(uow).create(pet_id, payload, current)

    async def _list_for_pet(
        self, pet_id: int, uow: UnitOfWork = Depends(get_uow), current: User = Depends(get_current_user)
    ):
        return EventService(uow).list_for_pet(pet_id, current)

    async def _get_reminder(
        self, event_id: int, uow: UnitOfWork = Depends(get_uow), current: User = Depends(get_current_user)
    ):
        return EventService(uow).get(event_id, current)

    async def _update_reminder(
        self,
        event_id: int,
        payload: EventSchema.Update,
        uow: UnitOfWork = Depends(get_uow),
        current: User = Depends(get_current_user),
    ):
        logger.info(f"Updating reminder {event_id}")
        return EventService(uow).update(event_id, payload, current)

    async def _delete_reminder(
        self, event_id: int, uow: UnitOfWork = Depends(get_uow), current: User = Depends(get_current_user)
    ):
        logger.info(f"Deleting reminder {event_id}")
        EventService(uow).delete(event_id, current)


event_router = EventRouter().router
