from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from app.api.v1.dependencies import get_current_user, get_uow
from app.domain.unit_of_work import UnitOfWork
from app.models.user_model import User
from app.schemas.pet_activity_schema import PetActivitySchema
from app.schemas.pet_schema import PetWithActivities
from app.services.pet_activity_service import PetActivityService
from app.utils.logger import get_logger

logger = get_logger("pet_activity_router")


class PetActivityRouter:
    def __init__(self):
        self.router = APIRouter(prefix="/activities", tags=["Pet Activities"])
        self._register()

    def _register(self):
        self.router.get("/", response_model=list[PetWithActivities])(self._list_all)
        self.router.get("/pet/{pet_id}", response_model=list[PetActivitySchema.Out])(self._list_for_pet)
        self.router.post("/pet/{pet_id}", response_model=PetActivitySchema.Out, status_code=201)(self._add)
        self.router.get("/pet/{pet_id}/count", response_model=PetActivitySchema.Count)(self._count)
        self.router.put("/{activity_id}", response_model=PetActivitySchema.Out)(self._update)
        self.router.delete("/{activity_id}", status_code=status.HTTP_204_NO_CONTENT)(self._delete)

    async def _list_all(
        self, uow: UnitOfWork = Depends(get_uow), current: User = Depends(get_current_user)
    ):
        return PetActivityService(uow).list_all(current)

    async def _list_for_pet(
        self, pet_id: int, uow: UnitOfWork = Depends(get_uow), current: User = Depends(get_current_user)
    ):
        return PetActivityService(uow).list_for_pet(pet_id, current)

    async def _add(
        self,
        pet_id: int,
        payload: PetActivitySchema.Create,
        uow: UnitOfWork = Depends(get_uow),
        current: User = Depends(get_current_user),
    ):
        logger.info(f"Adding activity for pet {pet_id}")
        return PetActivityService(uow).add(pet_id, payload, current)

    async def _count(
        self,
        pet_id: int,
        activity: Optional[str] = Query(None),
        start_date: Optional[datetime] = Query(None),
        end_date: Optional[datetime] = Query(None),
        uow: UnitOfWork = Depends(get_uow),
        current: User = Depends(get_current_user),
    ):
        return PetActivityService(uow).count(pet_id, current, activity, start_date, end_date)

    async def _update(
        self,
        activity_id: int,
        payload: PetActivitySchema.Update,
        uow: UnitOfWork = Depends(get_uow),
        current: User = Depends(get_current_user),
    ):
        return PetActivityService(uow).update(activity_id, payload, current)

    async def _delete(
        self, activity_id: int, uow: UnitOfWork = Depends(get_uow), current: User = Depends(get_current_user)
    ):
        logger.info(f"Deleting activity {activity_id}")
        PetActivityService(uow).delete(activity_id, current)


pet_activity_router = PetActivityRouter().router
