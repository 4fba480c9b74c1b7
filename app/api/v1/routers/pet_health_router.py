from fastapi import APIRouter, Depends, status

from app.api.v1.dependencies import get_current_user, get_uow
from app.domain.unit_of_work import UnitOfWork
from app.models.user_model import User
from app.schemas.pet_health_schema import PetHealthSchema
from app.services.pet_health_service import PetHealthService
from app.utils.logger import get_logger

logger = get_logger("pet_health_router")


class PetHealthRouter:
    def __init__(self):
        self.router = APIRouter(prefix="/pet-health", tags=["Pet Health"])
        self._register()

    def _register(self):
        self.router.get("/", response_model=list[PetHealthSchema.Out])(self._list_all)
        self.router.get("/pet/{pet_id}", response_model=list[PetHealthSchema.Out])(self._list_for_pet)
        self.router.post("/pet/{pet_id}", response_model=PetHealthSchema.Created, status_code=201)(self._record)
        self.router.put("/{health_id}", response_model=PetHealthSchema.Out)(self._update)
        self.router.delete("/{health_id}", status_code=status.HTTP_204_NO_CONTENT)(self._delete)

    async def _list_all(
        self, uow: UnitOfWork = Depends(get_uow), current: User = Depends(get_current_user)
    ):
        return PetHealthService(uow).list_for_user(current)

    async def _list_for_pet(
        self, pet_id: int, uow: UnitOfWork = Depends(get_uow), current: User = Depends(get_current_user)
    ):
        return PetHealthService(uow).list_for_pet(pet_id, current)

    async def _record(
        self,
        pet_id: int,
        payload: PetHealthSchema.Create,
        uow: UnitOfWork = Depends(get_uow),
        current: User = Depends(get_current_user),
    ):
        logger.info(f"Recording health info for pet {pet_id}")
        return PetHealthService(uow).record(pet_id, payload, current)

    async def _update(
        self,
        health_id: int,
        payload: PetHealthSchema.Update,
        uow: UnitOfWork = Depends(get_uow),
        current: User = Depends(get_current_user),
    ):
        return PetHealthService(uow).update(health_id, payload, current)

    async def _delete(
        self, health_id: int, uow: UnitOfWork = Depends(get_uow), current: User = Depends(get_current_user)
    ):
        PetHealthService(uow).delete(health_id, current)


pet_health_router = PetHealthRouter().router
