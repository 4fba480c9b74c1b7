from fastapi import APIRouter, Depends, status

from app.api.v1.dependencies import get_current_user, get_uow
from app.domain.unit_of_work import UnitOfWork
from app.models.user_model import User
from app.schemas.pet_schema import PetSchema
from app.services.pet_service import PetService
from app.utils.logger import get_logger

logger = get_logger("pet_router")


class PetRouter:
    def __init__(self):
        self.router = APIRouter(prefix="/pets", tags=["Pets"])
        self._register()

    def _register(self):
        self.router.get("/", response_model=list[PetSchema.Out])(self._list_pets)
        self.router.post("/", response_model=PetSchema.Out, status_code=201)(self._create_pet)
        self.router.get("/{pet_id}", response_model=PetSchema.Out)(self._get_pet)
        self.router.put("/{pet_id}", response_model=PetSchema.Out)(self._update_pet)
        self.router.delete("/{pet_id}", status_code=status.HTTP_204_NO_CONTENT)(self._delete_pet)

    async def _list_pets(
        self, uow: UnitOfWork = Depends(get_uow), current: User = Depends(get_current_user)
    ):
        return PetService(uow).list_for_user(current)

    async def _create_pet(
        self,
        payload: PetSchema.Create,
        uow: UnitOfWork = Depends(get_uow),
        current: User = Depends(get_current_user),
    ):
        logger.info(f"Creating pet for user {current.user_id}")
        return PetService(uow).create(payload, current)

    async def _get_pet(
        self, pet_id: int, uow: UnitOfWork = Depends(get_uow), current: User = Depends(get_current_user)
    ):
        return PetService(uow).get(pet_id, current)

    async def _update_pet(
        self,
        pet_id: int,
        payload: PetSchema.Update,
        uow: UnitOfWork = Depends(get_uow),
        current: User = Depends(get_current_user),
    ):
        logger.info(f"Updating pet {pet_id}")
        return PetService(uow).update(pet_id, payload, current)

    async def _delete_pet(
        self, pet_id: int, uow: UnitOfWork = Depends(get_uow), current: User = Depends(get_current_user)
    ):
        logger.info(f"Deleting pet {pet_id}")
        PetService(uow).delete(pet_id, current)


pet_router = PetRouter().router
