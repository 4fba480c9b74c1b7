from typing import Sequence

from app.domain.exceptions import HealthRecordNotFound
from app.domain.unit_of_work import UnitOfWork
from app.models.pet_health_model import PetHealthInfo
from app.models.user_model import User
from app.schemas.pet_health_schema import PetHealthSchema
from app.schemas.pet_schema import PetSchema
from app.services.pet_service import PetService
from app.utils.time_utils import ensure_utc


class PetHealthService:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow
        self.pets = PetService(uow)

    def record(
        self, pet_id: int, payload: PetHealthSchema.Create, user: User
    ) -> PetHealthSchema.Created:
        """Store a measurement for one of the user's pets."""
        pet = self.pets.get(pet_id, user)
        with self.uow:
            info = PetHealthInfo(
                pet_id=pet.pet_id,
                size=payload.size,
                weight=payload.weight,
                date=ensure_utc(payload.date),
            )
            self.uow.health.add(info)
            self.uow.commit()

        return PetHealthSchema.Created(
            pet=PetSchema.Brief.model_validate(pet),
            health_info=PetHealthSchema.Info.model_validate(info),
        )

    def list_for_user(self, user: User) -> Sequence[PetHealthInfo]:
        return self.uow.health.for_owner(user.user_id)

    def list_for_pet(self, pet_id: int, user: User) -> Sequence[PetHealthInfo]:
        pet = self.pets.get(pet_id, user)
        return self.uow.health.for_pet(pet.pet_id)

    def update(
        self, health_id: int, payload: PetHealthSchema.Update, user: User
    ) -> PetHealthInfo:
        info = self._get_owned(health_id, user)
        values = payload.model_dump(exclude_unset=True, exclude_none=True)
        if values.get("date") is not None:
            values["date"] = ensure_utc(values["date"])
        self.uow.health.update(info, values)
        self.uow.commit()
        return info

    def delete(self, health_id: int, user: User) -> None:
        info = self._get_owned(health_id, user)
        self.uow.health.delete(info)
        self.uow.commit()

    def _get_owned(self, health_id: int, user: User) -> PetHealthInfo:
        info = self.uow.health.get_owned(health_id, user.user_id)
        if not info:
            raise HealthRecordNotFound(health_id)
        return info
