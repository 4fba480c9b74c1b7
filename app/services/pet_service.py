from typing import Sequence

from app.domain.exceptions import PetNotFound
from app.domain.unit_of_work import UnitOfWork
from app.models.pet_model import Pet
from app.models.user_model import User
from app.schemas.pet_schema import PetSchema
from app.utils.time_utils import ensure_utc


class PetService:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    def create(self, payload: PetSchema.Create, user: User) -> Pet:
        with self.uow:
            pet = Pet(
                name=payload.name,
                sex=payload.sex,
                type=payload.type,
                date_of_birth=ensure_utc(payload.date_of_birth) if payload.date_of_birth else None,
                user_id=user.user_id,
            )
            self.uow.pets.add(pet)
            self.uow.commit()
            return pet

    def list_for_user(self, user: User) -> Sequence[Pet]:
        return self.uow.pets.for_owner(user.user_id)

    def get(self, pet_id: int, user: User) -> Pet:
        pet = self.uow.pets.get_owned(pet_id, user.user_id)
        if not pet:
            raise PetNotFound(pet_id)
        return pet

    def update(self, pet_id: int, payload: PetSchema.Update, user: User) -> Pet:
        pet = self.get(pet_id, user)
        values = payload.model_dump(exclude_unset=True, exclude_none=True)
        if values.get("date_of_birth") is not None:
            values["date_of_birth"] = ensure_utc(values["date_of_birth"])
        self.uow.pets.update(pet, values)
        self.uow.commit()
        return pet

    def delete(self, pet_id: int, user: User) -> None:
        pet = self.get(pet_id, user)
        self.uow.pets.delete(pet)
        self.uow.commit()
