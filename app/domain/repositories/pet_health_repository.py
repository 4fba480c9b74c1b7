from typing import Optional, Sequence

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.domain.repositories.base_sqlalchemy import SQLAlchemyRepository
from app.models.pet_health_model import PetHealthInfo
from app.models.pet_model import Pet


class PetHealthRepository(SQLAlchemyRepository[PetHealthInfo, int]):
    def __init__(self, db: Session):
        super().__init__(PetHealthInfo, db)

    def for_pet(self, pet_id: int) -> Sequence[PetHealthInfo]:
        stmt = (
            select(PetHealthInfo)
            .where(PetHealthInfo.pet_id == pet_id)
            .order_by(PetHealthInfo.date.desc())
        )
        return self.db.scalars(stmt).all()

    def for_owner(self, user_id: int) -> Sequence[PetHealthInfo]:
        stmt = (
            select(PetHealthInfo)
            .join(Pet, PetHealthInfo.pet_id == Pet.pet_id)
            .where(Pet.user_id == user_id)
            .order_by(PetHealthInfo.pet_id, PetHealthInfo.date.desc())
        )
        return self.db.scalars(stmt).all()

    def get_owned(self, health_id: int, user_id: int) -> Optional[PetHealthInfo]:
        stmt = (
            select(PetHealthInfo)
            .join(Pet, PetHealthInfo.pet_id == Pet.pet_id)
            .where(PetHealthInfo.health_id == health_id, Pet.user_id == user_id)
        )
        return self.db.scalar(stmt)
