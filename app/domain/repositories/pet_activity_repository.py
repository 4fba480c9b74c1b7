from datetime import datetime
from typing import Optional, Sequence

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from app.domain.repositories.base_sqlalchemy import SQLAlchemyRepository
from app.models.pet_activity_model import PetActivity
from app.models.pet_model import Pet


class PetActivityRepository(SQLAlchemyRepository[PetActivity, int]):
    def __init__(self, db: Session):
        super().__init__(PetActivity, db)

    def for_pet(self, pet_id: int) -> Sequence[PetActivity]:
        stmt = (
            select(PetActivity)
            .where(PetActivity.pet_id == pet_id)
            .order_by(PetActivity.date)
        )
        return self.db.scalars(stmt).all()

    def get_owned(self, activity_id: int, user_id: int) -> Optional[PetActivity]:
        stmt = (
            select(PetActivity)
            .join(Pet, PetActivity.pet_id == Pet.pet_id)
            .where(PetActivity.activity_id == activity_id, Pet.user_id == user_id)
        )
        return self.db.scalar(stmt)

    def sum_frequency(
        self,
        pet_id: int,
        activity: Optional[str] = None,
        start_date: Optional[datetime] = None,
        end_date: Optional[datetime] = None,
    ) -> int:
        """Total ``frequency`` of a pet's activities, optionally by label and date window."""
        conditions = [PetActivity.pet_id == pet_id]
        if activity is not None:
            conditions.append(PetActivity.activity == activity)
        if start_date is not None and end_date is not None:
            conditions.append(PetActivity.date >= start_date)
            conditions.append(PetActivity.date <= end_date)

        stmt = select(func.coalesce(func.sum(PetActivity.frequency), 0)).where(*conditions)
        return int(self.db.scalar(stmt) or 0)
