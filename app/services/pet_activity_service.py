from datetime import datetime
from typing import Optional, Sequence

from app.domain.exceptions import ActivityNotFound, InvalidRange
from app.domain.unit_of_work import UnitOfWork
from app.models.pet_activity_model import PetActivity
from app.models.pet_model import Pet
from app.models.user_model import User
from app.schemas.pet_activity_schema import PetActivitySchema
from app.services.pet_service import PetService
from app.utils.time_utils import ensure_utc


class PetActivityService:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow
        self.pets = PetService(uow)

    def add(self, pet_id: int, payload: PetActivitySchema.Create, user: User) -> PetActivity:
        pet = self.pets.get(pet_id, user)
        with self.uow:
            activity = PetActivity(
                pet_id=pet.pet_id,
                activity=payload.activity,
                frequency=payload.frequency,
                date=ensure_utc(payload.date),
            )
            self.uow.activities.add(activity)
            self.uow.commit()
            return activity

    def list_all(self, user: User) -> Sequence[Pet]:
        """The user's pets with their activities attached."""
        return self.uow.pets.for_owner_with_activities(user.user_id)

    def list_for_pet(self, pet_id: int, user: User) -> Sequence[PetActivity]:
        pet = self.pets.get(pet_id, user)
        return self.uow.activities.for_pet(pet.pet_id)

    def update(
        self, activity_id: int, payload: PetActivitySchema.Update, user: User
    ) -> PetActivity:
        activity = self._get_owned(activity_id, user)
        values = payload.model_dump(exclude_unset=True, exclude_none=True)
        if values.get("date") is not None:
            values["date"] = ensure_utc(values["date"])
        self.uow.activities.update(activity, values)
        self.uow.commit()
        return activity

    def delete(self, activity_id: int, user: User) -> None:
        activity = self._get_owned(activity_id, user)
        self.uow.activities.delete(activity)
        self.uow.commit()

    def count(
        self,
        pet_id: int,
        user: User,
        activity: Optional[str] = None,
        start_date: Optional[datetime] = None,
        end_date: Optional[datetime] = None,
    ) -> PetActivitySchema.Count:
        """Sum of frequencies; the date window applies only when both bounds are given."""
        pet = self.pets.get(pet_id, user)

        if start_date is not None and end_date is not None:
            start_date, end_date = ensure_utc(start_date), ensure_utc(end_date)
            if start_date > end_date:
                raise InvalidRange("date range", "start_date is after end_date")
        else:
            start_date = end_date = None

        total = self.uow.activities.sum_frequency(
            pet.pet_id, activity=activity, start_date=start_date, end_date=end_date
        )
        return PetActivitySchema.Count(
            pet_id=pet.pet_id,
            activity=activity,
            start_date=start_date,
            end_date=end_date,
            total_frequency=total,
        )

    def _get_owned(self, activity_id: int, user: User) -> PetActivity:
        activity = self.uow.activities.get_owned(activity_id, user.user_id)
        if not activity:
            raise ActivityNotFound(activity_id)
        return activity
