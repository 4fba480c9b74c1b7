from typing import Optional, Sequence

from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from app.domain.repositories.base_sqlalchemy import SQLAlchemyRepository
from app.models.pet_model import Pet


class PetRepository(SQLAlchemyRepository[Pet, int]):
    def __init__(self, db: Session):
        super().__init__(Pet, db)

    def for_owner(self, user_id: int) -> Sequence[Pet]:
        stmt = select(Pet).where(Pet.user_id == user_id).order_by(Pet.pet_id)
        return self.db.scalars(stmt).all()

    def for_owner_with_activities(self, user_id: int) -> Sequence[Pet]:
        stmt = (
            select(Pet)
            .options(selectinload(Pet.activities))
            .where(Pet.user_id == user_id)
            .order_by(Pet.pet_id)
        )
        return self.db.scalars(stmt).all()

    def get_owned(self, pet_id: int, user_id: int) -> Optional[Pet]:
        """Pet by id, only when it belongs to ``user_id``."""
        stmt = select(Pet).where(Pet.pet_id == pet_id, Pet.user_id == user_id)
        return self.db.scalar(stmt)
