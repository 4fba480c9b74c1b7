from typing import Optional, Sequence

from sqlalchemy import select
from sqlalchemy.orm import Session, joinedload

from app.domain.repositories.base_sqlalchemy import SQLAlchemyRepository
from app.models.event_model import Event
from app.models.pet_model import Pet


class EventRepository(SQLAlchemyRepository[Event, int]):
    def __init__(self, db: Session):
        super().__init__(Event, db)

    def for_user(self, user_id: int) -> Sequence[Event]:
        stmt = (
            select(Event)
            .options(joinedload(Event.pet))
            .where(Event.user_id == user_id)
            .order_by(Event.start_time)
        )
        return self.db.scalars(stmt).all()

    def for_pet(self, pet_id: int) -> Sequence[Event]:
        stmt = select(Event).where(Event.pet_id == pet_id).order_by(Event.start_time)
        return self.db.scalars(stmt).all()

    def get_owned(self, event_id: int, user_id: int) -> Optional[Event]:
        stmt = (
            select(Event)
            .options(joinedload(Event.pet))
            .where(Event.id == event_id, Event.user_id == user_id)
        )
        return self.db.scalar(stmt)

    def all_with_owner(self) -> Sequence[Event]:
        """Every event joined to its pet and the pet's owner, in id order."""
        stmt = (
            select(Event)
            .options(joinedload(Event.pet).joinedload(Pet.owner))
            .order_by(Event.id)
        )
        return self.db.scalars(stmt).unique().all()
