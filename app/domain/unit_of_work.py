from abc import ABC, abstractmethod
from contextlib import AbstractContextManager

from sqlalchemy.orm import Session

from app.domain.repositories.event_repository import EventRepository
from app.domain.repositories.pet_activity_repository import PetActivityRepository
from app.domain.repositories.pet_health_repository import PetHealthRepository
from app.domain.repositories.pet_repository import PetRepository
from app.domain.repositories.user_repository import UserRepository


class IUnitOfWork(ABC):
    @abstractmethod
    def __enter__(self): ...
    @abstractmethod
    def __exit__(self, exc_type, exc_val, exc_tb): ...
    @abstractmethod
    def commit(self): ...
    @abstractmethod
    def rollback(self): ...


class UnitOfWork(AbstractContextManager, IUnitOfWork):
    """Coordinates repositories & transaction boundaries."""

    def __init__(self, db: Session):
        self.db = db
        self.users = UserRepository(db)
        self.pets = PetRepository(db)
        self.health = PetHealthRepository(db)
        self.activities = PetActivityRepository(db)
        self.events = EventRepository(db)

    # ---- context-manager API -----------------------------------------
    def __enter__(self):
        return self

    def __exit__(self, exc_type, *_):
        if exc_type is None:
            self.commit()
        else:
            self.rollback()

    # ---- public -------------------------------------------------------
    def commit(self):
        self.db.commit()

    def rollback(self):
        self.db.rollback()
