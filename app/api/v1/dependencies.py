from typing import Optional

from fastapi import Depends, Header
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.domain.unit_of_work import UnitOfWork
from app.models.user_model import User
from app.services.user_service import UserService


__all__ = ["get_db", "get_uow", "get_current_user"]


def get_uow(db: Session = Depends(get_db)) -> UnitOfWork:
    """Get a Unit of Work instance for dependency injection."""
    return UnitOfWork(db)


async def get_current_user(
    x_user_email: Optional[str] = Header(None, alias="X-User-Email"),
    uow: UnitOfWork = Depends(get_uow),
) -> User:
    """Acting user, as asserted by the authenticating gateway in front of the API."""
    return UserService(uow).resolve(x_user_email)
