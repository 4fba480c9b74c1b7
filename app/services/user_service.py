from app.domain.exceptions import UserAlreadyExists, UserNotFound, UserNotIdentified
from app.domain.unit_of_work import UnitOfWork
from app.models.user_model import User
from app.schemas.user_schema import UserSchema
from app.utils.logger import get_logger

logger = get_logger("user_service")


class UserService:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    def register(self, payload: UserSchema.Create) -> User:
        email = payload.email.lower()
        if self.uow.users.get_by_email(email):
            raise UserAlreadyExists("email", email)

        with self.uow:
            user = User(email=email, username=payload.username)
            self.uow.users.add(user)
            self.uow.commit()
            logger.info(f"Registered user {user.user_id} <{email}>")
            return user

    def get(self, user_id: int) -> User:
        user = self.uow.users.get(user_id)
        if not user:
            raise UserNotFound(str(user_id))
        return user

    def resolve(self, email: str | None) -> User:
        """Map the caller's identity header to a stored user."""
        if not email or not email.strip():
            raise UserNotIdentified()
        user = self.uow.users.get_by_email(email.strip().lower())
        if not user:
            raise UserNotIdentified()
        return user
