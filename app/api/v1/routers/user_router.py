from fastapi import APIRouter, Depends

from app.api.v1.dependencies import get_current_user, get_uow
from app.domain.unit_of_work import UnitOfWork
from app.models.user_model import User
from app.schemas.user_schema import UserSchema
from app.services.user_service import UserService
from app.utils.logger import get_logger

logger = get_logger("user_router")


class UserRouter:
    def __init__(self):
        self.router = APIRouter(prefix="/users", tags=["Users"])
        self._register()

    def _register(self):
        self.router.post("/", response_model=UserSchema.Out, status_code=201)(self._register_user)
        self.router.get("/me", response_model=UserSchema.Out)(self._me)

    async def _register_user(self, payload: UserSchema.Create, uow: UnitOfWork = Depends(get_uow)):
        logger.info("Registering user")
        return UserService(uow).register(payload)

    async def _me(self, current: User = Depends(get_current_user)):
        return current


user_router = UserRouter().router
