from fastapi import APIRouter
from app.api.v1.routers.user_router import user_router
from app.api.v1.routers.pet_router import pet_router
from app.api.v1.routers.pet_health_router import pet_health_router
from app.api.v1.routers.pet_activity_router import pet_activity_router
from app.api.v1.routers.event_router import event_router

api_router = APIRouter()

api_router.include_router(user_router)
api_router.include_router(pet_router)
api_router.include_router(pet_health_router)
api_router.include_router(pet_activity_router)
api_router.include_router(event_router)
