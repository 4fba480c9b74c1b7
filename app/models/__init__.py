# Import order is important to avoid circular dependencies
from app.models.user_model import User
from app.models.pet_model import Pet, PetType, SexType
from app.models.pet_health_model import PetHealthInfo
from app.models.pet_activity_model import PetActivity
from app.models.event_model import Event, EventType

__all__ = [
    "User",
    "Pet",
    "PetType",
    "SexType",
    "PetHealthInfo",
    "PetActivity",
    "Event",
    "EventType",
]
