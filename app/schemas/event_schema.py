import datetime as dt
from typing import Optional

from pydantic import BaseModel, ConfigDict

from app.models.event_model import EventType


class EventSchema:
    class Create(BaseModel):
        start_time: dt.datetime
        end_time: Optional[dt.datetime] = None
        description: str
        type: EventType
        detail: Optional[str] = None
        frequency: Optional[int] = 1

    class Update(BaseModel):
        start_time: Optional[dt.datetime] = None
        end_time: Optional[dt.datetime] = None
        description: Optional[str] = None
        type: Optional[EventType] = None
        detail: Optional[str] = None
        frequency: Optional[int] = None

    class PetName(BaseModel):
        name: str

        model_config = ConfigDict(from_attributes=True)

    class Out(BaseModel):
        id: int
        pet_id: int
        user_id: int
        start_time: Optional[dt.datetime] = None
        end_time: Optional[dt.datetime] = None
        description: str
        type: EventType
        detail: Optional[str] = None
        frequency: Optional[int] = None

        model_config = ConfigDict(from_attributes=True)

    class Detail(Out):
        pet: Optional["EventSchema.PetName"] = None


EventSchema.Detail.model_rebuild()
