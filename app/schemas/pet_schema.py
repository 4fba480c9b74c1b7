import datetime as dt
from typing import List, Optional

from pydantic import BaseModel, ConfigDict

from app.models.pet_model import PetType, SexType


class PetSchema:
    class Create(BaseModel):
        name: str
        sex: SexType
        type: PetType
        date_of_birth: Optional[dt.datetime] = None

    class Update(BaseModel):
        name: Optional[str] = None
        sex: Optional[SexType] = None
        type: Optional[PetType] = None
        date_of_birth: Optional[dt.datetime] = None

    class Out(BaseModel):
        pet_id: int
        user_id: int
        name: str
        sex: SexType
        type: PetType
        date_of_birth: Optional[dt.datetime] = None

        model_config = ConfigDict(from_attributes=True)

    class Brief(BaseModel):
        name: str
        sex: SexType
        type: PetType
        date_of_birth: Optional[dt.datetime] = None

        model_config = ConfigDict(from_attributes=True)


class PetWithActivities(BaseModel):
    pet_id: int
    name: str
    activities: List["PetActivityBrief"] = []

    model_config = ConfigDict(from_attributes=True)


class PetActivityBrief(BaseModel):
    activity_id: int
    activity: str
    frequency: int
    date: dt.datetime

    model_config = ConfigDict(from_attributes=True)


PetWithActivities.model_rebuild()
