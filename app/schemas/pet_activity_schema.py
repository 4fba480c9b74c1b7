import datetime as dt
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class PetActivitySchema:
    class Create(BaseModel):
        activity: str
        frequency: int = Field(1, ge=0)
        date: dt.datetime

    class Update(BaseModel):
        activity: Optional[str] = None
        frequency: Optional[int] = Field(None, ge=0)
        date: Optional[dt.datetime] = None

    class Out(BaseModel):
        activity_id: int
        pet_id: int
        activity: str
        frequency: int
        date: dt.datetime

        model_config = ConfigDict(from_attributes=True)

    class Count(BaseModel):
        pet_id: int
        activity: Optional[str] = None
        start_date: Optional[dt.datetime] = None
        end_date: Optional[dt.datetime] = None
        total_frequency: int
