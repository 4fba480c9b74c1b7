import datetime as dt
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from app.schemas.pet_schema import PetSchema


class PetHealthSchema:
    class Create(BaseModel):
        size: float = Field(..., ge=0)
        weight: float = Field(..., ge=0)
        date: dt.datetime

    class Update(BaseModel):
        size: Optional[float] = Field(None, ge=0)
        weight: Optional[float] = Field(None, ge=0)
        date: Optional[dt.datetime] = None

    class Out(BaseModel):
        health_id: int
        pet_id: int
        size: float
        weight: float
        date: dt.datetime

        model_config = ConfigDict(from_attributes=True)

    class Info(BaseModel):
        size: float
        weight: float
        date: dt.datetime

        model_config = ConfigDict(from_attributes=True)

    class Created(BaseModel):
        """Shape returned after recording a measurement: pet summary plus the new values."""
        pet: PetSchema.Brief
        health_info: "PetHealthSchema.Info"


PetHealthSchema.Created.model_rebuild()
