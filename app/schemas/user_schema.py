import datetime as dt
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr


class UserSchema:
    class Create(BaseModel):
        email: EmailStr
        username: Optional[str] = None

    class Out(BaseModel):
        user_id: int
        email: str
        username: Optional[str] = None
        created_at: Optional[dt.datetime] = None

        model_config = ConfigDict(from_attributes=True)
