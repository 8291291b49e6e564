from pydantic import BaseModel, EmailStr, Field
from typing import List
from datetime import datetime


class TripCreate(BaseModel):
    destination: str = Field(min_length=4)
    starts_at: datetime
    ends_at: datetime
    owner_name: str
    owner_email: EmailStr
    emails_to_invite: List[EmailStr]


class TripCreatedResponse(BaseModel):
    tripId: str
