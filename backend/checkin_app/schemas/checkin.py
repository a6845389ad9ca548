from pydantic import BaseModel
from typing import Optional
from datetime import datetime

class CheckinCreate(BaseModel):
    user_id: int
    venue_id: int
    message: Optional[str] = None

class CheckinResponse(BaseModel):
    id: int
    user_id: int
    venue_id: int
    message: Optional[str] = None
    created_at: datetime

    class Config:
        from_attributes = True
