from typing import Literal
from datetime import datetime
from pydantic import BaseModel

class FriendshipCreate(BaseModel):
    requester_id: int
    addressee_id: int

class FriendshipUpdate(BaseModel):
    # pending is never re-entered through an update
    status: Literal["accepted", "rejected", "blocked"]

class FriendshipResponse(BaseModel):
    id: int
    requester_id: int
    addressee_id: int
    status: str
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True

class FriendshipRemoved(BaseModel):
    removed: bool
