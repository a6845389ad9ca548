from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime

class VenueCreate(BaseModel):
    name: str = Field(..., min_length=1)
    address: str = Field(..., min_length=1)
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
    category: str = Field(..., min_length=1)
    description: Optional[str] = None
    phone: Optional[str] = None
    website: Optional[str] = None
    created_by: int

class VenueResponse(BaseModel):
    id: int
    name: str
    address: str
    latitude: float
    longitude: float
    category: str
    description: Optional[str] = None
    phone: Optional[str] = None
    website: Optional[str] = None
    created_by: int
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
