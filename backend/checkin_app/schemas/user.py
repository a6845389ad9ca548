from pydantic import BaseModel, Field, field_validator, EmailStr
from typing import Optional
from datetime import datetime
import re

USERNAME_PATTERN = re.compile(r'^[a-zA-Z0-9_]+$')


def _check_username(v: str) -> str:
    if not USERNAME_PATTERN.match(v):
        raise ValueError('Username can only contain letters, numbers, and underscores')
    return v


class UserCreate(BaseModel):
    username: str = Field(..., min_length=3, max_length=30)
    email: EmailStr
    full_name: str = Field(..., min_length=1)
    bio: Optional[str] = None
    profile_image_url: Optional[str] = None

    @field_validator('username')
    @classmethod
    def validate_username(cls, v):
        return _check_username(v)


class UserUpdate(BaseModel):
    username: Optional[str] = Field(default=None, min_length=3, max_length=30)
    email: Optional[EmailStr] = None
    full_name: Optional[str] = Field(default=None, min_length=1)
    bio: Optional[str] = None
    profile_image_url: Optional[str] = None

    @field_validator('username')
    @classmethod
    def validate_username(cls, v):
        if v is None:
            return v
        return _check_username(v)


class UserResponse(BaseModel):
    id: int
    username: str
    email: str
    full_name: str
    bio: Optional[str] = None
    profile_image_url: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class FriendResponse(BaseModel):
    """Public view of a friend; carries no friendship metadata."""
    id: int
    username: str
    full_name: str
    bio: Optional[str] = None
    profile_image_url: Optional[str] = None

    class Config:
        from_attributes = True


class UserProfileResponse(UserResponse):
    checkin_count: int
    venue_count: int
    friend_count: int
