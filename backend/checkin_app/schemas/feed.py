from typing import Optional
from datetime import datetime
from pydantic import BaseModel

class FeedItem(BaseModel):
    """A friend's check-in, denormalized with actor and venue details."""
    id: int
    user_id: int
    username: str
    full_name: str
    venue_id: int
    venue_name: str
    venue_address: str
    # None is kept as None, never coerced to ""
    message: Optional[str] = None
    created_at: datetime
