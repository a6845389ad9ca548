
from checkin_app.models.user import User
from checkin_app.models.venue import Venue
from checkin_app.models.checkin import Checkin
from checkin_app.models.friendship import Friendship, FRIENDSHIP_STATUSES

__all__ = [
    "User",
    "Venue",
    "Checkin",
    "Friendship",
    "FRIENDSHIP_STATUSES"
]
