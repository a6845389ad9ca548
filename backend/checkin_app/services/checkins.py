from typing import List, Optional
from checkin_app.core.exceptions import UserNotFound, VenueNotFound
from checkin_app.db.store import SocialStore
from checkin_app.models.checkin import Checkin
from checkin_app.schemas.checkin import CheckinCreate
from checkin_app.utils.logger import logger


class CheckinService:
    def __init__(self, store: SocialStore):
        self.store = store

    def create_checkin(self, data: CheckinCreate) -> Checkin:
        if self.store.get_user(data.user_id) is None:
            raise UserNotFound("User not found")
        if self.store.get_venue(data.venue_id) is None:
            raise VenueNotFound("Venue not found")

        checkin = self.store.add_checkin(Checkin(**data.model_dump()))
        logger.info(f"Check-in {checkin.id}: user {checkin.user_id} at venue {checkin.venue_id}")
        return checkin

    def user_checkins(self, user_id: int, limit: Optional[int] = None) -> List[Checkin]:
        return self.store.checkins_for_users([user_id], limit=limit)
