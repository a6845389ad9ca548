from checkin_app.core.exceptions import UserNotFound, VenueNotFound
from checkin_app.db.store import SocialStore
from checkin_app.models.venue import Venue
from checkin_app.schemas.venue import VenueCreate


class VenueService:
    def __init__(self, store: SocialStore):
        self.store = store

    def create_venue(self, data: VenueCreate) -> Venue:
        if self.store.get_user(data.created_by) is None:
            raise UserNotFound("Creating user not found")
        return self.store.add_venue(Venue(**data.model_dump()))

    def get_venue(self, venue_id: int) -> Venue:
        venue = self.store.get_venue(venue_id)
        if venue is None:
            raise VenueNotFound("Venue not found")
        return venue
