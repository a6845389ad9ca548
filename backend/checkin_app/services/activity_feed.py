from typing import List, Optional
from checkin_app.db.store import SocialStore
from checkin_app.schemas.feed import FeedItem
from checkin_app.services.friend_graph import FriendGraphResolver

DEFAULT_FEED_LIMIT = 20


class ActivityFeedAggregator:
    def __init__(self, store: SocialStore, resolver: Optional[FriendGraphResolver] = None):
        self.store = store
        self.resolver = resolver or FriendGraphResolver(store)

    def feed(self, user_id: int, limit: int = DEFAULT_FEED_LIMIT) -> List[FeedItem]:
        """Most recent check-ins by accepted friends of ``user_id``."""
        friend_ids = self.resolver.friend_ids(user_id)
        if not friend_ids:
            return []

        checkins = self.store.checkins_for_users(friend_ids, limit=limit)
        if not checkins:
            return []

        users = {user.id: user for user in self.store.get_users({c.user_id for c in checkins})}
        venues = {venue.id: venue for venue in self.store.get_venues({c.venue_id for c in checkins})}

        items = []
        for checkin in checkins:
            user = users.get(checkin.user_id)
            venue = venues.get(checkin.venue_id)
            if user is None or venue is None:
                continue
            items.append(FeedItem(
                id=checkin.id,
                user_id=user.id,
                username=user.username,
                full_name=user.full_name,
                venue_id=venue.id,
                venue_name=venue.name,
                venue_address=venue.address,
                message=checkin.message,
                created_at=checkin.created_at,
            ))
        return items
