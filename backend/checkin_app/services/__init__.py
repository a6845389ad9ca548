"""Core social services; each takes a store implementing SocialStore."""
from checkin_app.services.friend_graph import FriendGraphResolver
from checkin_app.services.friendship import FriendshipStateMachine
from checkin_app.services.geo_search import GeoSearchEngine
from checkin_app.services.activity_feed import ActivityFeedAggregator
from checkin_app.services.users import UserService
from checkin_app.services.venues import VenueService
from checkin_app.services.checkins import CheckinService

__all__ = [
    'FriendGraphResolver',
    'FriendshipStateMachine',
    'GeoSearchEngine',
    'ActivityFeedAggregator',
    'UserService',
    'VenueService',
    'CheckinService'
]
