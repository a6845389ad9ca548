from fastapi import Depends
from sqlalchemy.orm import Session
from checkin_app.db.session import get_db
from checkin_app.db.store import SqlAlchemyStore
from checkin_app.services import (
    FriendGraphResolver,
    FriendshipStateMachine,
    GeoSearchEngine,
    ActivityFeedAggregator,
    UserService,
    VenueService,
    CheckinService,
)


def get_store(db: Session = Depends(get_db)) -> SqlAlchemyStore:
    """Request-scoped store over the request's session."""
    return SqlAlchemyStore(db)

def get_friend_graph(store: SqlAlchemyStore = Depends(get_store)) -> FriendGraphResolver:
    return FriendGraphResolver(store)

def get_friendship_state_machine(store: SqlAlchemyStore = Depends(get_store)) -> FriendshipStateMachine:
    return FriendshipStateMachine(store)

def get_geo_search(store: SqlAlchemyStore = Depends(get_store)) -> GeoSearchEngine:
    return GeoSearchEngine(store)

def get_activity_feed(store: SqlAlchemyStore = Depends(get_store)) -> ActivityFeedAggregator:
    return ActivityFeedAggregator(store)

def get_user_service(store: SqlAlchemyStore = Depends(get_store)) -> UserService:
    return UserService(store)

def get_venue_service(store: SqlAlchemyStore = Depends(get_store)) -> VenueService:
    return VenueService(store)

def get_checkin_service(store: SqlAlchemyStore = Depends(get_store)) -> CheckinService:
    return CheckinService(store)
