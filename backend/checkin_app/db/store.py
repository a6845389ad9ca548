"""
Store interface consumed by the services, and its SQLAlchemy implementation.

Services never touch the session directly; routes hand them a store built
from the request-scoped session so the algorithms can also run against an
in-memory store in tests.
"""
from datetime import datetime
from typing import Iterable, List, Optional, Protocol

from sqlalchemy import func, or_, and_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from checkin_app.core.exceptions import DuplicateEdge, DuplicateUser
from checkin_app.models.user import User
from checkin_app.models.venue import Venue
from checkin_app.models.checkin import Checkin
from checkin_app.models.friendship import Friendship


class SocialStore(Protocol):
    # users
    def get_user(self, user_id: int) -> Optional[User]: ...
    def get_users(self, user_ids: Iterable[int]) -> List[User]: ...
    def find_user_conflict(self, username: Optional[str], email: Optional[str], exclude_id: Optional[int] = None) -> Optional[User]: ...
    def add_user(self, user: User) -> User: ...
    def save_user(self, user: User) -> User: ...

    # venues
    def get_venue(self, venue_id: int) -> Optional[Venue]: ...
    def get_venues(self, venue_ids: Iterable[int]) -> List[Venue]: ...
    def add_venue(self, venue: Venue) -> Venue: ...
    def venues_in_bounds(self, min_lat: float, max_lat: float, min_lon: Optional[float] = None, max_lon: Optional[float] = None) -> List[Venue]: ...
    def count_venues_created_by(self, user_id: int) -> int: ...

    # check-ins
    def add_checkin(self, checkin: Checkin) -> Checkin: ...
    def checkins_for_users(self, user_ids: Iterable[int], limit: Optional[int] = None) -> List[Checkin]: ...
    def count_checkins(self, user_id: int) -> int: ...

    # friendships
    def get_friendship(self, friendship_id: int, for_update: bool = False) -> Optional[Friendship]: ...
    def friendship_between(self, user_a: int, user_b: int) -> Optional[Friendship]: ...
    def insert_friendship(self, friendship: Friendship) -> Friendship: ...
    def set_friendship_status(self, friendship: Friendship, status: str) -> Friendship: ...
    def delete_friendship(self, friendship_id: int) -> bool: ...
    def friendships_for(self, user_id: int, status: Optional[str] = None) -> List[Friendship]: ...
    def incoming_friendships(self, user_id: int, status: str) -> List[Friendship]: ...


class SqlAlchemyStore:
    def __init__(self, db: Session):
        self.db = db

    def _persist(self, obj):
        self.db.add(obj)
        self.db.commit()
        self.db.refresh(obj)
        return obj

    # -- users ---------------------------------------------------------------

    def get_user(self, user_id: int) -> Optional[User]:
        return self.db.query(User).filter(User.id == user_id).first()

    def get_users(self, user_ids: Iterable[int]) -> List[User]:
        ids = set(user_ids)
        if not ids:
            return []
        return self.db.query(User).filter(User.id.in_(ids)).order_by(User.id).all()

    def find_user_conflict(self, username: Optional[str], email: Optional[str], exclude_id: Optional[int] = None) -> Optional[User]:
        clauses = []
        if username is not None:
            clauses.append(User.username == username)
        if email is not None:
            clauses.append(User.email == email)
        if not clauses:
            return None
        query = self.db.query(User).filter(or_(*clauses))
        if exclude_id is not None:
            query = query.filter(User.id != exclude_id)
        return query.first()

    def _persist_user(self, user: User) -> User:
        try:
            return self._persist(user)
        except IntegrityError as exc:
            self.db.rollback()
            raise DuplicateUser("Username or email already registered") from exc

    def add_user(self, user: User) -> User:
        return self._persist_user(user)

    def save_user(self, user: User) -> User:
        user.updated_at = datetime.utcnow()
        return self._persist_user(user)

    # -- venues --------------------------------------------------------------

    def get_venue(self, venue_id: int) -> Optional[Venue]:
        return self.db.query(Venue).filter(Venue.id == venue_id).first()

    def get_venues(self, venue_ids: Iterable[int]) -> List[Venue]:
        ids = set(venue_ids)
        if not ids:
            return []
        return self.db.query(Venue).filter(Venue.id.in_(ids)).order_by(Venue.id).all()

    def add_venue(self, venue: Venue) -> Venue:
        return self._persist(venue)

    def venues_in_bounds(self, min_lat: float, max_lat: float, min_lon: Optional[float] = None, max_lon: Optional[float] = None) -> List[Venue]:
        query = self.db.query(Venue).filter(Venue.latitude >= min_lat, Venue.latitude <= max_lat)
        if min_lon is not None and max_lon is not None:
            query = query.filter(Venue.longitude >= min_lon, Venue.longitude <= max_lon)
        return query.order_by(Venue.id).all()

    def count_venues_created_by(self, user_id: int) -> int:
        return self.db.query(func.count(Venue.id)).filter(Venue.created_by == user_id).scalar() or 0

    # -- check-ins -----------------------------------------------------------

    def add_checkin(self, checkin: Checkin) -> Checkin:
        return self._persist(checkin)

    def checkins_for_users(self, user_ids: Iterable[int], limit: Optional[int] = None) -> List[Checkin]:
        ids = set(user_ids)
        if not ids:
            return []
        # Inner joins drop check-ins whose user or venue is gone before the limit applies
        query = (
            self.db.query(Checkin)
            .join(User, User.id == Checkin.user_id)
            .join(Venue, Venue.id == Checkin.venue_id)
            .filter(Checkin.user_id.in_(ids))
            .order_by(Checkin.created_at.desc(), Checkin.id.desc())
        )
        if limit is not None:
            query = query.limit(limit)
        return query.all()

    def count_checkins(self, user_id: int) -> int:
        return self.db.query(func.count(Checkin.id)).filter(Checkin.user_id == user_id).scalar() or 0

    # -- friendships ---------------------------------------------------------

    def get_friendship(self, friendship_id: int, for_update: bool = False) -> Optional[Friendship]:
        query = self.db.query(Friendship).filter(Friendship.id == friendship_id)
        if for_update:
            query = query.with_for_update()
        return query.first()

    def friendship_between(self, user_a: int, user_b: int) -> Optional[Friendship]:
        return self.db.query(Friendship).filter(
            or_(
                and_(Friendship.requester_id == user_a, Friendship.addressee_id == user_b),
                and_(Friendship.requester_id == user_b, Friendship.addressee_id == user_a)
            )
        ).first()

    def insert_friendship(self, friendship: Friendship) -> Friendship:
        try:
            return self._persist(friendship)
        except IntegrityError as exc:
            # Lost the race on uq_friendship_pair
            self.db.rollback()
            raise DuplicateEdge("Friendship already exists between these users") from exc

    def set_friendship_status(self, friendship: Friendship, status: str) -> Friendship:
        friendship.status = status
        friendship.updated_at = datetime.utcnow()
        return self._persist(friendship)

    def delete_friendship(self, friendship_id: int) -> bool:
        # Single statement; the row count tells a racing loser it removed nothing
        removed = self.db.query(Friendship).filter(Friendship.id == friendship_id).delete()
        self.db.commit()
        return removed > 0

    def friendships_for(self, user_id: int, status: Optional[str] = None) -> List[Friendship]:
        query = self.db.query(Friendship).filter(
            or_(Friendship.requester_id == user_id, Friendship.addressee_id == user_id)
        )
        if status is not None:
            query = query.filter(Friendship.status == status)
        return query.order_by(Friendship.id).all()

    def incoming_friendships(self, user_id: int, status: str) -> List[Friendship]:
        return self.db.query(Friendship).filter(
            Friendship.addressee_id == user_id,
            Friendship.status == status
        ).order_by(Friendship.created_at, Friendship.id).all()
