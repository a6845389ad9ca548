import os

os.environ.setdefault("DATABASE_URL", "sqlite://")

from datetime import datetime, timedelta
from itertools import count

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from checkin_app.core.exceptions import DuplicateEdge, DuplicateUser
from checkin_app.db.session import Base, build_engine, get_db
from checkin_app.db.store import SqlAlchemyStore
from checkin_app.models import User, Venue, Checkin, Friendship

BASE_TIME = datetime(2024, 5, 1, 12, 0, 0)


class MemoryStore:
    """Dict-backed SocialStore used to exercise the services without a database."""

    def __init__(self):
        self.users = {}
        self.venues = {}
        self.checkins = {}
        self.friendships = {}
        self._ids = {name: count(1) for name in ("users", "venues", "checkins", "friendships")}

    def _assign(self, table, obj):
        obj.id = next(self._ids[table])
        getattr(self, table)[obj.id] = obj
        return obj

    # users
    def get_user(self, user_id):
        return self.users.get(user_id)

    def get_users(self, user_ids):
        return [self.users[i] for i in sorted(set(user_ids)) if i in self.users]

    def find_user_conflict(self, username, email, exclude_id=None):
        for user in self.users.values():
            if user.id == exclude_id:
                continue
            if (username is not None and user.username == username) or (email is not None and user.email == email):
                return user
        return None

    def add_user(self, user):
        if self.find_user_conflict(user.username, user.email) is not None:
            raise DuplicateUser()
        user.created_at = user.updated_at = datetime.utcnow()
        return self._assign("users", user)

    def save_user(self, user):
        user.updated_at = datetime.utcnow()
        return user

    # venues
    def get_venue(self, venue_id):
        return self.venues.get(venue_id)

    def get_venues(self, venue_ids):
        return [self.venues[i] for i in sorted(set(venue_ids)) if i in self.venues]

    def add_venue(self, venue):
        venue.created_at = venue.updated_at = datetime.utcnow()
        return self._assign("venues", venue)

    def venues_in_bounds(self, min_lat, max_lat, min_lon=None, max_lon=None):
        result = []
        for venue in sorted(self.venues.values(), key=lambda v: v.id):
            if not min_lat <= venue.latitude <= max_lat:
                continue
            if min_lon is not None and not min_lon <= venue.longitude <= max_lon:
                continue
            result.append(venue)
        return result

    def count_venues_created_by(self, user_id):
        return sum(1 for v in self.venues.values() if v.created_by == user_id)

    # check-ins
    def add_checkin(self, checkin):
        if checkin.created_at is None:
            checkin.created_at = datetime.utcnow()
        return self._assign("checkins", checkin)

    def checkins_for_users(self, user_ids, limit=None):
        ids = set(user_ids)
        rows = [
            c for c in self.checkins.values()
            if c.user_id in ids and c.user_id in self.users and c.venue_id in self.venues
        ]
        rows.sort(key=lambda c: (c.created_at, c.id), reverse=True)
        return rows[:limit] if limit is not None else rows

    def count_checkins(self, user_id):
        return sum(1 for c in self.checkins.values() if c.user_id == user_id)

    # friendships
    def get_friendship(self, friendship_id, for_update=False):
        return self.friendships.get(friendship_id)

    def friendship_between(self, user_a, user_b):
        pair = Friendship.canonical_pair(user_a, user_b)
        for edge in self.friendships.values():
            if (edge.user_low_id, edge.user_high_id) == pair:
                return edge
        return None

    def insert_friendship(self, friendship):
        if self.friendship_between(friendship.requester_id, friendship.addressee_id) is not None:
            raise DuplicateEdge()
        return self._assign("friendships", friendship)

    def set_friendship_status(self, friendship, status):
        friendship.status = status
        friendship.updated_at = datetime.utcnow()
        return friendship

    def delete_friendship(self, friendship_id):
        return self.friendships.pop(friendship_id, None) is not None

    def friendships_for(self, user_id, status=None):
        return [
            e for e in sorted(self.friendships.values(), key=lambda e: e.id)
            if user_id in (e.requester_id, e.addressee_id) and (status is None or e.status == status)
        ]

    def incoming_friendships(self, user_id, status):
        return [
            e for e in sorted(self.friendships.values(), key=lambda e: (e.created_at, e.id))
            if e.addressee_id == user_id and e.status == status
        ]


class Seeder:
    """Builds rows through any SocialStore."""

    def __init__(self, store):
        self.store = store
        self._tick = count()

    def user(self, username, full_name=None):
        return self.store.add_user(User(
            username=username,
            email=f"{username}@example.com",
            full_name=full_name or username.title(),
        ))

    def venue(self, creator, name, latitude, longitude, category="cafe", description=None, address=None):
        return self.store.add_venue(Venue(
            name=name,
            address=address or f"{name} street 1",
            latitude=latitude,
            longitude=longitude,
            category=category,
            description=description,
            created_by=creator.id,
        ))

    def checkin(self, user, venue, message=None, created_at=None):
        if created_at is None:
            created_at = BASE_TIME + timedelta(minutes=next(self._tick))
        return self.store.add_checkin(Checkin(
            user_id=user.id,
            venue_id=venue.id,
            message=message,
            created_at=created_at,
        ))

    def friendship(self, requester, addressee, status="pending"):
        edge = self.store.insert_friendship(Friendship.request(requester.id, addressee.id))
        if status != "pending":
            edge = self.store.set_friendship_status(edge, status)
        return edge


@pytest.fixture
def memory_store():
    return MemoryStore()


@pytest.fixture
def engine():
    engine = build_engine("sqlite://", echo=False, poolclass=StaticPool)
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db(engine):
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSession()
    yield session
    session.close()


@pytest.fixture
def sql_store(db):
    return SqlAlchemyStore(db)


@pytest.fixture(params=["memory", "sql"])
def store(request):
    """Runs a test against both store implementations."""
    if request.param == "memory":
        return request.getfixturevalue("memory_store")
    return request.getfixturevalue("sql_store")


@pytest.fixture
def seed(store):
    return Seeder(store)


@pytest.fixture
def client(engine):
    from main import app

    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    def override_get_db():
        session = TestingSession()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def seeder_class():
    return Seeder
