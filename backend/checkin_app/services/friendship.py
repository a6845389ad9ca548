from typing import List
from checkin_app.core.exceptions import (
    SelfRequest,
    UserNotFound,
    DuplicateEdge,
    NotFound,
    BlockedImmutable,
    InvalidStatus,
)
from checkin_app.db.store import SocialStore
from checkin_app.models.friendship import Friendship
from checkin_app.utils.logger import logger

UPDATABLE_STATUSES = ("accepted", "rejected", "blocked")


class FriendshipStateMachine:
    """
    Friend request lifecycle.

    pending -> accepted | rejected | blocked
    accepted/rejected -> any of accepted | rejected | blocked
    blocked is terminal.

    One edge per unordered pair: the first create wins, every later create for
    the pair fails with DuplicateEdge whatever the direction or status.
    """

    def __init__(self, store: SocialStore):
        self.store = store

    def create(self, requester_id: int, addressee_id: int) -> Friendship:
        if requester_id == addressee_id:
            raise SelfRequest("Cannot send friend request to yourself")

        users = self.store.get_users([requester_id, addressee_id])
        if len(users) != 2:
            raise UserNotFound("One or both users not found")

        if self.store.friendship_between(requester_id, addressee_id) is not None:
            raise DuplicateEdge("Friendship already exists between these users")

        friendship = self.store.insert_friendship(Friendship.request(requester_id, addressee_id))
        logger.info(f"Friend request sent: {requester_id} -> {addressee_id} (friendship {friendship.id})")
        return friendship

    def update(self, friendship_id: int, new_status: str) -> Friendship:
        if new_status not in UPDATABLE_STATUSES:
            raise InvalidStatus(f"Status must be one of {', '.join(UPDATABLE_STATUSES)}")

        friendship = self.store.get_friendship(friendship_id, for_update=True)
        if friendship is None:
            raise NotFound("Friendship not found")

        if friendship.status == "blocked":
            raise BlockedImmutable("Cannot update blocked friendship")

        previous = friendship.status
        friendship = self.store.set_friendship_status(friendship, new_status)
        logger.info(f"Friendship {friendship_id}: {previous} -> {new_status}")
        return friendship

    def remove(self, friendship_id: int) -> bool:
        removed = self.store.delete_friendship(friendship_id)
        if removed:
            logger.info(f"Friendship {friendship_id} removed")
        return removed

    def pending_requests_for(self, user_id: int) -> List[Friendship]:
        # Incoming only; the user's own outgoing requests are never listed
        return self.store.incoming_friendships(user_id, status="pending")
