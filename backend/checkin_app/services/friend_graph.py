from typing import List, Set
from checkin_app.db.store import SocialStore
from checkin_app.models.user import User


class FriendGraphResolver:
    """Resolves confirmed friends over undirected accepted edges."""

    def __init__(self, store: SocialStore):
        self.store = store

    def friend_ids(self, user_id: int) -> Set[int]:
        # The user may sit on either side of an edge
        edges = self.store.friendships_for(user_id, status="accepted")
        ids = {edge.other_user_id(user_id) for edge in edges}
        ids.discard(user_id)
        return ids

    def friends_of(self, user_id: int) -> List[User]:
        """
        Accepted friends of ``user_id``, ordered by id.

        Unknown users simply have no edges and get an empty list.
        """
        ids = self.friend_ids(user_id)
        if not ids:
            return []
        return self.store.get_users(ids)
