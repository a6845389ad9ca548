from checkin_app.core.exceptions import UserNotFound, DuplicateUser
from checkin_app.db.store import SocialStore
from checkin_app.models.user import User
from checkin_app.schemas.user import UserCreate, UserUpdate, UserProfileResponse
from checkin_app.services.friend_graph import FriendGraphResolver
from checkin_app.utils.logger import logger


class UserService:
    def __init__(self, store: SocialStore):
        self.store = store

    def create_user(self, data: UserCreate) -> User:
        if self.store.find_user_conflict(data.username, data.email) is not None:
            raise DuplicateUser("Username or email already registered")

        user = self.store.add_user(User(**data.model_dump()))
        logger.info(f"User created: {user.id} ({user.username})")
        return user

    def update_user(self, user_id: int, data: UserUpdate) -> User:
        user = self.store.get_user(user_id)
        if user is None:
            raise UserNotFound("User not found")

        changes = data.model_dump(exclude_unset=True)
        # username/email/full_name are required columns
        for field in ("username", "email", "full_name"):
            if field in changes and changes[field] is None:
                changes.pop(field)

        if self.store.find_user_conflict(changes.get("username"), changes.get("email"), exclude_id=user_id) is not None:
            raise DuplicateUser("Username or email already registered")

        for field, value in changes.items():
            setattr(user, field, value)
        return self.store.save_user(user)

    def get_profile(self, user_id: int) -> UserProfileResponse:
        user = self.store.get_user(user_id)
        if user is None:
            raise UserNotFound("User not found")

        return UserProfileResponse(
            id=user.id,
            username=user.username,
            email=user.email,
            full_name=user.full_name,
            bio=user.bio,
            profile_image_url=user.profile_image_url,
            created_at=user.created_at,
            updated_at=user.updated_at,
            checkin_count=self.store.count_checkins(user_id),
            venue_count=self.store.count_venues_created_by(user_id),
            friend_count=len(FriendGraphResolver(self.store).friend_ids(user_id)),
        )
