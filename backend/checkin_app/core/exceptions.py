"""Domain errors raised by the services and mapped to HTTP responses in main.py."""
from typing import Optional


class SocialError(Exception):
    status_code = 400
    code = "ERROR"

    def __init__(self, detail: Optional[str] = None):
        self.detail = detail or self.default_detail()
        super().__init__(self.detail)

    def default_detail(self) -> str:
        return self.code.replace("_", " ").capitalize()


class NotFound(SocialError):
    status_code = 404
    code = "NOT_FOUND"


class UserNotFound(NotFound):
    code = "USER_NOT_FOUND"


class VenueNotFound(NotFound):
    code = "VENUE_NOT_FOUND"


class SelfRequest(SocialError):
    status_code = 400
    code = "SELF_REQUEST"


class DuplicateEdge(SocialError):
    status_code = 409
    code = "DUPLICATE_EDGE"


class BlockedImmutable(SocialError):
    status_code = 409
    code = "BLOCKED_IMMUTABLE"


class InvalidStatus(SocialError):
    status_code = 422
    code = "INVALID_STATUS"


class DuplicateUser(SocialError):
    status_code = 409
    code = "DUPLICATE_USER"
