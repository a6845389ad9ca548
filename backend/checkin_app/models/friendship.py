from sqlalchemy import Column, Integer, DateTime, Enum, ForeignKey, UniqueConstraint, CheckConstraint
from datetime import datetime
from checkin_app.db.session import Base

FRIENDSHIP_STATUSES = ("pending", "accepted", "rejected", "blocked")

class Friendship(Base):
    __tablename__ = "friendships"

    id = Column(Integer, primary_key=True, autoincrement=True)
    requester_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    addressee_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    # Canonical pair (always low < high), one row per unordered pair
    user_low_id = Column(Integer, nullable=False)
    user_high_id = Column(Integer, nullable=False)
    status = Column(Enum(*FRIENDSHIP_STATUSES, name="friendship_status"), nullable=False, default="pending")
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    __table_args__ = (
        UniqueConstraint("user_low_id", "user_high_id", name="uq_friendship_pair"),
        CheckConstraint("user_low_id < user_high_id", name="ck_friendship_order"),
    )

    @staticmethod
    def canonical_pair(a: int, b: int) -> tuple[int, int]:
        return (a, b) if a < b else (b, a)

    @classmethod
    def request(cls, requester_id: int, addressee_id: int) -> "Friendship":
        """Build a pending edge from requester to addressee."""
        low, high = cls.canonical_pair(requester_id, addressee_id)
        now = datetime.utcnow()
        return cls(
            requester_id=requester_id,
            addressee_id=addressee_id,
            user_low_id=low,
            user_high_id=high,
            status="pending",
            created_at=now,
            updated_at=now,
        )

    def other_user_id(self, user_id: int) -> int:
        return self.addressee_id if self.requester_id == user_id else self.requester_id

    def __repr__(self):
        return f"<Friendship id={self.id} {self.requester_id}->{self.addressee_id} status={self.status}>"
