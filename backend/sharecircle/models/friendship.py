from datetime import datetime
from uuid import UUID, uuid4

from sqlalchemy import CheckConstraint, DateTime, UniqueConstraint
from sqlalchemy import Enum as SAEnum
from sqlmodel import Column, Field, SQLModel

from sharecircle.core.enums import FriendStatus
from sharecircle.utils import now_utc

__all__ = [
    "FriendEdge",
    "canonical_pair",
]


def canonical_pair(user_a: UUID, user_b: UUID) -> tuple[UUID, UUID]:
    """
    Order two profile ids so that the same unordered pair always maps
    to the same (low, high) tuple.
    """
    return (user_a, user_b) if user_a <= user_b else (user_b, user_a)


class FriendEdge(SQLModel, table=True):
    __tablename__ = "friends"  # type: ignore[assignment]
    __table_args__ = (
        UniqueConstraint("user_low_id", "user_high_id", name="uq_friends_pair"),
        CheckConstraint("requester_id <> recipient_id", name="ck_friends_not_self"),
    )

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    requester_id: UUID = Field(
        foreign_key="profiles.id", index=True, nullable=False, ondelete="CASCADE"
    )
    recipient_id: UUID = Field(
        foreign_key="profiles.id", index=True, nullable=False, ondelete="CASCADE"
    )
    # One row per unordered pair, whichever side sent the request.
    user_low_id: UUID = Field(nullable=False)
    user_high_id: UUID = Field(nullable=False)
    status: FriendStatus = Field(
        default=FriendStatus.PENDING,
        sa_column=Column(
            SAEnum(
                FriendStatus,
                native_enum=False,
                length=16,
                values_callable=lambda enum: [member.value for member in enum],
            ),
            nullable=False,
        ),
    )
    created_at: datetime = Field(
        default_factory=now_utc, sa_type=DateTime(timezone=True), nullable=False
    )

    @classmethod
    def request(cls, *, requester_id: UUID, recipient_id: UUID) -> "FriendEdge":
        user_low_id, user_high_id = canonical_pair(requester_id, recipient_id)
        return cls(
            requester_id=requester_id,
            recipient_id=recipient_id,
            user_low_id=user_low_id,
            user_high_id=user_high_id,
            status=FriendStatus.PENDING,
        )

    def other_party(self, user_id: UUID) -> UUID:
        return self.recipient_id if self.requester_id == user_id else self.requester_id
