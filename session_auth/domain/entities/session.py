"""
Session Entity

One record per issued refresh token.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel, Text

from ..base import utcnow


class Session(SQLModel, table=True):
    """
    Session entity - backs one outstanding refresh token.

    Business Rules:
    - Usable iff not revoked and now < expires_at
    - is_revoked only ever flips False -> True
    - Tokens rotate on each refresh: the consumed session is revoked and a
      new one is created
    - Expired rows are filtered at read time, not purged
    - Deleted with the owning user
    """

    __tablename__ = "sessions"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    user_id: UUID = Field(
        foreign_key="users.id", ondelete="CASCADE", nullable=False, index=True
    )

    token: str = Field(sa_column=Column(Text, nullable=False, unique=True))
    user_agent: str = Field(default="unknown", max_length=500)
    ip_address: str = Field(default="unknown", max_length=45)

    is_revoked: bool = Field(default=False)

    # Timestamps
    expires_at: datetime = Field(sa_column=Column(DateTime, nullable=False))
    created_at: datetime = Field(
        default_factory=utcnow, sa_column=Column(DateTime, nullable=False)
    )
    updated_at: datetime = Field(
        default_factory=utcnow, sa_column=Column(DateTime, nullable=False)
    )

    __table_args__ = (
        Index("idx_session_expires_at", "expires_at"),
        Index("idx_session_user_revoked", "user_id", "is_revoked"),
    )

    def is_expired(self, now: datetime) -> bool:
        return now >= self.expires_at
