"""
Session Entity

Server-side record of one issued refresh-token grant.
"""

from datetime import datetime, timedelta
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.clock import utcnow


class Session(SQLModel, table=True):
    """
    Session entity - binds a refresh token to a user and an expiry.

    Business Rules:
    - Refresh token values are unique across live sessions
    - expires_at == created_at + session TTL (7 days) at creation
    - Never mutated in place: rotation deletes the row and creates a new one
    - Expired rows are deleted when a refresh attempt hits them
    """

    __tablename__ = "user_sessions"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    user_id: UUID = Field(foreign_key="users.id", nullable=False, index=True)

    refresh_token: str = Field(unique=True, index=True, nullable=False)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    expires_at: datetime = Field(sa_column=Column(DateTime, nullable=False))

    __table_args__ = (Index("idx_session_expires_at", "expires_at"),)

    @classmethod
    def open(
        cls,
        user_id: UUID,
        refresh_token: str,
        ttl: timedelta,
        now: Optional[datetime] = None,
    ) -> "Session":
        """Build a new session whose expiry is computed from its own creation time."""
        created_at = now or utcnow()
        return cls(
            user_id=user_id,
            refresh_token=refresh_token,
            created_at=created_at,
            expires_at=created_at + ttl,
        )

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        return self.expires_at <= (now or utcnow())
