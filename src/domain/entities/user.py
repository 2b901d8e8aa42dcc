"""
User Entity

Represents an identity that can log in to the VPS platform.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

from src.domain.clock import utcnow
from .enums import UserRole


class User(SQLModel, table=True):
    """
    User entity - credential-bearing identity.

    Business Rules:
    - Email must be unique across all users (case-sensitive lookup)
    - Password stored as bcrypt hash
    - Inactive users cannot authenticate
    - Read-only from the auth core's perspective
    """

    __tablename__ = "users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    email: str = Field(unique=True, index=True, max_length=255)
    password_hash: str = Field(max_length=60)  # Bcrypt output is 60 chars

    role: UserRole = Field(default=UserRole.user)
    is_active: bool = Field(default=True)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
