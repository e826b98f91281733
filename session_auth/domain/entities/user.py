"""
User Entity

Identity record used as the login key.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

from ..base import utcnow
from .enums import UserRole


class User(SQLModel, table=True):
    """
    User entity - the account a session belongs to.

    Business Rules:
    - Email is unique and stored lower-cased
    - Password stored as bcrypt hash, never returned outward
    - Role defaults to USER; an admin cannot demote or delete themselves
    """

    __tablename__ = "users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=255)
    email: str = Field(unique=True, index=True, max_length=255)
    password_hash: str = Field(max_length=60)  # Bcrypt output is 60 chars

    role: UserRole = Field(default=UserRole.USER)

    # Timestamps
    created_at: datetime = Field(
        default_factory=utcnow, sa_column=Column(DateTime, nullable=False)
    )
    updated_at: datetime = Field(
        default_factory=utcnow, sa_column=Column(DateTime, nullable=False)
    )
