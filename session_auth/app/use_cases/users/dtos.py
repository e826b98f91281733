"""
User Management DTOs
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel

from session_auth.domain.entities import User, UserRole


class UpdateProfileCommand(BaseModel):
    """Self-service profile changes; unset fields are left unchanged"""

    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None


class UpdateUserCommand(UpdateProfileCommand):
    """Admin changes to any user, including role"""

    role: Optional[UserRole] = None


class UserProfile(BaseModel):
    id: str
    name: str
    email: str
    role: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserProfile":
        return cls(
            id=str(user.id),
            name=user.name,
            email=user.email,
            role=user.role.value,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


class PageMeta(BaseModel):
    total: int
    page: int
    limit: int
    total_pages: int


class UserPage(BaseModel):
    data: List[UserProfile]
    meta: PageMeta
