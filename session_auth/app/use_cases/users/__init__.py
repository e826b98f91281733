"""
User Management Use Cases

All user-related business logic.
"""

from .get_user_use_case import GetUserUseCase
from .list_users_use_case import ListUsersUseCase
from .update_profile_use_case import UpdateProfileUseCase
from .update_user_use_case import UpdateUserUseCase
from .delete_user_use_case import DeleteUserUseCase
from .dtos import (
    UpdateProfileCommand,
    UpdateUserCommand,
    UserProfile,
    UserPage,
    PageMeta,
)

__all__ = [
    "GetUserUseCase",
    "ListUsersUseCase",
    "UpdateProfileUseCase",
    "UpdateUserUseCase",
    "DeleteUserUseCase",
    "UpdateProfileCommand",
    "UpdateUserCommand",
    "UserProfile",
    "UserPage",
    "PageMeta",
]
