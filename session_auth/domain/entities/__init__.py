"""
Session Auth Domain Entities

Each entity in its own file.
"""

from .enums import UserRole
from .user import User
from .session import Session

__all__ = [
    # Enums
    "UserRole",
    # Entities
    "User",
    "Session",
]
