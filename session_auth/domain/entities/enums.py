"""
Session Auth Domain Enums
"""

from enum import Enum


class UserRole(str, Enum):
    """Account-wide role"""

    USER = "USER"
    ADMIN = "ADMIN"
