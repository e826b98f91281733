"""
Session Management Use Cases
"""

from .list_sessions_use_case import ListSessionsUseCase
from .revoke_session_use_case import RevokeSessionUseCase

__all__ = [
    "ListSessionsUseCase",
    "RevokeSessionUseCase",
]
