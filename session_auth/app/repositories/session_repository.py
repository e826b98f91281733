from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from session_auth.domain.entities import Session


class ISessionRepository(ABC):
    """Session repository interface - application layer"""

    @abstractmethod
    async def insert(
        self,
        user_id: UUID,
        token: str,
        user_agent: str,
        ip_address: str,
        expires_at: datetime,
    ) -> Session:
        """Persist a new active session for an issued refresh token"""
        pass

    @abstractmethod
    async def find_usable_by_token(self, token: str) -> Optional[Session]:
        """
        Find an unrevoked session by its refresh token.

        Expiry is not filtered here; the caller checks it so it can revoke
        the session as a side effect.
        """
        pass

    @abstractmethod
    async def revoke(self, session_id: UUID) -> bool:
        """
        Atomically flip is_revoked False -> True.

        Returns True only for the call that performed the transition, so of
        two concurrent callers exactly one sees True.
        """
        pass

    @abstractmethod
    async def revoke_all_for_user(self, user_id: UUID) -> int:
        """Revoke all unrevoked sessions for a user. Returns count."""
        pass

    @abstractmethod
    async def revoke_by_token_and_user(self, token: str, user_id: UUID) -> int:
        """Revoke the session matching both token and owner. Returns count."""
        pass

    @abstractmethod
    async def revoke_for_user(self, session_id: UUID, user_id: UUID) -> int:
        """Revoke a session by ID if owned by user. Returns rows matched."""
        pass

    @abstractmethod
    async def list_usable_for_user(self, user_id: UUID) -> List[Session]:
        """Unrevoked sessions for a user, newest first"""
        pass

    @abstractmethod
    async def delete_all_for_user(self, user_id: UUID) -> int:
        """Delete every session of a user. Returns count."""
        pass
