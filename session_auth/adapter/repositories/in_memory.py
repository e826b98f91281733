"""
In-memory repositories

Reference implementation of the repository contracts, backed by plain dicts
shared through an InMemoryStore. Writes are applied immediately. No method
awaits between reading and writing a record, so each call is atomic with
respect to other coroutines on the same event loop.
"""

from datetime import datetime
from typing import Dict, List, Optional
from uuid import UUID

from session_auth.app.repositories.session_repository import ISessionRepository
from session_auth.app.repositories.user_repository import IUserRepository
from session_auth.domain.base import utcnow
from session_auth.domain.entities import Session, User
from session_auth.domain.errors import DuplicateEmailError


def _clone(entity):
    # Detached copy so callers never mutate stored records in place
    return type(entity).model_validate(entity.model_dump())


class InMemoryStore:
    def __init__(self):
        self.users: Dict[UUID, User] = {}
        self.sessions: Dict[UUID, Session] = {}


class InMemoryUserRepository(IUserRepository):
    def __init__(self, store: InMemoryStore):
        self.store = store

    async def get_by_email(self, email: str) -> Optional[User]:
        for user in self.store.users.values():
            if user.email == email:
                return _clone(user)
        return None

    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        user = self.store.users.get(user_id)
        return _clone(user) if user else None

    async def create(self, user: User) -> User:
        if any(u.email == user.email for u in self.store.users.values()):
            raise DuplicateEmailError(user.email)
        self.store.users[user.id] = _clone(user)
        return user

    async def update(self, user: User) -> User:
        if any(
            u.email == user.email and u.id != user.id
            for u in self.store.users.values()
        ):
            raise DuplicateEmailError(user.email)
        self.store.users[user.id] = _clone(user)
        return user

    async def delete(self, user: User) -> None:
        self.store.users.pop(user.id, None)
        for session_id in [
            s.id for s in self.store.sessions.values() if s.user_id == user.id
        ]:
            del self.store.sessions[session_id]

    async def list_page(self, offset: int, limit: int) -> List[User]:
        users = sorted(
            self.store.users.values(), key=lambda u: u.created_at, reverse=True
        )
        return [_clone(u) for u in users[offset : offset + limit]]

    async def count(self) -> int:
        return len(self.store.users)


class InMemorySessionRepository(ISessionRepository):
    def __init__(self, store: InMemoryStore):
        self.store = store

    async def insert(
        self,
        user_id: UUID,
        token: str,
        user_agent: str,
        ip_address: str,
        expires_at: datetime,
    ) -> Session:
        session_obj = Session(
            user_id=user_id,
            token=token,
            user_agent=user_agent,
            ip_address=ip_address,
            expires_at=expires_at,
        )
        self.store.sessions[session_obj.id] = session_obj
        return _clone(session_obj)

    async def find_usable_by_token(self, token: str) -> Optional[Session]:
        for session_obj in self.store.sessions.values():
            if session_obj.token == token and not session_obj.is_revoked:
                return _clone(session_obj)
        return None

    async def revoke(self, session_id: UUID) -> bool:
        session_obj = self.store.sessions.get(session_id)
        if session_obj is None or session_obj.is_revoked:
            return False
        self._mark_revoked(session_obj)
        return True

    async def revoke_all_for_user(self, user_id: UUID) -> int:
        count = 0
        for session_obj in self.store.sessions.values():
            if session_obj.user_id == user_id and not session_obj.is_revoked:
                self._mark_revoked(session_obj)
                count += 1
        return count

    async def revoke_by_token_and_user(self, token: str, user_id: UUID) -> int:
        count = 0
        for session_obj in self.store.sessions.values():
            if session_obj.token == token and session_obj.user_id == user_id:
                self._mark_revoked(session_obj)
                count += 1
        return count

    async def revoke_for_user(self, session_id: UUID, user_id: UUID) -> int:
        session_obj = self.store.sessions.get(session_id)
        if session_obj is None or session_obj.user_id != user_id:
            return 0
        self._mark_revoked(session_obj)
        return 1

    async def list_usable_for_user(self, user_id: UUID) -> List[Session]:
        sessions = [
            s
            for s in self.store.sessions.values()
            if s.user_id == user_id and not s.is_revoked
        ]
        sessions.sort(key=lambda s: s.created_at, reverse=True)
        return [_clone(s) for s in sessions]

    async def delete_all_for_user(self, user_id: UUID) -> int:
        doomed = [s.id for s in self.store.sessions.values() if s.user_id == user_id]
        for session_id in doomed:
            del self.store.sessions[session_id]
        return len(doomed)

    @staticmethod
    def _mark_revoked(session_obj: Session) -> None:
        session_obj.is_revoked = True
        session_obj.updated_at = utcnow()
