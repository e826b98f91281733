from datetime import datetime
from typing import List, Optional
from uuid import UUID

from sqlalchemy import delete
from sqlmodel import select, update
from sqlmodel.ext.asyncio.session import AsyncSession

from session_auth.app.repositories.session_repository import ISessionRepository
from session_auth.domain.base import utcnow
from session_auth.domain.entities import Session


class SessionRepository(ISessionRepository):
    """Session repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def insert(
        self,
        user_id: UUID,
        token: str,
        user_agent: str,
        ip_address: str,
        expires_at: datetime,
    ) -> Session:
        """Create a new session"""
        session_obj = Session(
            user_id=user_id,
            token=token,
            user_agent=user_agent,
            ip_address=ip_address,
            expires_at=expires_at,
        )
        self.session.add(session_obj)
        await self.session.flush()
        await self.session.refresh(session_obj)
        return session_obj

    async def find_usable_by_token(self, token: str) -> Optional[Session]:
        """Find unrevoked session by token; expiry is checked in the use case"""
        stmt = select(Session).where(
            Session.token == token, Session.is_revoked == False
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def revoke(self, session_id: UUID) -> bool:
        """
        Conditional update on is_revoked; the row lock taken by UPDATE makes a
        concurrent second revoke match zero rows once the first commits.
        """
        stmt = (
            update(Session)
            .where(Session.id == session_id, Session.is_revoked == False)
            .values(is_revoked=True, updated_at=utcnow())
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0

    async def revoke_all_for_user(self, user_id: UUID) -> int:
        """Revoke all active sessions for a user"""
        stmt = (
            update(Session)
            .where(Session.user_id == user_id, Session.is_revoked == False)
            .values(is_revoked=True, updated_at=utcnow())
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount

    async def revoke_by_token_and_user(self, token: str, user_id: UUID) -> int:
        stmt = (
            update(Session)
            .where(Session.token == token, Session.user_id == user_id)
            .values(is_revoked=True, updated_at=utcnow())
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount

    async def revoke_for_user(self, session_id: UUID, user_id: UUID) -> int:
        stmt = (
            update(Session)
            .where(Session.id == session_id, Session.user_id == user_id)
            .values(is_revoked=True, updated_at=utcnow())
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount

    async def list_usable_for_user(self, user_id: UUID) -> List[Session]:
        """Unrevoked sessions for a user, newest first"""
        stmt = (
            select(Session)
            .where(Session.user_id == user_id, Session.is_revoked == False)
            .order_by(Session.created_at.desc())
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def delete_all_for_user(self, user_id: UUID) -> int:
        stmt = delete(Session).where(Session.user_id == user_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount
