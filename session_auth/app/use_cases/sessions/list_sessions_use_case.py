from uuid import UUID

from session_auth.app.services.unit_of_work import UnitOfWork
from session_auth.app.use_cases.auth.dtos import SessionInfo, SessionList
from session_auth.domain.base import utcnow
from session_auth.libs.result import Result, Return


class ListSessionsUseCase:
    """
    Lists a user's active sessions, newest first.

    The store filters out revoked sessions; expired-but-unrevoked ones are
    dropped here. Token values are never part of the output.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID) -> Result[SessionList]:
        async with self.uow:
            sessions = await self.uow.sessions.list_usable_for_user(user_id)

            now = utcnow()
            return Return.ok(
                SessionList(
                    sessions=[
                        SessionInfo(
                            id=str(s.id),
                            user_agent=s.user_agent,
                            ip_address=s.ip_address,
                            created_at=s.created_at,
                            expires_at=s.expires_at,
                        )
                        for s in sessions
                        if not s.is_expired(now)
                    ]
                )
            )
