import logging
from uuid import UUID

from session_auth.app.services.unit_of_work import UnitOfWork
from session_auth.app.use_cases.auth.dtos import MessageResponse
from session_auth.domain.errors import unauthorized
from session_auth.libs.result import Result, Return

logger = logging.getLogger(__name__)


class RevokeSessionUseCase:
    """
    Revokes one of the caller's own sessions by ID.

    A missing session and someone else's session produce the same error so
    session IDs cannot be probed.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID, session_id: UUID) -> Result[MessageResponse]:
        async with self.uow:
            count = await self.uow.sessions.revoke_for_user(session_id, user_id)
            if count == 0:
                return Return.err(unauthorized("Session not found"))

            await self.uow.commit()

            logger.info(f"Session revoked: user={user_id} session={session_id}")

            return Return.ok(MessageResponse(message="Session revoked successfully"))
