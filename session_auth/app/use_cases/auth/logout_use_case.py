"""
Logout Use Case

Ends one session or every session of a user.
"""

import logging
from typing import Optional
from uuid import UUID

from session_auth.app.services.unit_of_work import UnitOfWork
from session_auth.libs.result import Result, Return
from .dtos import MessageResponse

logger = logging.getLogger(__name__)


class LogoutUseCase:
    """
    Business Rules:
    - Logout only revokes a session matching both token and user, so one
      user can never revoke another user's session
    - Both operations always succeed, even when nothing was revoked
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def logout(
        self, user_id: UUID, refresh_token: Optional[str]
    ) -> Result[MessageResponse]:
        async with self.uow:
            if refresh_token:
                count = await self.uow.sessions.revoke_by_token_and_user(
                    refresh_token, user_id
                )
                await self.uow.commit()
                logger.info(f"Logout: user={user_id} revoked={count}")

            return Return.ok(MessageResponse(message="Logged out successfully"))

    async def logout_all(self, user_id: UUID) -> Result[MessageResponse]:
        async with self.uow:
            count = await self.uow.sessions.revoke_all_for_user(user_id)
            await self.uow.commit()

            logger.info(f"Logout from all devices: user={user_id} revoked={count}")

            return Return.ok(
                MessageResponse(message="Logged out from all devices successfully")
            )
