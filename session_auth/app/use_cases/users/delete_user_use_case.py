import logging
from uuid import UUID

from session_auth.app.services.unit_of_work import UnitOfWork
from session_auth.app.use_cases.auth.dtos import MessageResponse
from session_auth.domain.errors import forbidden, not_found
from session_auth.libs.result import Result, Return

logger = logging.getLogger(__name__)


class DeleteUserUseCase:
    """
    Deletes an account and all of its sessions.

    An admin cannot delete their own account. Sessions are removed before
    the user row.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, admin_id: UUID, user_id: UUID) -> Result[MessageResponse]:
        if admin_id == user_id:
            return Return.err(forbidden("Cannot delete your own account"))

        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(not_found("User not found"))

            count = await self.uow.sessions.delete_all_for_user(user_id)
            await self.uow.users.delete(user)
            await self.uow.commit()

            logger.info(
                f"User deleted: admin={admin_id} user={user_id} sessions_removed={count}"
            )

            return Return.ok(MessageResponse(message="User deleted successfully"))
