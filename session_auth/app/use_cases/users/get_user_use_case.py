from uuid import UUID

from session_auth.app.services.unit_of_work import UnitOfWork
from session_auth.domain.errors import not_found
from session_auth.libs.result import Result, Return
from .dtos import UserProfile


class GetUserUseCase:
    """Loads one user's public profile; also serves GET /users/me"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID) -> Result[UserProfile]:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(not_found("User not found"))

            return Return.ok(UserProfile.from_user(user))
