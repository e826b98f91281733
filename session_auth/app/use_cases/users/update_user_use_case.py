"""
Update User Use Case

Admin changes to any account, including its role.
"""

import logging
from uuid import UUID

from session_auth.app.services.password_hasher import IPasswordHasher
from session_auth.app.services.unit_of_work import UnitOfWork
from session_auth.domain.entities import UserRole
from session_auth.domain.errors import (
    DuplicateEmailError,
    conflict,
    forbidden,
    not_found,
)
from session_auth.libs.result import Result, Return
from .dtos import UpdateUserCommand, UserProfile
from .update_profile_use_case import EMAIL_IN_USE, apply_profile_changes

logger = logging.getLogger(__name__)


class UpdateUserUseCase:
    """
    Business Rules:
    - Target user must exist (NOT_FOUND)
    - An admin cannot set their own role to anything but ADMIN (FORBIDDEN)
    - New email must not belong to another user (CONFLICT)
    - Email stored lower-cased, password re-hashed
    """

    def __init__(self, uow: UnitOfWork, hasher: IPasswordHasher):
        self.uow = uow
        self.hasher = hasher

    async def execute(
        self, admin_id: UUID, user_id: UUID, command: UpdateUserCommand
    ) -> Result[UserProfile]:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(not_found("User not found"))

            if (
                admin_id == user_id
                and command.role is not None
                and command.role != UserRole.ADMIN
            ):
                return Return.err(forbidden("Cannot change your own role"))

            error = await apply_profile_changes(self.uow, self.hasher, user, command)
            if error:
                return Return.err(error)

            if command.role is not None:
                user.role = command.role

            try:
                user = await self.uow.users.update(user)
            except DuplicateEmailError:
                return Return.err(conflict(EMAIL_IN_USE))
            await self.uow.commit()

            logger.info(f"User updated by admin: admin={admin_id} user={user_id}")

            return Return.ok(UserProfile.from_user(user))
