"""
Update Profile Use Case

Self-service changes to name, email and password.
"""

from typing import Optional
from uuid import UUID

from session_auth.app.services.password_hasher import IPasswordHasher
from session_auth.app.services.unit_of_work import UnitOfWork
from session_auth.domain.base import utcnow
from session_auth.domain.entities import User
from session_auth.domain.errors import DuplicateEmailError, conflict, not_found
from session_auth.libs.result import Error, Result, Return
from .dtos import UpdateProfileCommand, UserProfile

EMAIL_IN_USE = "Email already in use"


async def apply_profile_changes(
    uow: UnitOfWork,
    hasher: IPasswordHasher,
    user: User,
    command: UpdateProfileCommand,
) -> Optional[Error]:
    """
    Apply name/email/password changes to user in place.

    Returns a CONFLICT Error if the new email belongs to another user.
    """
    if command.email:
        email = command.email.lower()
        if email != user.email:
            existing_user = await uow.users.get_by_email(email)
            if existing_user and existing_user.id != user.id:
                return conflict(EMAIL_IN_USE)
        user.email = email

    if command.name:
        user.name = command.name

    if command.password:
        user.password_hash = await hasher.hash(command.password)

    user.updated_at = utcnow()
    return None


class UpdateProfileUseCase:
    def __init__(self, uow: UnitOfWork, hasher: IPasswordHasher):
        self.uow = uow
        self.hasher = hasher

    async def execute(
        self, user_id: UUID, command: UpdateProfileCommand
    ) -> Result[UserProfile]:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(not_found("User not found"))

            error = await apply_profile_changes(self.uow, self.hasher, user, command)
            if error:
                return Return.err(error)

            try:
                user = await self.uow.users.update(user)
            except DuplicateEmailError:
                return Return.err(conflict(EMAIL_IN_USE))
            await self.uow.commit()

            return Return.ok(UserProfile.from_user(user))
