import logging

from session_auth.app.services.password_hasher import IPasswordHasher
from session_auth.app.services.unit_of_work import UnitOfWork
from session_auth.domain.entities import User, UserRole
from session_auth.domain.errors import DuplicateEmailError, conflict
from session_auth.libs.result import Result, Return
from .dtos import SignupCommand, UserInfo

logger = logging.getLogger(__name__)

DUPLICATE_EMAIL = "User with this email already exists"


class SignupUseCase:
    """
    Signup Use Case

    Business Logic:
    1. Fold email to lower case
    2. Reject if a user with that email exists (CONFLICT), including one
       created concurrently between the check and the insert
    3. Hash password
    4. Create User with role=USER
    5. Return public profile (no tokens are issued on signup)
    """

    def __init__(self, uow: UnitOfWork, hasher: IPasswordHasher):
        self.uow = uow
        self.hasher = hasher

    async def execute(self, command: SignupCommand) -> Result[UserInfo]:
        email = command.email.lower()

        async with self.uow:
            existing_user = await self.uow.users.get_by_email(email)
            if existing_user:
                return Return.err(conflict(DUPLICATE_EMAIL))

            password_hash = await self.hasher.hash(command.password)

            user = User(
                name=command.name,
                email=email,
                password_hash=password_hash,
                role=UserRole.USER,
            )
            try:
                user = await self.uow.users.create(user)
            except DuplicateEmailError:
                return Return.err(conflict(DUPLICATE_EMAIL))

            await self.uow.commit()

            logger.info(f"User signed up: {user.id}")

            return Return.ok(to_user_info(user))


def to_user_info(user: User) -> UserInfo:
    return UserInfo(
        id=str(user.id),
        name=user.name,
        email=user.email,
        role=user.role.value,
    )
