"""
Login Use Case

Authenticates a user and opens a new refresh session.
"""

import logging

from session_auth.app.services.expiry import calculate_expiry
from session_auth.app.services.password_hasher import IPasswordHasher
from session_auth.app.services.token_issuer import TokenIssuer
from session_auth.app.services.unit_of_work import UnitOfWork
from session_auth.domain.base import utcnow
from session_auth.domain.errors import unauthorized
from session_auth.libs.result import Result, Return
from .dtos import AuthResponse, LoginCommand
from .signup_use_case import to_user_info

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid email or password"


class LoginUseCase:
    """
    Use case for user login and token issuance.

    Business Rules:
    - Unknown email and wrong password fail with the same error
    - A hash is computed even for unknown emails so timing does not leak
      which factor was wrong
    - Creates a new session per login (multi-device)
    - Refresh token is returned once, for the transport to deliver
    """

    def __init__(self, uow: UnitOfWork, hasher: IPasswordHasher, issuer: TokenIssuer):
        self.uow = uow
        self.hasher = hasher
        self.issuer = issuer

    async def execute(self, command: LoginCommand) -> Result[AuthResponse]:
        """
        Execute login use case.

        Args:
            command: Credentials and request provenance

        Returns:
            Result with AuthResponse, or UNAUTHORIZED Error
        """
        email = command.email.lower()

        async with self.uow:
            user = await self.uow.users.get_by_email(email)

            if user is None:
                await self.hasher.hash(command.password)
                return Return.err(unauthorized(INVALID_CREDENTIALS))

            password_valid = await self.hasher.verify(
                command.password, user.password_hash
            )
            if not password_valid:
                return Return.err(unauthorized(INVALID_CREDENTIALS))

            tokens = await self.issuer.issue(user.id, user.email, user.role.value)

            session = await self.uow.sessions.insert(
                user_id=user.id,
                token=tokens.refresh_token,
                user_agent=command.user_agent,
                ip_address=command.ip_address,
                expires_at=calculate_expiry(self.issuer.refresh_expiry, utcnow()),
            )

            await self.uow.commit()

            logger.info(f"User logged in: user={user.id} session={session.id}")

            return Return.ok(
                AuthResponse(
                    user=to_user_info(user),
                    access_token=tokens.access_token,
                    refresh_token=tokens.refresh_token,
                    session_id=str(session.id),
                )
            )
