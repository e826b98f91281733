"""
Refresh Token Use Case

Exchanges a refresh token for a new token pair (rotation).
"""

import logging

from session_auth.app.services.expiry import calculate_expiry
from session_auth.app.services.token_issuer import TokenIssuer
from session_auth.app.services.unit_of_work import UnitOfWork
from session_auth.domain.base import utcnow
from session_auth.domain.errors import unauthorized
from session_auth.libs.result import Result, Return
from .dtos import AuthResponse
from .signup_use_case import to_user_info

logger = logging.getLogger(__name__)


class RefreshTokenUseCase:
    """
    Use case for refreshing tokens with refresh token rotation.

    Business Rules:
    - Refresh tokens are single-use
    - Revoked or unknown token -> UNAUTHORIZED
    - Expired token is revoked on first use, then UNAUTHORIZED
    - Session whose user is gone -> UNAUTHORIZED, session left as is
    - The consumed session is revoked and committed before the new pair is
      issued; a crash in between leaves the caller logged out, never holding
      two valid sessions
    - Of two concurrent refreshes with the same token, only the one whose
      revoke performs the transition proceeds
    """

    def __init__(self, uow: UnitOfWork, issuer: TokenIssuer):
        self.uow = uow
        self.issuer = issuer

    async def execute(
        self,
        refresh_token: str,
        user_agent: str = "unknown",
        ip_address: str = "unknown",
    ) -> Result[AuthResponse]:
        """
        Execute refresh token use case.

        Args:
            refresh_token: The refresh token being consumed
            user_agent: Provenance stamped on the replacement session
            ip_address: Provenance stamped on the replacement session

        Returns:
            Result with AuthResponse containing the new pair, or Error
        """
        async with self.uow:
            session = await self.uow.sessions.find_usable_by_token(refresh_token)
            if session is None:
                return Return.err(unauthorized("Invalid refresh token"))

            if session.is_expired(utcnow()):
                await self.uow.sessions.revoke(session.id)
                await self.uow.commit()
                logger.info(f"Expired session revoked on use: {session.id}")
                return Return.err(unauthorized("Refresh token has expired"))

            user = await self.uow.users.get_by_id(session.user_id)
            if user is None:
                return Return.err(unauthorized("User not found"))

            # Rotation: revoke first
            consumed = await self.uow.sessions.revoke(session.id)
            await self.uow.commit()

            if not consumed:
                logger.warning(f"Refresh token already consumed: session={session.id}")
                return Return.err(unauthorized("Invalid refresh token"))

            tokens = await self.issuer.issue(user.id, user.email, user.role.value)

            new_session = await self.uow.sessions.insert(
                user_id=user.id,
                token=tokens.refresh_token,
                user_agent=user_agent,
                ip_address=ip_address,
                expires_at=calculate_expiry(self.issuer.refresh_expiry, utcnow()),
            )

            await self.uow.commit()

            logger.info(f"Session rotated: {session.id} -> {new_session.id}")

            return Return.ok(
                AuthResponse(
                    user=to_user_info(user),
                    access_token=tokens.access_token,
                    refresh_token=tokens.refresh_token,
                    session_id=str(new_session.id),
                )
            )
