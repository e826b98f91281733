"""
Session Manager

Single entry point for the session lifecycle. Holds no state of its own;
every call runs a use case against the unit of work it was built with.
"""

from typing import Optional
from uuid import UUID

from session_auth.app.services.password_hasher import IPasswordHasher
from session_auth.app.services.token_issuer import TokenIssuer
from session_auth.app.services.unit_of_work import UnitOfWork
from session_auth.app.use_cases.auth import (
    AuthResponse,
    LoginCommand,
    LoginUseCase,
    LogoutUseCase,
    MessageResponse,
    RefreshTokenUseCase,
    SessionList,
    SignupCommand,
    SignupUseCase,
    UserInfo,
)
from session_auth.app.use_cases.sessions import ListSessionsUseCase, RevokeSessionUseCase
from session_auth.libs.result import Result


class SessionManager:
    def __init__(self, uow: UnitOfWork, hasher: IPasswordHasher, issuer: TokenIssuer):
        self.uow = uow
        self.hasher = hasher
        self.issuer = issuer

    async def signup(self, name: str, email: str, password: str) -> Result[UserInfo]:
        command = SignupCommand(name=name, email=email, password=password)
        return await SignupUseCase(self.uow, self.hasher).execute(command)

    async def login(
        self,
        email: str,
        password: str,
        user_agent: str = "unknown",
        ip_address: str = "unknown",
    ) -> Result[AuthResponse]:
        command = LoginCommand(
            email=email,
            password=password,
            user_agent=user_agent,
            ip_address=ip_address,
        )
        return await LoginUseCase(self.uow, self.hasher, self.issuer).execute(command)

    async def refresh(
        self,
        refresh_token: str,
        user_agent: str = "unknown",
        ip_address: str = "unknown",
    ) -> Result[AuthResponse]:
        return await RefreshTokenUseCase(self.uow, self.issuer).execute(
            refresh_token, user_agent, ip_address
        )

    async def logout(
        self, user_id: UUID, refresh_token: Optional[str]
    ) -> Result[MessageResponse]:
        return await LogoutUseCase(self.uow).logout(user_id, refresh_token)

    async def logout_all(self, user_id: UUID) -> Result[MessageResponse]:
        return await LogoutUseCase(self.uow).logout_all(user_id)

    async def list_sessions(self, user_id: UUID) -> Result[SessionList]:
        return await ListSessionsUseCase(self.uow).execute(user_id)

    async def revoke_session(
        self, user_id: UUID, session_id: UUID
    ) -> Result[MessageResponse]:
        return await RevokeSessionUseCase(self.uow).execute(user_id, session_id)
