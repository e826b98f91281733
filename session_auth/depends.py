from typing import Optional
from uuid import UUID

from fastapi import Cookie, Depends, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from session_auth.adapter.services.bcrypt_hasher import BcryptPasswordHasher
from session_auth.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from session_auth.api.error import ClientError
from session_auth.app.services.password_hasher import IPasswordHasher
from session_auth.app.services.session_manager import SessionManager
from session_auth.app.services.token_issuer import TokenIssuer
from session_auth.app.services.unit_of_work import UnitOfWork
from session_auth.domain.entities import UserRole
from session_auth.domain.errors import forbidden, unauthorized

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

security = HTTPBearer(auto_error=False)

_token_issuer = TokenIssuer.from_config(ApplicationConfig)
_password_hasher = BcryptPasswordHasher(rounds=ApplicationConfig.SALT_ROUNDS)


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_token_issuer() -> TokenIssuer:
    return _token_issuer


def get_password_hasher() -> IPasswordHasher:
    return _password_hasher


def get_session_manager(
    uow: UnitOfWork = Depends(get_unit_of_work),
    hasher: IPasswordHasher = Depends(get_password_hasher),
    issuer: TokenIssuer = Depends(get_token_issuer),
) -> SessionManager:
    return SessionManager(uow, hasher, issuer)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    access_token: Optional[str] = Cookie(default=None),
    issuer: TokenIssuer = Depends(get_token_issuer),
) -> dict:
    """
    Dependency to extract and verify the access token.

    The Authorization header is preferred; the access_token cookie is used
    when no header is sent.

    Returns:
        Decoded payload containing sub, email, role

    Raises:
        ClientError: 401 if the token is missing, invalid or expired
    """
    token = credentials.credentials if credentials else access_token
    payload = issuer.verify_access_token(token) if token else None

    if payload is None or "sub" not in payload:
        raise ClientError(
            unauthorized("Invalid or expired token"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    return payload


def current_user_id(current_user: dict = Depends(get_current_user)) -> UUID:
    return UUID(current_user["sub"])


async def require_admin(current_user: dict = Depends(get_current_user)) -> dict:
    if current_user.get("role") != UserRole.ADMIN.value:
        raise ClientError(
            forbidden("Admin role required"),
            status_code=status.HTTP_403_FORBIDDEN,
        )
    return current_user
