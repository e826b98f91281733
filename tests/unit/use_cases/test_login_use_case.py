from unittest.mock import AsyncMock
from uuid import uuid4

import bcrypt
import pytest
from jose import jwt

from session_auth.app.use_cases.auth import LoginCommand, LoginUseCase
from session_auth.domain.base import utcnow
from session_auth.domain.entities import Session, User, UserRole


def _user(password: str = "Secret123!") -> User:
    return User(
        id=uuid4(),
        name="Alice",
        email="alice@x.com",
        password_hash=bcrypt.hashpw(password.encode(), bcrypt.gensalt(4)).decode(),
        role=UserRole.USER,
    )


def _stored_session(**kwargs) -> Session:
    return Session(
        id=uuid4(),
        user_id=kwargs["user_id"],
        token=kwargs["token"],
        user_agent=kwargs["user_agent"],
        ip_address=kwargs["ip_address"],
        expires_at=kwargs["expires_at"],
    )


@pytest.mark.asyncio
async def test_successful_login(mock_uow, hasher, issuer):
    user = _user()
    mock_uow.users.get_by_email.return_value = user
    mock_uow.sessions.insert = AsyncMock(side_effect=_stored_session)

    use_case = LoginUseCase(mock_uow, hasher, issuer)
    result = await use_case.execute(
        LoginCommand(
            email="ALICE@x.com",
            password="Secret123!",
            user_agent="Mozilla/5.0",
            ip_address="10.0.0.1",
        )
    )

    assert result.is_ok()
    data = result.value
    assert data.user.id == str(user.id)
    assert data.user.role == "USER"

    claims = jwt.get_unverified_claims(data.access_token)
    assert claims["sub"] == str(user.id)

    mock_uow.users.get_by_email.assert_called_once_with("alice@x.com")
    insert_kwargs = mock_uow.sessions.insert.call_args.kwargs
    assert insert_kwargs["token"] == data.refresh_token
    assert insert_kwargs["user_agent"] == "Mozilla/5.0"
    assert insert_kwargs["ip_address"] == "10.0.0.1"
    assert insert_kwargs["expires_at"] > utcnow()
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_login_wrong_password(mock_uow, hasher, issuer):
    mock_uow.users.get_by_email.return_value = _user()

    use_case = LoginUseCase(mock_uow, hasher, issuer)
    result = await use_case.execute(
        LoginCommand(email="alice@x.com", password="WrongPassword!")
    )

    assert result.is_err()
    assert result.error.code == "UNAUTHORIZED"
    assert result.error.message == "Invalid email or password"
    mock_uow.sessions.insert.assert_not_called()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_login_unknown_email_same_error(mock_uow, hasher, issuer):
    """Unknown email and wrong password are indistinguishable"""
    mock_uow.users.get_by_email.return_value = None

    use_case = LoginUseCase(mock_uow, hasher, issuer)
    result = await use_case.execute(
        LoginCommand(email="nobody@x.com", password="Secret123!")
    )

    assert result.is_err()
    assert result.error.code == "UNAUTHORIZED"
    assert result.error.message == "Invalid email or password"
    mock_uow.sessions.insert.assert_not_called()
