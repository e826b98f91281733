import pytest
from unittest.mock import AsyncMock, MagicMock

from session_auth.adapter.services.bcrypt_hasher import BcryptPasswordHasher
from session_auth.adapter.services.in_memory_unit_of_work import InMemoryUnitOfWork
from session_auth.app.services.session_manager import SessionManager
from session_auth.app.services.token_issuer import TokenIssuer

ACCESS_SECRET = "unit-test-access-secret-0123456789abcdef"
REFRESH_SECRET = "unit-test-refresh-secret-0123456789abcdef"


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.users = MagicMock()
    uow.users.get_by_email = AsyncMock()
    uow.users.get_by_id = AsyncMock()
    uow.users.create = AsyncMock(side_effect=lambda user: user)
    uow.users.update = AsyncMock(side_effect=lambda user: user)
    uow.users.delete = AsyncMock()
    uow.users.list_page = AsyncMock(return_value=[])
    uow.users.count = AsyncMock(return_value=0)

    uow.sessions = MagicMock()
    uow.sessions.insert = AsyncMock()
    uow.sessions.find_usable_by_token = AsyncMock()
    uow.sessions.revoke = AsyncMock(return_value=True)
    uow.sessions.revoke_all_for_user = AsyncMock(return_value=0)
    uow.sessions.revoke_by_token_and_user = AsyncMock(return_value=0)
    uow.sessions.revoke_for_user = AsyncMock(return_value=0)
    uow.sessions.list_usable_for_user = AsyncMock(return_value=[])
    uow.sessions.delete_all_for_user = AsyncMock(return_value=0)
    return uow


@pytest.fixture
def hasher():
    # Minimum bcrypt cost keeps the suite fast
    return BcryptPasswordHasher(rounds=4)


@pytest.fixture
def issuer():
    return TokenIssuer(
        access_secret=ACCESS_SECRET,
        refresh_secret=REFRESH_SECRET,
        access_expiry="15m",
        refresh_expiry="7d",
    )


@pytest.fixture
def memory_uow():
    return InMemoryUnitOfWork()


@pytest.fixture
def manager(memory_uow, hasher, issuer):
    return SessionManager(memory_uow, hasher, issuer)
