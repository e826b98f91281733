"""
Session lifecycle properties, exercised through SessionManager on the
in-memory store.
"""

import asyncio
from datetime import timedelta
from uuid import UUID

import pytest
from jose import jwt

from session_auth.domain.base import utcnow
from session_auth.domain.entities import UserRole

ACCESS_SECRET = "unit-test-access-secret-0123456789abcdef"


async def _signup_and_login(manager, email="alice@x.com", agent="agent-1"):
    signup = await manager.signup("Alice", email, "Secret123!")
    assert signup.is_ok()
    login = await manager.login(email, "Secret123!", agent, "10.0.0.1")
    assert login.is_ok()
    return login.value


@pytest.mark.asyncio
async def test_end_to_end_lifecycle(manager):
    signup = await manager.signup("Alice", "alice@x.com", "Secret123!")
    assert signup.is_ok()
    assert signup.value.role == UserRole.USER.value

    login = await manager.login("alice@x.com", "Secret123!", "Firefox", "10.0.0.1")
    assert login.is_ok()
    claims = jwt.decode(login.value.access_token, ACCESS_SECRET, algorithms=["HS256"])
    assert claims["sub"] == signup.value.id

    refreshed = await manager.refresh(login.value.refresh_token)
    assert refreshed.is_ok()
    assert refreshed.value.refresh_token != login.value.refresh_token

    user_id = login.value.user.id
    logout_all = await manager.logout_all(UUID(user_id))
    assert logout_all.is_ok()

    again = await manager.refresh(refreshed.value.refresh_token)
    assert again.is_err()
    assert again.error.message == "Invalid refresh token"


@pytest.mark.asyncio
async def test_concurrent_refresh_has_single_winner(manager, memory_uow):
    auth = await _signup_and_login(manager)

    results = await asyncio.gather(
        *[manager.refresh(auth.refresh_token) for _ in range(5)]
    )

    winners = [r for r in results if r.is_ok()]
    losers = [r for r in results if r.is_err()]
    assert len(winners) == 1
    assert all(r.error.code == "UNAUTHORIZED" for r in losers)

    usable = [s for s in memory_uow.store.sessions.values() if not s.is_revoked]
    assert [s.token for s in usable] == [winners[0].value.refresh_token]


@pytest.mark.asyncio
async def test_rotation_chain(manager):
    auth = await _signup_and_login(manager)
    tokens = [auth.refresh_token]

    for _ in range(3):
        result = await manager.refresh(tokens[-1])
        assert result.is_ok()
        tokens.append(result.value.refresh_token)

    assert len(set(tokens)) == 4
    for old in tokens[:-1]:
        replay = await manager.refresh(old)
        assert replay.is_err()
        assert replay.error.message == "Invalid refresh token"


@pytest.mark.asyncio
async def test_expired_session_is_revoked_on_use(manager, memory_uow):
    auth = await _signup_and_login(manager)
    for session in memory_uow.store.sessions.values():
        session.expires_at = utcnow() - timedelta(seconds=1)

    first = await manager.refresh(auth.refresh_token)
    assert first.is_err()
    assert first.error.message == "Refresh token has expired"
    assert all(s.is_revoked for s in memory_uow.store.sessions.values())

    second = await manager.refresh(auth.refresh_token)
    assert second.is_err()
    assert second.error.message == "Invalid refresh token"


@pytest.mark.asyncio
async def test_login_is_case_insensitive(manager):
    await manager.signup("Alice", "Alice@X.com", "Secret123!")

    result = await manager.login("ALICE@x.COM", "Secret123!")

    assert result.is_ok()
    assert result.value.user.email == "alice@x.com"

    duplicate = await manager.signup("Other", "alice@X.COM", "Secret123!")
    assert duplicate.is_err()
    assert duplicate.error.code == "CONFLICT"


@pytest.mark.asyncio
async def test_each_login_opens_a_session(manager, memory_uow):
    first = await _signup_and_login(manager)
    second = await manager.login("alice@x.com", "Secret123!", "agent-2", "10.0.0.2")

    assert second.is_ok()
    assert first.session_id != second.value.session_id
    assert len(memory_uow.store.sessions) == 2


@pytest.mark.asyncio
async def test_logout_cannot_touch_other_users_sessions(manager, memory_uow):
    alice = await _signup_and_login(manager, "alice@x.com")
    bob = await _signup_and_login(manager, "bob@x.com")

    result = await manager.logout(UUID(bob.user.id), alice.refresh_token)
    assert result.is_ok()

    refreshed = await manager.refresh(alice.refresh_token)
    assert refreshed.is_ok()


@pytest.mark.asyncio
async def test_logout_revokes_own_session(manager):
    auth = await _signup_and_login(manager)

    result = await manager.logout(UUID(auth.user.id), auth.refresh_token)
    assert result.is_ok()

    refreshed = await manager.refresh(auth.refresh_token)
    assert refreshed.is_err()


@pytest.mark.asyncio
async def test_list_sessions_shows_only_active(manager, memory_uow):
    first = await _signup_and_login(manager)
    second = await manager.login("alice@x.com", "Secret123!", "agent-2", "10.0.0.2")
    third = await manager.login("alice@x.com", "Secret123!", "agent-3", "10.0.0.3")
    user_id = UUID(first.user.id)

    await manager.logout(user_id, second.value.refresh_token)
    memory_uow.store.sessions[UUID(third.value.session_id)].expires_at = (
        utcnow() - timedelta(seconds=1)
    )

    result = await manager.list_sessions(user_id)

    assert result.is_ok()
    assert [s.id for s in result.value.sessions] == [first.session_id]


@pytest.mark.asyncio
async def test_revoke_session_scoped_to_owner(manager):
    alice = await _signup_and_login(manager, "alice@x.com")
    bob = await _signup_and_login(manager, "bob@x.com")

    foreign = await manager.revoke_session(
        UUID(bob.user.id), UUID(alice.session_id)
    )
    assert foreign.is_err()
    assert foreign.error.message == "Session not found"

    own = await manager.revoke_session(UUID(alice.user.id), UUID(alice.session_id))
    assert own.is_ok()

    refreshed = await manager.refresh(alice.refresh_token)
    assert refreshed.is_err()
