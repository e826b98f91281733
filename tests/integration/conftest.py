import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel, select
from sqlmodel.ext.asyncio.session import AsyncSession

from session_auth.adapter.services.bcrypt_hasher import BcryptPasswordHasher
from session_auth.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from session_auth.depends import get_password_hasher, get_unit_of_work
from session_auth.domain.entities import User, UserRole
from tests.fixtures.json_loader import TestDataLoader
from tests.utils.cookies import refresh_token_from


@pytest_asyncio.fixture
def test_data():
    return TestDataLoader()


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine("sqlite+aiosqlite:///./test.db")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with Session() as session:
        yield session


@pytest_asyncio.fixture
async def client(db_session):
    from config import ApplicationConfig
    from session_auth.api.app import create_app

    app = create_app(ApplicationConfig)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    def override_get_password_hasher():
        return BcryptPasswordHasher(rounds=4)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    app.dependency_overrides[get_password_hasher] = override_get_password_hasher

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
def login_as(client, test_data):
    """
    Sign up (if needed) and log in one of the test_data users.

    Returns {"user", "access_token", "refresh_token", "headers"}. The
    client's cookie jar is cleared so later calls only carry the
    credentials a test passes explicitly.
    """

    async def _login(key: str, signup: bool = True) -> dict:
        if signup:
            response = await client.post("/auth/signup", json=test_data.get_copy(key))
            assert response.status_code == 201

        response = await client.post("/auth/login", json=test_data.credentials(key))
        assert response.status_code == 200
        client.cookies.clear()

        data = response.json()
        return {
            "user": data["user"],
            "access_token": data["access_token"],
            "refresh_token": refresh_token_from(response),
            "headers": {"Authorization": f"Bearer {data['access_token']}"},
        }

    return _login


@pytest_asyncio.fixture
def login_as_admin(client, db_session, login_as, test_data):
    """Sign up the admin user, promote it in the database, then log in"""

    async def _login() -> dict:
        admin = test_data.get_copy("admin")
        response = await client.post("/auth/signup", json=admin)
        assert response.status_code == 201

        result = await db_session.exec(select(User).where(User.email == admin["email"]))
        user = result.one()
        user.role = UserRole.ADMIN
        db_session.add(user)
        await db_session.commit()

        return await login_as("admin", signup=False)

    return _login
