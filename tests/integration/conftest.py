import bcrypt
import pytest_asyncio
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel, select
from sqlmodel.ext.asyncio.session import AsyncSession
from tests.fixtures.json_loader import TestDataLoader
from src.adapter.services.credential_authenticator import BcryptCredentialAuthenticator
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import get_authenticator, get_unit_of_work
from src.domain.entities import Session, User, UserRole


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
def session_factory(engine):
    return sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def users(db_session, test_data):
    """Seed the identities listed in test_data.json, keyed by email"""
    seeded = {}
    for raw in test_data.users():
        user = User(
            email=raw["email"],
            password_hash=bcrypt.hashpw(raw["password"].encode(), bcrypt.gensalt(4)).decode(),
            role=UserRole(raw["role"]),
            is_active=raw["is_active"],
        )
        db_session.add(user)
        seeded[user.email] = user
    await db_session.commit()
    return seeded


@pytest_asyncio.fixture
async def client(db_session, session_factory, users):
    from httpx import ASGITransport
    from src.api.app import create_app
    from config import ApplicationConfig

    app = create_app(ApplicationConfig)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    def override_get_authenticator():
        return BcryptCredentialAuthenticator(session_factory)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    app.dependency_overrides[get_authenticator] = override_get_authenticator

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
def stored_sessions(db_session):
    """Fetch all persisted sessions, optionally for one refresh token"""

    async def _fetch(refresh_token=None):
        stmt = select(Session)
        if refresh_token is not None:
            stmt = stmt.where(Session.refresh_token == refresh_token)
        result = await db_session.exec(stmt)
        return list(result.all())

    return _fetch
