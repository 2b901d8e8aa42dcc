from datetime import datetime, timedelta
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest

from src.adapter.services.token_issuer import JwtTokenIssuer
from src.app.services.auth_config import AuthConfig
from src.domain.entities import Session, User, UserRole

NOW = datetime(2026, 1, 15, 12, 0, 0)


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

    uow.sessions = MagicMock()
    uow.sessions.find_by_refresh_token = AsyncMock()
    uow.sessions.create = AsyncMock(side_effect=lambda session: session)
    uow.sessions.delete = AsyncMock(return_value=True)
    uow.sessions.delete_all_by_user_id = AsyncMock()
    uow.sessions.delete_expired = AsyncMock()
    return uow


@pytest.fixture
def auth_config():
    return AuthConfig(jwt_secret="unit-test-secret")


@pytest.fixture
def token_issuer(auth_config):
    return JwtTokenIssuer(auth_config)


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def clock(now):
    return lambda: now


@pytest.fixture
def user():
    return User(
        id=uuid4(),
        email="user@lunavps.com",
        password_hash="hash",
        role=UserRole.user,
        is_active=True,
    )


@pytest.fixture
def make_session(now):
    def _make(user_id, refresh_token, expires_in=timedelta(days=1)):
        return Session(
            id=uuid4(),
            user_id=user_id,
            refresh_token=refresh_token,
            created_at=now + expires_in - timedelta(days=7),
            expires_at=now + expires_in,
        )

    return _make
