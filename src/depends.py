from functools import lru_cache

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from src.adapter.services.credential_authenticator import BcryptCredentialAuthenticator
from src.adapter.services.token_issuer import JwtTokenIssuer
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.services.auth_config import AuthConfig
from src.app.services.credential_authenticator import ICredentialAuthenticator
from src.app.services.token_issuer import ITokenIssuer

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

security = HTTPBearer()


@lru_cache
def get_auth_config() -> AuthConfig:
    return AuthConfig.from_application_config(ApplicationConfig)


def get_token_issuer(config: AuthConfig = Depends(get_auth_config)) -> ITokenIssuer:
    return JwtTokenIssuer(config)


def get_authenticator() -> ICredentialAuthenticator:
    return BcryptCredentialAuthenticator(AsyncSessionLocal)


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


async def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(security),
    token_issuer: ITokenIssuer = Depends(get_token_issuer),
) -> dict:
    """
    Dependency to extract and verify JWT access token from Authorization header.

    Args:
        credentials: Bearer token from Authorization header

    Returns:
        Decoded JWT payload containing sub, user_id, role

    Raises:
        HTTPException: 401 if token is invalid or expired
    """
    payload = token_issuer.decode_access_token(credentials.credentials)

    if payload is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
        )

    return payload
