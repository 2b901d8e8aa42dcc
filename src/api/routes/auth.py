from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from src.api.error import ClientError, ServerError
from src.app.services.auth_config import AuthConfig
from src.app.services.credential_authenticator import ICredentialAuthenticator
from src.app.services.token_issuer import ITokenIssuer
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import (
    LoginUseCase,
    RefreshTokenUseCase,
    TokenPairResponse,
)
from src.depends import (
    get_auth_config,
    get_authenticator,
    get_token_issuer,
    get_unit_of_work,
)
from src.domain.errors import (
    AuthenticationError,
    IntegrityError,
    InvalidRefreshToken,
    InvalidRefreshTokenSignature,
    RefreshTokenExpired,
)

router = APIRouter(prefix="/auth", tags=["Authentication"])


class LoginRequest(BaseModel):
    """
    Login HTTP request payload

    Validates incoming login request.
    """

    # Passed through verbatim: lookup is case-sensitive on the stored email
    email: str = Field(..., min_length=1, max_length=255, description="User email address")
    password: str = Field(..., min_length=1, max_length=255, description="User password")


@router.post("/login", status_code=status.HTTP_200_OK, response_model=TokenPairResponse)
async def login(
    request: LoginRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    authenticator: ICredentialAuthenticator = Depends(get_authenticator),
    token_issuer: ITokenIssuer = Depends(get_token_issuer),
    config: AuthConfig = Depends(get_auth_config),
):
    """
    User Login

    Authenticates user and returns an access/refresh token pair.

    Raises:
        - 401 Unauthorized: Invalid credentials
        - 403 Forbidden: User disabled
        - 500 Internal Server Error: Authenticated identity could not be resolved
    """
    use_case = LoginUseCase(uow, authenticator, token_issuer, config)

    try:
        return await use_case.execute(request.email, request.password)
    except AuthenticationError as exc:
        if exc.error.code == "USER_DISABLED":
            raise ClientError.from_exception(exc, status.HTTP_403_FORBIDDEN)
        raise ClientError.from_exception(exc, status.HTTP_401_UNAUTHORIZED)
    except IntegrityError as exc:
        raise ServerError(exc.error)


class RefreshRequest(BaseModel):
    """
    Refresh token HTTP request payload

    Validates incoming refresh request.
    """

    refresh_token: str = Field(..., description="Refresh token")


@router.post("/refresh", status_code=status.HTTP_200_OK, response_model=TokenPairResponse)
async def refresh(
    request: RefreshRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    token_issuer: ITokenIssuer = Depends(get_token_issuer),
    config: AuthConfig = Depends(get_auth_config),
):
    """
    Refresh JWT Token

    Exchanges a refresh token for a new pair. The presented refresh token is
    single-use: it is rotated away on success.

    Raises:
        - 401 Unauthorized: Unknown, expired or tampered refresh token
        - 500 Internal Server Error: Session owner could not be resolved
    """
    use_case = RefreshTokenUseCase(uow, token_issuer, config)

    try:
        return await use_case.execute(request.refresh_token)
    except (
        InvalidRefreshToken,
        RefreshTokenExpired,
        InvalidRefreshTokenSignature,
    ) as exc:
        raise ClientError.from_exception(exc, status.HTTP_401_UNAUTHORIZED)
    except IntegrityError as exc:
        raise ServerError(exc.error)
