"""
Auth Configuration

Token and session lifetimes plus signing settings, injected into the
token issuer and the auth use cases at construction.
"""

from datetime import timedelta

from pydantic import BaseModel, ConfigDict, Field


class AuthConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    jwt_secret: str = Field(..., min_length=1)
    jwt_algorithm: str = "HS256"
    access_token_ttl: timedelta = timedelta(minutes=15)
    refresh_token_ttl: timedelta = timedelta(days=7)
    session_ttl: timedelta = timedelta(days=7)

    @classmethod
    def from_application_config(cls, app_config) -> "AuthConfig":
        return cls(
            jwt_secret=app_config.JWT_SECRET,
            jwt_algorithm=app_config.JWT_ALGORITHM,
            access_token_ttl=timedelta(minutes=app_config.ACCESS_TOKEN_TTL_MINUTES),
            refresh_token_ttl=timedelta(days=app_config.REFRESH_TOKEN_TTL_DAYS),
            session_ttl=timedelta(days=app_config.SESSION_TTL_DAYS),
        )
