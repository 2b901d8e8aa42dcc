"""
JWT Token Issuer

HS256 (by default) access and refresh tokens signed with python-jose.
"""

from datetime import UTC, datetime, timedelta
from typing import Optional
from uuid import uuid4

from jose import JWTError, jwt

from src.app.services.auth_config import AuthConfig
from src.app.services.token_issuer import ITokenIssuer
from src.domain.entities import User

ACCESS_TOKEN_TYPE = "access"
REFRESH_TOKEN_TYPE = "refresh"


class JwtTokenIssuer(ITokenIssuer):
    """python-jose implementation of the token issuer"""

    def __init__(self, config: AuthConfig):
        self.config = config

    def issue_access_token(self, user: User) -> str:
        """
        Generate JWT access token

        Claims: sub (email), user_id, role, type, iat, exp, jti
        """
        return self._encode(
            {
                "sub": user.email,
                "user_id": str(user.id),
                "role": user.role.value,
                "type": ACCESS_TOKEN_TYPE,
            },
            self.config.access_token_ttl,
        )

    def issue_refresh_token(self, user: User) -> str:
        return self._encode(
            {"sub": user.email, "type": REFRESH_TOKEN_TYPE},
            self.config.refresh_token_ttl,
        )

    def validate_refresh_token(self, token: str, user: User) -> bool:
        payload = self._decode(token)
        if payload is None:
            return False
        return (
            payload.get("type") == REFRESH_TOKEN_TYPE
            and payload.get("sub") == user.email
        )

    def decode_access_token(self, token: str) -> Optional[dict]:
        payload = self._decode(token)
        if payload is None or payload.get("type") != ACCESS_TOKEN_TYPE:
            return None
        return payload

    def _encode(self, claims: dict, ttl: timedelta) -> str:
        now = datetime.now(UTC)
        payload = {
            **claims,
            "iat": now,
            "exp": now + ttl,
            # Unique per token so two tokens minted in the same second differ
            "jti": uuid4().hex,
        }
        return jwt.encode(
            payload, self.config.jwt_secret, algorithm=self.config.jwt_algorithm
        )

    def _decode(self, token: str) -> Optional[dict]:
        if not isinstance(token, str) or not token:
            return None
        try:
            return jwt.decode(
                token, self.config.jwt_secret, algorithms=[self.config.jwt_algorithm]
            )
        except JWTError:
            return None
