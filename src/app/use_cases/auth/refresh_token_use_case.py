"""
Refresh Token Use Case

Exchanges a refresh token for a new token pair with single-use rotation.
"""

import logging
from datetime import datetime
from typing import Callable

from src.app.services.auth_config import AuthConfig
from src.app.services.token_issuer import ITokenIssuer
from src.app.services.unit_of_work import UnitOfWork
from src.domain.clock import utcnow
from src.domain.entities import Session
from src.domain.errors import (
    IntegrityError,
    InvalidRefreshToken,
    InvalidRefreshTokenSignature,
    RefreshTokenExpired,
)
from .dtos import TokenPairResponse

logger = logging.getLogger(__name__)


class RefreshTokenUseCase:
    """
    Use case for refreshing tokens.

    Business Rules:
    - Unknown token: rejected, nothing touched
    - Expired session: deleted eagerly, then rejected
    - Signature/subject mismatch: rejected, session left in place
    - Rotation: old session deleted and new one created in one transaction,
      so a consumed refresh token can never be replayed
    """

    def __init__(
        self,
        uow: UnitOfWork,
        token_issuer: ITokenIssuer,
        config: AuthConfig,
        clock: Callable[[], datetime] = utcnow,
    ):
        self.uow = uow
        self.token_issuer = token_issuer
        self.config = config
        self.clock = clock

    async def execute(self, refresh_token: str) -> TokenPairResponse:
        """
        Execute refresh token use case.

        Args:
            refresh_token: The refresh token to verify and rotate

        Returns:
            TokenPairResponse containing the rotated tokens

        Raises:
            InvalidRefreshToken: no live session for this token
            RefreshTokenExpired: session lapsed (and has been deleted)
            InvalidRefreshTokenSignature: token failed cryptographic validation
            IntegrityError: session owner no longer exists
        """
        async with self.uow:
            session = await self.uow.sessions.find_by_refresh_token(refresh_token)
            if session is None:
                raise InvalidRefreshToken()

            now = self.clock()
            if session.is_expired(now):
                await self.uow.sessions.delete(session)
                await self.uow.commit()
                logger.info("Evicted expired session %s", session.id)
                raise RefreshTokenExpired()

            user = await self.uow.users.get_by_id(session.user_id)
            if user is None:
                logger.error(
                    "Session %s references missing user %s", session.id, session.user_id
                )
                raise IntegrityError()

            if not self.token_issuer.validate_refresh_token(refresh_token, user):
                logger.warning("Refresh token signature rejected for session %s", session.id)
                raise InvalidRefreshTokenSignature()

            access_token = self.token_issuer.issue_access_token(user)
            new_refresh_token = self.token_issuer.issue_refresh_token(user)

            # Delete before insert: at most one live session per rotation chain
            if not await self.uow.sessions.delete(session):
                logger.warning("Session %s was rotated concurrently", session.id)
                raise InvalidRefreshToken()

            new_session = Session.open(
                user.id, new_refresh_token, self.config.session_ttl, now=now
            )
            await self.uow.sessions.create(new_session)

            await self.uow.commit()

        logger.info("Rotated session %s -> %s", session.id, new_session.id)

        return TokenPairResponse(
            access_token=access_token,
            refresh_token=new_refresh_token,
        )
