"""
Login Use Case

Authenticates credentials and opens a new refresh-token session.
"""

import logging
from datetime import datetime
from typing import Callable

from src.app.services.auth_config import AuthConfig
from src.app.services.credential_authenticator import ICredentialAuthenticator
from src.app.services.token_issuer import ITokenIssuer
from src.app.services.unit_of_work import UnitOfWork
from src.domain.clock import utcnow
from src.domain.entities import Session
from src.domain.errors import IntegrityError
from .dtos import TokenPairResponse

logger = logging.getLogger(__name__)


class LoginUseCase:
    """
    Use case for user login and token issuance.

    Business Rules:
    - Credential check is delegated to the authenticator; its
      AuthenticationError propagates unchanged
    - An authenticated email that cannot be resolved is an integrity
      violation, never a silent success
    - Each login opens exactly one new session expiring after session_ttl
    """

    def __init__(
        self,
        uow: UnitOfWork,
        authenticator: ICredentialAuthenticator,
        token_issuer: ITokenIssuer,
        config: AuthConfig,
        clock: Callable[[], datetime] = utcnow,
    ):
        self.uow = uow
        self.authenticator = authenticator
        self.token_issuer = token_issuer
        self.config = config
        self.clock = clock

    async def execute(self, email: str, password: str) -> TokenPairResponse:
        """
        Execute login use case.

        Args:
            email: User email
            password: Plain text password

        Returns:
            TokenPairResponse with a fresh access and refresh token

        Raises:
            AuthenticationError: invalid credentials or disabled account
            IntegrityError: authenticated user vanished before lookup
        """
        await self.authenticator.authenticate(email, password)

        async with self.uow:
            user = await self.uow.users.get_by_email(email)
            if user is None:
                logger.error("Authenticated identity not found for login: %s", email)
                raise IntegrityError()

            access_token = self.token_issuer.issue_access_token(user)
            refresh_token = self.token_issuer.issue_refresh_token(user)

            session = Session.open(
                user.id, refresh_token, self.config.session_ttl, now=self.clock()
            )
            await self.uow.sessions.create(session)

            await self.uow.commit()

        logger.info("User %s logged in, session %s opened", user.id, session.id)

        return TokenPairResponse(
            access_token=access_token,
            refresh_token=refresh_token,
        )
