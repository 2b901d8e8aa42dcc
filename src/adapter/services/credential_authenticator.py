"""
Bcrypt Credential Authenticator

Verifies email/password pairs against stored bcrypt hashes.
"""

import bcrypt
from sqlalchemy.orm import sessionmaker

from src.adapter.repositories.user_repository import UserRepository
from src.app.services.credential_authenticator import ICredentialAuthenticator
from src.domain.entities import User
from src.domain.errors import AuthenticationError

# Checked against when the user does not exist so response time does not
# reveal whether an email is registered.
_DUMMY_HASH = bcrypt.hashpw(b"dummy_password", bcrypt.gensalt(12))


def _password_matches(password: str, password_hash: bytes) -> bool:
    try:
        return bcrypt.checkpw(password.encode(), password_hash)
    except ValueError:
        # Password over bcrypt's 72-byte limit or a malformed stored hash
        return False


class BcryptCredentialAuthenticator(ICredentialAuthenticator):
    """
    Credential check backed by the users table.

    Business Rules:
    - Constant-time password comparison to prevent timing attacks
    - Unknown email and wrong password produce the same error
    - Inactive users are rejected after a successful password match
    """

    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory

    async def authenticate(self, email: str, password: str) -> User:
        async with self.session_factory() as session:
            user = await UserRepository(session).get_by_email(email)

        if user is None:
            _password_matches(password, _DUMMY_HASH)
            raise AuthenticationError()

        if not _password_matches(password, user.password_hash.encode()):
            raise AuthenticationError()

        if not user.is_active:
            raise AuthenticationError.user_disabled()

        return user
