from abc import ABC, abstractmethod

from src.domain.entities import User


class ICredentialAuthenticator(ABC):
    """Verifies email/password credentials against the identity store"""

    @abstractmethod
    async def authenticate(self, email: str, password: str) -> User:
        """
        Return the authenticated user.

        Raises:
            AuthenticationError: unknown user, wrong password or disabled account
        """
        pass
