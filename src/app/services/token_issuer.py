from abc import ABC, abstractmethod
from typing import Optional

from src.domain.entities import User


class ITokenIssuer(ABC):
    """Creates and validates signed bearer tokens"""

    @abstractmethod
    def issue_access_token(self, user: User) -> str:
        """Short-lived token carrying subject and role claims"""
        pass

    @abstractmethod
    def issue_refresh_token(self, user: User) -> str:
        """Long-lived token, persisted server-side as a Session"""
        pass

    @abstractmethod
    def validate_refresh_token(self, token: str, user: User) -> bool:
        """
        Check signature, expiry and subject of a refresh token.

        Never raises: malformed or tampered input yields False.
        """
        pass

    @abstractmethod
    def decode_access_token(self, token: str) -> Optional[dict]:
        """Decoded access token claims, or None if invalid"""
        pass
