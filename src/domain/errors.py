"""
Auth Service Error Taxonomy

Every failure the auth core can surface carries an Error (code + message).
Use cases raise these instead of returning a result object; the routes in
src/api/routes catch them and translate each code into a ClientError or
ServerError with the matching HTTP status.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Error:
    code: str
    message: str


class AuthServiceError(Exception):
    """Base class for all auth core failures"""

    code = "AUTH_ERROR"
    message = "Authentication failed"

    def __init__(self, message: Optional[str] = None, code: Optional[str] = None):
        self.error = Error(code or self.code, message or self.message)
        super().__init__(self.error.message)


class AuthenticationError(AuthServiceError):
    """Bad credentials, unknown user or disabled account"""

    code = "INVALID_CREDENTIALS"
    message = "Invalid email or password"

    @classmethod
    def user_disabled(cls) -> "AuthenticationError":
        return cls("User account is disabled", code="USER_DISABLED")


class IntegrityError(AuthServiceError):
    """An identity proven to exist could not be resolved"""

    code = "IDENTITY_INTEGRITY"
    message = "Authenticated identity could not be resolved"


class InvalidRefreshToken(AuthServiceError):
    code = "INVALID_TOKEN"
    message = "Invalid refresh token"


class RefreshTokenExpired(AuthServiceError):
    code = "SESSION_EXPIRED"
    message = "Refresh token expired"


class InvalidRefreshTokenSignature(AuthServiceError):
    code = "INVALID_TOKEN_SIGNATURE"
    message = "Invalid refresh token signature"


class PermissionDenied(AuthServiceError):
    code = "FORBIDDEN"
    message = "Only admins can revoke other users' sessions"


class UserNotFound(AuthServiceError):
    code = "USER_NOT_FOUND"
    message = "User not found"
