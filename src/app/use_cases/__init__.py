"""
Use Cases

Organized into domain folders:
- auth/: Login and token refresh
- users/: Session revocation
- admin/: Maintenance operations
"""

from .auth import (
    LoginUseCase,
    RefreshTokenUseCase,
    TokenPairResponse,
)
from .users import (
    RevokeSessionsUseCase,
)
from .admin import (
    PurgeExpiredSessionsUseCase,
    PurgeExpiredSessionsResponse,
)

__all__ = [
    # Auth
    "LoginUseCase",
    "RefreshTokenUseCase",
    "TokenPairResponse",
    # Users
    "RevokeSessionsUseCase",
    # Admin
    "PurgeExpiredSessionsUseCase",
    "PurgeExpiredSessionsResponse",
]
