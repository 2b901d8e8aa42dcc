"""
User Management Use Cases

Session revocation for a user.
"""

from .revoke_sessions_use_case import RevokeSessionsUseCase

__all__ = [
    "RevokeSessionsUseCase",
]
