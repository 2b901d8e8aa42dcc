"""
Authentication Use Cases

Login and refresh-token rotation.
"""

from .login_use_case import LoginUseCase
from .refresh_token_use_case import RefreshTokenUseCase
from .dtos import TokenPairResponse

__all__ = [
    # Use Cases
    "LoginUseCase",
    "RefreshTokenUseCase",
    # DTOs - Responses
    "TokenPairResponse",
]
