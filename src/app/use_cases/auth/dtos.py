"""
Authentication Use Case DTOs (Data Transfer Objects)

Response classes for the auth domain.
"""

from pydantic import BaseModel


class TokenPairResponse(BaseModel):
    """Access/refresh token pair returned by login and refresh"""

    access_token: str
    refresh_token: str
    token_type: str = "bearer"
